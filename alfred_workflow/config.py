from __future__ import annotations

import os
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# Load environment variables from .env (if present)
load_dotenv()

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    # Defaults come from the environment, so check them too
    model_config = ConfigDict(validate_default=True)

    # File whose presence marks the workflow root directory
    marker_file: str = os.getenv("ALFRED_WORKFLOW_MARKER", "info.plist")

    # Explicit workflow root; skips the upward search when set
    workflow_root: str = os.getenv("ALFRED_WORKFLOW_ROOT", "")

    # Level for the workflow logger (DEBUG, INFO, WARNING, ...)
    log_level: str = os.getenv("ALFRED_WORKFLOW_LOG_LEVEL", "INFO")

    # Alfred sets alfred_debug=1 while its debugger is open
    debug: bool = os.getenv("alfred_debug", "") == "1"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"ALFRED_WORKFLOW_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {value!r}"
            )
        return level

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


settings = Settings()
