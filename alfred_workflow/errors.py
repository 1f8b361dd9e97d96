from __future__ import annotations

from pathlib import Path
from typing import Sequence


class AlfredWorkflowError(Exception):
    """Base class for errors raised by alfred_workflow."""


class SerializationError(AlfredWorkflowError, ValueError):
    """Feedback could not be turned into a valid JSON document."""


class MarkerNotFoundError(AlfredWorkflowError, FileNotFoundError):
    """A marker file was not found in or above any of the start directories."""

    def __init__(self, filename: str, start_dirs: Sequence[Path]):
        self.filename = filename
        self.start_dirs = list(start_dirs)
        dirs = ", ".join(str(d) for d in self.start_dirs) or "(no directories)"
        super().__init__(f"File {filename} not found in or above {dirs}")
