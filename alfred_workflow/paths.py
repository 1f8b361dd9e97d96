from __future__ import annotations

import os
import sys
from pathlib import Path

from .config import settings
from .errors import MarkerNotFoundError
from .logging_utils import setup_workflow_logger

logger = setup_workflow_logger("alfred_workflow.paths", settings.effective_log_level)


def exists(path: str | Path) -> bool:
    return Path(path).exists()


def find_file(filename: str, start_dir: str | Path) -> Path:
    """Search for filename in start_dir and each of its ancestors.

    Returns the full path of the first match. Raises MarkerNotFoundError
    when the filesystem root is reached without a match.
    """
    start = Path(start_dir).absolute()
    for dirpath in (start, *start.parents):
        p = dirpath / filename
        if exists(p):
            return p
    raise MarkerNotFoundError(filename, [start])


def _candidate_dirs() -> list[Path]:
    dirs = []
    try:
        cwd = Path.cwd().resolve()
        logger.debug(f"cwd={cwd}")
        dirs.append(cwd)
    except OSError:
        pass
    if sys.argv and sys.argv[0]:
        dirs.append(Path(sys.argv[0]).absolute().parent)
    return dirs


def workflow_root(marker: str | None = None) -> Path:
    """Return the workflow root directory.

    Looks for the marker file (info.plist by default) in or above the
    current working directory, then the running script's directory.
    """
    if settings.workflow_root:
        return Path(settings.workflow_root)

    marker = marker or settings.marker_file
    candidates = _candidate_dirs()
    for dirpath in candidates:
        try:
            p = find_file(marker, dirpath)
        except MarkerNotFoundError:
            continue
        logger.debug(f"{marker} found in {p.parent}")
        return p.parent
    raise MarkerNotFoundError(marker, candidates)


def shorten_path(path: str | Path) -> str:
    """Replace the home directory prefix of path with ~."""
    path = str(path)
    home = os.path.expanduser("~").rstrip("/")
    if home in ("", "~"):
        return path
    if path == home or path.startswith(home + "/"):
        return "~" + path[len(home):]
    return path
