import logging
import time
from typing import Any, Dict, Optional


def setup_workflow_logger(name: str = "alfred_workflow", level: str = "INFO") -> logging.Logger:
    """Setup standardized logger for workflow runs with UTF-8 support.

    Records go to stderr; Alfred reads the feedback document from stdout.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:  # Avoid duplicate handlers
        handler = logging.StreamHandler()
        if hasattr(handler.stream, 'reconfigure'):
            handler.stream.reconfigure(encoding='utf-8')

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, level.upper()))
    return logger


def log_send(logger: logging.Logger,
             summary: Dict[str, Any],
             duration_ms: float,
             error: Optional[str] = None) -> None:
    """Log one feedback send in a structured format."""

    log_data = dict(summary)
    log_data["duration_ms"] = round(duration_ms, 1)

    if error:
        log_data["error"] = error
        logger.error(f"❌ Send Feedback: {log_data}")
    else:
        logger.info(f"✅ Send Feedback: {log_data}")


def summarize_feedback(document: Dict[str, Any]) -> Dict[str, Any]:
    """Extract key information from a serialized feedback document for logging."""
    items = document.get("items", [])
    summary: Dict[str, Any] = {"items_count": len(items)}

    if items:
        titles = []
        for item in items[:3]:
            title = item.get("title", "")
            # Truncate very long titles but keep reasonable length
            if len(title) > 60:
                title = title[:57] + "..."
            titles.append(title)
        summary["sample_titles"] = titles
        if len(items) > 3:
            summary["more_items"] = len(items) - 3

    # Encoded args carry variables to the next run
    encoded = sum(1 for item in items if str(item.get("arg", "")).startswith('{"alfredworkflow"'))
    if encoded:
        summary["items_with_variables"] = encoded

    with_mods = sum(1 for item in items if "mods" in item)
    if with_mods:
        summary["items_with_mods"] = with_mods

    return summary


def elapsed_ms(start_time: float) -> float:
    return (time.time() - start_time) * 1000
