from __future__ import annotations

import os
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO, Tuple

from .config import settings
from .errors import SerializationError
from .logging_utils import setup_workflow_logger, log_send, summarize_feedback, elapsed_ms
from .models import HasVariables, Icon, IconType, Item, VariableStore
from .paths import shorten_path
from .presentation.serializers import FeedbackSerializer

logger = setup_workflow_logger("alfred_workflow.feedback", settings.effective_log_level)


class Feedback(HasVariables):
    """Results returned to Alfred for one run of a script filter.

    Items keep their insertion order. Variables set here are inherited by
    every Item and Modifier, and are only emitted inside encoded args.
    """

    def __init__(self):
        self._items: List[Item] = []
        self._vars = VariableStore()
        self.serializer = FeedbackSerializer()

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def new_item(self, title: str) -> Item:
        """Append a new Item and return it for further configuration."""
        item = Item(title=title)
        item.variables.parent = self._vars
        self._items.append(item)
        return item

    def new_file_item(self, path: str | Path) -> Item:
        """Append an Item representing a file, with Alfred's file actions enabled."""
        path = str(path)
        item = self.new_item(os.path.basename(path.rstrip("/")) or path)
        item.subtitle = shorten_path(path)
        item.uid = path
        item.arg = path
        item.valid = True
        item.is_file = True
        item.icon = Icon(path, IconType.FILE_ICON)
        return item

    def clear(self) -> None:
        """Remove all items. Variables are kept."""
        self._items.clear()

    def to_dict(self) -> Dict[str, Any]:
        return self.serializer.to_dict(self._items)

    def to_json(self) -> str:
        return self.serializer.to_json(self._items)

    def send(self, stream: Optional[TextIO] = None) -> str:
        """Write the feedback document to stream (stdout by default).

        The document is fully encoded before anything is written, so a
        SerializationError leaves the stream untouched.
        """
        stream = stream if stream is not None else sys.stdout
        start_time = time.time()

        try:
            document = self.to_dict()
            text = self.serializer.dumps(document)
        except SerializationError as e:
            log_send(logger, {"items_count": len(self._items)}, elapsed_ms(start_time), error=str(e))
            raise

        buffer = getattr(stream, "buffer", None)
        if buffer is not None:
            stream.flush()
            buffer.write(text.encode("utf-8"))
            buffer.flush()
        else:
            stream.write(text)
            stream.flush()

        log_send(logger, summarize_feedback(document), elapsed_ms(start_time))
        return text
