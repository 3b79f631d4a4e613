# globe_graph/overlay.py
"""
Info overlay text.

Keeps a small ordered map of labelled snippets ("Nodes 7", "Object 3", ...)
and joins the non-empty ones with " - " for display. Picking updates it
through SelectionEvents coming from the scene adapter.
"""

import logging
from typing import Dict

from .scene import SelectionEvent

logger = logging.getLogger(__name__)

SEPARATOR = " - "


class InfoOverlay:
    def __init__(self):
        self._entries: Dict[str, str] = {}

    def set(self, key: str, text: str) -> None:
        self._entries[key] = text

    def clear(self, key: str) -> None:
        self._entries.pop(key, None)

    def get(self, key: str) -> str:
        return self._entries.get(key, "")

    def on_selection(self, event: SelectionEvent) -> None:
        if event.object_id is None:
            self.clear("select")
        else:
            self.set("select", f"Object {event.object_id}")
        logger.debug("Selection changed: %s", event.object_id)

    def text(self) -> str:
        return SEPARATOR.join(t for t in self._entries.values() if t)

    def __len__(self) -> int:
        return len(self._entries)
