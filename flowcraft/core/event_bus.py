"""
In-process event bus between the controller and its adapters (Qt, CLI).
Callbacks receive (event_name, data) and may run on a worker thread.
"""
import threading
from collections import defaultdict
from typing import Any, Callable

from .logger import get_logger

logger = get_logger("event_bus")

RECENT_CHANGED = "recent_changed"       # data: list[RecentEntry]
FILE_OPENED = "file_opened"             # data: FileContent
FILE_SAVED = "file_saved"               # data: path (str)
DIAGRAM_EXPORTED = "diagram_exported"   # data: {"path": str, "format": str}

Callback = Callable[[str, Any], None]


class EventBus:
    """Thread-safe event_name -> callbacks map. A failing callback is logged and skipped."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[Callback]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, event_name: str, callback: Callback) -> Callable[[], None]:
        """Register callback; returns a function that removes this registration."""
        with self._lock:
            self._handlers[event_name].append(callback)
        return lambda: self.unsubscribe(event_name, callback)

    def unsubscribe(self, event_name: str, callback: Callback) -> None:
        with self._lock:
            handlers = self._handlers.get(event_name)
            if not handlers or callback not in handlers:
                return
            handlers.remove(callback)
            if not handlers:
                del self._handlers[event_name]

    def emit(self, event_name: str, data: Any = None) -> int:
        """Call every callback for event_name outside the lock. Returns how many ran cleanly."""
        with self._lock:
            callbacks = list(self._handlers.get(event_name, ()))
        delivered = 0
        for cb in callbacks:
            try:
                cb(event_name, data)
                delivered += 1
            except Exception as e:
                logger.exception("EventBus callback error [%s]: %s", event_name, e)
        return delivered
