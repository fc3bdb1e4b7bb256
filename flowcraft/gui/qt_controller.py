"""Qt adapter for FlowCraftController: runs commands in QThread workers and emits Qt signals."""

from typing import Optional

from PySide6.QtCore import QObject, Signal

from flowcraft.application.controller import FlowCraftController
from flowcraft.application.export_manager import normalize_format
from flowcraft.core.config import OPEN_FILTERS, SAVE_FILTERS, export_filters
from flowcraft.core.event_bus import DIAGRAM_EXPORTED, FILE_OPENED, FILE_SAVED, RECENT_CHANGED
from flowcraft.core.exceptions import FlowCraftError, UnsupportedFormat
from flowcraft.gui.workers import CommandWorker


class QtController(QObject, FlowCraftController):
    """
    Wraps FlowCraftController and exposes its bus events as Qt signals.
    File dialogs run here on the GUI thread; the chosen path is then handed to a
    CommandWorker, so the store lock is only ever taken off the GUI thread.
    Cancellation emits commandCancelled, never commandFailed. Adapter only: no business logic.
    """

    recentChanged = Signal(object)      # list[RecentEntry]
    fileOpened = Signal(object)         # FileContent
    fileSaved = Signal(str)             # path
    exportFinished = Signal(str)        # path
    commandCancelled = Signal(str)      # command name
    commandFailed = Signal(str)         # human-readable cause

    def __init__(self, recent, picker=None, event_bus=None):
        QObject.__init__(self)
        FlowCraftController.__init__(self, recent, picker=picker, event_bus=event_bus)
        self._workers = set()
        self._unsubscribe = [
            self.event_bus.subscribe(RECENT_CHANGED, lambda _, data: self.recentChanged.emit(data)),
            self.event_bus.subscribe(FILE_OPENED, lambda _, data: self.fileOpened.emit(data)),
            self.event_bus.subscribe(FILE_SAVED, lambda _, data: self.fileSaved.emit(data)),
            self.event_bus.subscribe(DIAGRAM_EXPORTED, lambda _, data: self.exportFinished.emit(data["path"])),
        ]

    def detach(self) -> None:
        """Stop forwarding bus events (e.g. before the window is destroyed)."""
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []

    def _prompt(self, name: str, path: Optional[str], prompt, filters) -> Optional[str]:
        if path:
            return path
        chosen = prompt(filters)
        if not chosen:
            self.commandCancelled.emit(name)
            return None
        return chosen

    def _start(self, name: str, fn, *args) -> CommandWorker:
        worker = CommandWorker(name, fn, *args)
        worker.cancelled.connect(lambda: self.commandCancelled.emit(name))
        worker.failed.connect(self.commandFailed.emit)
        worker.finished.connect(lambda: self._on_worker_finished(worker))
        self._workers.add(worker)
        worker.start()
        return worker

    def _on_worker_finished(self, worker: CommandWorker):
        self._workers.discard(worker)
        worker.deleteLater()

    def open_file(self, path: Optional[str] = None) -> Optional[CommandWorker]:
        """Prompt (if needed) then read in a worker; result arrives via fileOpened."""
        chosen = self._prompt("open", path, self.picker.pick_open, OPEN_FILTERS)
        if chosen is None:
            return None
        return self._start("open", self.open, chosen)

    def save_file(self, content: str, path: Optional[str] = None) -> Optional[CommandWorker]:
        """Prompt (if needed) then write in a worker; result arrives via fileSaved."""
        chosen = self._prompt("save", path, self.picker.pick_save, SAVE_FILTERS)
        if chosen is None:
            return None
        return self._start("save", self.save, content, chosen)

    def export_diagram(self, content: str, fmt: str, path: Optional[str] = None) -> Optional[CommandWorker]:
        try:
            key = normalize_format(fmt)
        except UnsupportedFormat as e:
            self.commandFailed.emit(str(e))
            return None
        chosen = self._prompt("export", path, self.picker.pick_save, export_filters(key))
        if chosen is None:
            return None
        return self._start("export", self.export, content, key, chosen)

    def clear_recent_files(self) -> CommandWorker:
        return self._start("clear_recent", self.clear_recent)

    def refresh_recent(self) -> None:
        """Emit recentChanged with the current list (e.g. when the menu is first shown)."""
        try:
            self.recentChanged.emit(self.list_recent())
        except FlowCraftError as e:
            self.commandFailed.emit(str(e))
