import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from flowcraft.application import file_manager
from flowcraft.application.export_manager import ExportManager, normalize_format
from flowcraft.application.picker import FilePicker, NoPicker
from flowcraft.application.templates import Template, list_templates
from flowcraft.core.config import CAPACITY, LOCK_TIMEOUT, OPEN_FILTERS, SAVE_FILTERS, export_filters
from flowcraft.core.event_bus import (
    DIAGRAM_EXPORTED,
    FILE_OPENED,
    FILE_SAVED,
    RECENT_CHANGED,
    EventBus,
)
from flowcraft.core.exceptions import IOFailure, LockUnavailable, UserCancelled
from flowcraft.core.recent import RecencyStore, RecentEntry
from flowcraft.core.state import StateFile
from flowcraft.core.validation import ValidationReport, validate
from flowcraft.utils.file_utils import canonical_path, display_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileContent:
    content: str
    path: str


class FlowCraftController:
    """
    Commands called by the UI layer. Holds no global state: the recent-files store,
    picker and event bus are passed in.

    The picker is always consulted before the store is touched, so a blocking
    dialog never runs under the store lock. Cancellation raises UserCancelled;
    failures raise IOFailure / LockUnavailable / UnsupportedFormat. A store that
    stays locked after save/open I/O succeeded only skips the history update.
    """

    def __init__(self, recent: RecencyStore, picker: Optional[FilePicker] = None, event_bus: Optional[EventBus] = None):
        self.recent = recent
        self.picker = picker if picker is not None else NoPicker()
        self.event_bus = event_bus if event_bus is not None else EventBus()

    def _resolve_path(self, path: Optional[str], prompt, filters, action: str) -> Path:
        if path:
            return canonical_path(path)
        chosen = prompt(filters)
        if not chosen:
            raise UserCancelled("%s cancelled" % action)
        return canonical_path(chosen)

    def _touch(self, path: Path) -> None:
        # The file I/O already succeeded; a busy store only costs the history update
        try:
            self.recent.record_access(str(path), display_name(path))
            entries = self.recent.list()
        except LockUnavailable as e:
            logger.warning("Recent files not updated for %s: %s", path, e)
            return
        self.event_bus.emit(RECENT_CHANGED, entries)

    def save(self, content: str, path: Optional[str] = None) -> str:
        """Write content to path (or a picked path) and record it as recent. Returns the path."""
        target = self._resolve_path(path, self.picker.pick_save, SAVE_FILTERS, "File save")
        file_manager.write_diagram(target, content)
        self._touch(target)
        self.event_bus.emit(FILE_SAVED, str(target))
        return str(target)

    def open(self, path: Optional[str] = None) -> FileContent:
        """Read path (or a picked path) and record it as recent."""
        source = self._resolve_path(path, self.picker.pick_open, OPEN_FILTERS, "File selection")
        content = file_manager.read_diagram(source)
        self._touch(source)
        result = FileContent(content=content, path=str(source))
        self.event_bus.emit(FILE_OPENED, result)
        return result

    def validate(self, content: str) -> ValidationReport:
        return validate(content)

    def list_recent(self) -> List[RecentEntry]:
        return self.recent.list()

    def clear_recent(self) -> None:
        """Empty the recent list. Raises IOFailure if the empty list could not be saved."""
        persisted = self.recent.clear()
        self.event_bus.emit(RECENT_CHANGED, [])
        if not persisted:
            raise IOFailure("Failed to save state: recent files cleared for this session only")

    def list_templates(self) -> List[Template]:
        return list_templates()

    def export(self, content: str, fmt: str, path: Optional[str] = None) -> str:
        """Placeholder export: writes the diagram text to path (or a picked path). Not recorded as recent."""
        key = normalize_format(fmt)
        target = self._resolve_path(path, self.picker.pick_save, export_filters(key), "Export")
        out = ExportManager.export(content, key, target)
        self.event_bus.emit(DIAGRAM_EXPORTED, {"path": str(out), "format": key})
        return str(out)


def create_controller(cfg: Optional[dict] = None, picker: Optional[FilePicker] = None, event_bus: Optional[EventBus] = None) -> FlowCraftController:
    """Build state file, recent store and controller from configuration (get_config() if cfg is None)."""
    if cfg is None:
        from flowcraft.config import get_config
        cfg = get_config()
    gateway = StateFile.from_config(cfg)
    recent_cfg = cfg.get("recent") or {}
    store = RecencyStore.load_or_default(
        gateway,
        capacity=recent_cfg.get("capacity", CAPACITY),
        lock_timeout=recent_cfg.get("lock_timeout", LOCK_TIMEOUT),
    )
    logger.info("Recent files: %s (%d entries)", gateway.path, len(store))
    return FlowCraftController(store, picker=picker, event_bus=event_bus)
