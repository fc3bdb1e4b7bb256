"""QFileDialog-backed FilePicker. Must be called on the GUI thread."""

from typing import Optional, Sequence

from PySide6.QtWidgets import QFileDialog, QWidget

from flowcraft.application.picker import FileFilter


def qt_filter_string(filters: Sequence[FileFilter]) -> str:
    """(("Mermaid Files", ("mmd", "mermaid")), ("All Files", ("*",))) -> 'Mermaid Files (*.mmd *.mermaid);;All Files (*)'"""
    parts = []
    for label, exts in filters:
        patterns = " ".join("*" if ext == "*" else "*.%s" % ext for ext in exts)
        parts.append("%s (%s)" % (label, patterns))
    return ";;".join(parts)


class QtFilePicker:
    """Blocking open/save dialogs. Returns the chosen path, or None when the dialog is dismissed."""

    def __init__(self, parent: Optional[QWidget] = None, start_dir: str = ""):
        self._parent = parent
        self._start_dir = start_dir

    def pick_open(self, filters: Sequence[FileFilter]) -> Optional[str]:
        path, _ = QFileDialog.getOpenFileName(
            self._parent,
            "Open Diagram",
            self._start_dir,
            qt_filter_string(filters),
        )
        return path or None

    def pick_save(self, filters: Sequence[FileFilter]) -> Optional[str]:
        path, _ = QFileDialog.getSaveFileName(
            self._parent,
            "Save Diagram",
            self._start_dir,
            qt_filter_string(filters),
        )
        return path or None
