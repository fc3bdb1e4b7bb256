"""File picker collaborator: prompt for a path, return it or None when cancelled."""

from typing import Optional, Protocol, Sequence, Tuple

# (label, extensions without dot), e.g. ("Mermaid Files", ("mmd", "mermaid"))
FileFilter = Tuple[str, Sequence[str]]


class FilePicker(Protocol):
    """Blocking prompt. None means the user dismissed the dialog."""

    def pick_open(self, filters: Sequence[FileFilter]) -> Optional[str]:
        ...

    def pick_save(self, filters: Sequence[FileFilter]) -> Optional[str]:
        ...


class NoPicker:
    """Picker for headless use (CLI): every prompt is a cancellation."""

    def pick_open(self, filters: Sequence[FileFilter]) -> Optional[str]:
        return None

    def pick_save(self, filters: Sequence[FileFilter]) -> Optional[str]:
        return None
