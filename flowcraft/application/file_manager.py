"""Diagram file open/save. Errors surface as IOFailure with the OS cause."""

import logging
from pathlib import Path

from flowcraft.core.exceptions import IOFailure
from flowcraft.utils.file_utils import ensure_dir

log = logging.getLogger(__name__)


def read_diagram(path: Path) -> str:
    """Return the file's text (UTF-8). Raise IOFailure on any read/decode error."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise IOFailure("Failed to read file: %s" % e) from e
    log.info("Opened %s (%d chars)", path, len(content))
    return content


def write_diagram(path: Path, content: str) -> Path:
    """Write text to path (UTF-8), creating the parent directory. Raise IOFailure on error."""
    path = Path(path)
    try:
        ensure_dir(path.parent)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise IOFailure("Failed to save file: %s" % e) from e
    log.info("Saved %s (%d chars)", path, len(content))
    return path
