"""
Export a diagram to a user-chosen path.
Placeholder: no rendering yet; the Mermaid source text is written as-is for every format.
"""
import logging
from pathlib import Path

from flowcraft.core.config import EXPORT_FORMATS
from flowcraft.core.exceptions import IOFailure, UnsupportedFormat
from flowcraft.utils.file_utils import ensure_dir

log = logging.getLogger(__name__)


def normalize_format(fmt: str) -> str:
    """'SVG' -> 'svg'. Raise UnsupportedFormat if not one of EXPORT_FORMATS."""
    key = (fmt or "").strip().lower()
    if key not in EXPORT_FORMATS:
        raise UnsupportedFormat("Unsupported format: %r (expected one of %s)" % (fmt, ", ".join(EXPORT_FORMATS)))
    return key


class ExportManager:
    """Write diagram exports. Stateless; all methods static."""

    @staticmethod
    def export(content: str, fmt: str, export_path: Path) -> Path:
        """
        Write `content` to export_path for format `fmt` (png, svg, pdf).
        Raises UnsupportedFormat for other formats, IOFailure on write errors.
        """
        key = normalize_format(fmt)
        export_path = Path(export_path)
        try:
            ensure_dir(export_path.parent)
            export_path.write_bytes(content.encode("utf-8"))
        except OSError as e:
            raise IOFailure("Failed to export: %s" % e) from e
        log.info("Exported %s: %s", key, export_path)
        return export_path
