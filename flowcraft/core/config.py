"""
Service constants. No run values that belong in YAML (see flowcraft.config).
Env names, app namespace, recent-list capacity, file filters, export formats.
"""
import os
import sys
from pathlib import Path
from typing import Optional

# ---------------------------------------------------------------------------
# Application namespace / persisted snapshot
# ---------------------------------------------------------------------------
APP_NAMESPACE = "flowcraft-studio"
STATE_FILE = "state.json"
CORRUPT_SUFFIX = ".corrupt"

# ---------------------------------------------------------------------------
# Recent files
# ---------------------------------------------------------------------------
CAPACITY = 10
LOCK_TIMEOUT = 5.0  # seconds

# ---------------------------------------------------------------------------
# Env var names
# ---------------------------------------------------------------------------
ENV_CONFIG = "FLOWCRAFT_CONFIG"
ENV_DATA_DIR = "FLOWCRAFT_DATA_DIR"
ENV_LOG_LEVEL = "FLOWCRAFT_LOG_LEVEL"
ENV_LOG_DIR = "FLOWCRAFT_LOG_DIR"

# ---------------------------------------------------------------------------
# File picker filters: (label, extensions without dot)
# ---------------------------------------------------------------------------
OPEN_FILTERS = (
    ("Mermaid Files", ("mmd", "mermaid", "txt")),
    ("All Files", ("*",)),
)
SAVE_FILTERS = (
    ("Mermaid Files", ("mmd", "mermaid")),
    ("All Files", ("*",)),
)

# ---------------------------------------------------------------------------
# Export (placeholder: writes diagram text regardless of format)
# ---------------------------------------------------------------------------
EXPORT_FORMATS = ("png", "svg", "pdf")


def export_filters(fmt: str) -> tuple:
    """Picker filter for one export format, e.g. (("SVG Files", ("svg",)),)."""
    return (("%s Files" % fmt.upper(), (fmt,)),)


def default_data_dir() -> Path:
    """
    Per-user application data directory for this OS (without the app namespace).
    FLOWCRAFT_DATA_DIR wins when set.
    """
    env_dir = os.environ.get(ENV_DATA_DIR, "").strip()
    if env_dir:
        return Path(env_dir).expanduser()
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_DATA_HOME", "").strip()
    if xdg:
        return Path(xdg)
    return Path.home() / ".local" / "share"


def state_file_path(data_dir: Optional[Path] = None, namespace: str = APP_NAMESPACE, filename: str = STATE_FILE) -> Path:
    """Location of the recent-files snapshot: <data_dir>/<namespace>/<filename>."""
    base = Path(data_dir).expanduser() if data_dir else default_data_dir()
    return base / namespace / filename
