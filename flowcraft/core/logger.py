"""
Logging: level, console and file handlers, timestamps.
Configure once with setup_logging(); use get_logger() everywhere.
"""
import logging
import os
from pathlib import Path
from typing import Optional

from .config import ENV_LOG_LEVEL, ENV_LOG_DIR

ROOT_NAME = "flowcraft"
LOG_FILE = "flowcraft.log"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_setup_done = False


class FlowCraftFormatter(logging.Formatter):
    """Formatter with timestamp, level and logger name; thread name added below INFO."""

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None):
        fmt = fmt or "%(asctime)s [%(levelname)s] %(name)s%(thread_tag)s %(message)s"
        super().__init__(fmt=fmt, datefmt=datefmt or _DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        # Commands run on worker threads; show which one for debug output only
        tag = " (%s)" % record.threadName if record.levelno < logging.INFO else ""
        setattr(record, "thread_tag", tag)
        return super().format(record)


def _get_level_from_env() -> int:
    raw = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    return getattr(logging, raw, logging.INFO)


def _ensure_log_dir(log_dir: Optional[Path]) -> Optional[Path]:
    raw = log_dir or os.environ.get(ENV_LOG_DIR)
    if not raw:
        return None
    path = Path(raw)
    path.mkdir(parents=True, exist_ok=True)
    return path


def level_from_name(name: Optional[str]) -> Optional[int]:
    """'DEBUG' -> logging.DEBUG; None or unknown -> None."""
    if not name:
        return None
    value = getattr(logging, str(name).strip().upper(), None)
    return value if isinstance(value, int) else None


def _log_file_target(log_file, log_dir) -> Optional[Path]:
    """Explicit log_file wins; otherwise <log_dir or FLOWCRAFT_LOG_DIR>/flowcraft.log; else no file."""
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        return path
    directory = _ensure_log_dir(Path(log_dir) if log_dir else None)
    return directory / LOG_FILE if directory is not None else None


def setup_logging(
    level: Optional[int] = None,
    log_file: Optional[os.PathLike | str] = None,
    log_dir: Optional[os.PathLike | str] = None,
    format_string: Optional[str] = None,
    use_console: bool = True,
) -> None:
    """
    Attach console and/or file handlers to the flowcraft logger.
    Only the first call has an effect; later calls return immediately.
    """
    global _setup_done
    if _setup_done:
        return

    level = _get_level_from_env() if level is None else level
    handlers: list[logging.Handler] = []
    if use_console:
        handlers.append(logging.StreamHandler())
    target = _log_file_target(log_file, log_dir)
    if target is not None:
        handlers.append(logging.FileHandler(target, encoding="utf-8"))

    root = logging.getLogger(ROOT_NAME)
    root.setLevel(level)
    formatter = FlowCraftFormatter(format_string)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    _setup_done = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under flowcraft.* (e.g. flowcraft.recent)."""
    if not name.startswith(ROOT_NAME + "."):
        name = f"{ROOT_NAME}.{name}"
    return logging.getLogger(name)
