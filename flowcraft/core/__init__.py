from .config import CAPACITY, APP_NAMESPACE, EXPORT_FORMATS
from .diagram_types import DiagramKind, detect_kind, register_keyword
from .event_bus import EventBus
from .exceptions import (
    FlowCraftError,
    ConfigError,
    UserCancelled,
    IOFailure,
    CorruptSnapshot,
    LockUnavailable,
    UnsupportedFormat,
)
from .logger import get_logger, setup_logging
from .recent import RecentEntry, RecencyStore
from .state import StateFile, encode_snapshot, decode_snapshot
from .validation import ValidationReport, validate

__all__ = [
    "CAPACITY", "APP_NAMESPACE", "EXPORT_FORMATS",
    "DiagramKind", "detect_kind", "register_keyword",
    "EventBus",
    "FlowCraftError", "ConfigError", "UserCancelled", "IOFailure",
    "CorruptSnapshot", "LockUnavailable", "UnsupportedFormat",
    "get_logger", "setup_logging",
    "RecentEntry", "RecencyStore",
    "StateFile", "encode_snapshot", "decode_snapshot",
    "ValidationReport", "validate",
]
