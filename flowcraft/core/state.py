"""
Recent-files snapshot persistence.
StateFile is the gateway: one blob at a fixed path, read -> bytes or None, write replaces it.
encode_snapshot / decode_snapshot map entries to the JSON document:

    { "recent_files": [ { "path": ..., "name": ..., "last_opened": "2024-05-01T09:30:00Z" }, ... ] }
"""
import json
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional

from flowcraft.utils.file_utils import atomic_write_bytes

from .config import APP_NAMESPACE, CORRUPT_SUFFIX, STATE_FILE, state_file_path
from .exceptions import CorruptSnapshot, IOFailure
from .logger import get_logger

logger = get_logger("state")

SNAPSHOT_KEY = "recent_files"
_EXTRA_FRACTION = re.compile(r"(\.\d{6})\d+")


class StateFile:
    """Durable single-blob storage for the snapshot. Single writer."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    @classmethod
    def from_config(cls, cfg: dict) -> "StateFile":
        return cls(state_file_path(
            cfg.get("data_dir"),
            cfg.get("app_namespace") or APP_NAMESPACE,
            cfg.get("state_file") or STATE_FILE,
        ))

    def read(self) -> Optional[bytes]:
        """Snapshot bytes, or None when no snapshot exists. Raises IOFailure on read errors."""
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise IOFailure("Failed to read state file %s: %s" % (self.path, e)) from e

    def write(self, data: bytes) -> None:
        """Replace the snapshot. Creates the parent directory. Raises IOFailure."""
        try:
            atomic_write_bytes(self.path, data)
        except OSError as e:
            raise IOFailure("Failed to write state file %s: %s" % (self.path, e)) from e

    def quarantine(self) -> Optional[Path]:
        """Move the current snapshot aside to <name>.corrupt. Returns the new path, or None on failure."""
        target = self.path.with_name(self.path.name + CORRUPT_SUFFIX)
        try:
            self.path.replace(target)
        except OSError as e:
            logger.warning("Could not quarantine %s: %s", self.path, e)
            return None
        return target


def format_timestamp(ts: datetime) -> str:
    """ISO-8601 UTC with a Z suffix."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def parse_timestamp(raw: str) -> datetime:
    """Accepts Z or +00:00 offsets; naive values are taken as UTC. Raises ValueError/TypeError/OverflowError."""
    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    # nanosecond precision (older snapshots) -> microseconds
    text = _EXTRA_FRACTION.sub(r"\1", text)
    ts = datetime.fromisoformat(text)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def encode_snapshot(entries: Iterable) -> bytes:
    """Serialize RecentEntry-like objects (path, display_name, last_opened) in order."""
    doc = {
        SNAPSHOT_KEY: [
            {"path": e.path, "name": e.display_name, "last_opened": format_timestamp(e.last_opened)}
            for e in entries
        ]
    }
    return json.dumps(doc, indent=2, ensure_ascii=False).encode("utf-8")


def decode_snapshot(data: bytes) -> list[tuple[str, str, datetime]]:
    """
    Parse snapshot bytes into (path, name, last_opened) tuples in stored order.
    Any structural problem raises CorruptSnapshot.
    """
    try:
        doc = json.loads(data.decode("utf-8"))
        items = doc[SNAPSHOT_KEY]
        if not isinstance(items, list):
            raise TypeError("%s is not a list" % SNAPSHOT_KEY)
        out = []
        for item in items:
            path, name = item["path"], item["name"]
            if not isinstance(path, str) or not isinstance(name, str):
                raise TypeError("path and name must be strings")
            out.append((path, name, parse_timestamp(item["last_opened"])))
        return out
    # RecursionError: deeply nested JSON; OverflowError: timestamps at the datetime range edge
    except (
        UnicodeDecodeError,
        json.JSONDecodeError,
        KeyError,
        TypeError,
        ValueError,
        AttributeError,
        OverflowError,
        RecursionError,
    ) as e:
        raise CorruptSnapshot("Undecodable recent-files snapshot: %s" % e) from e
