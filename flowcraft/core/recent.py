"""
Recent files: bounded, deduplicated, most-recent-first list backed by a StateFile snapshot.

Concurrency: one threading.Lock guards the list. Each mutation runs as a single
critical section

    acquire -> drop same path -> insert at 0 -> truncate -> persist snapshot -> release

so concurrent callers never see or persist a half-applied update. list() takes the
same lock. Persistence failures are logged; the in-memory list stays authoritative.
"""
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterator, List, Optional

from .config import CAPACITY, LOCK_TIMEOUT
from .exceptions import CorruptSnapshot, FlowCraftError, LockUnavailable
from .logger import get_logger
from .state import StateFile, decode_snapshot, encode_snapshot, format_timestamp

logger = get_logger("recent")


@dataclass(frozen=True)
class RecentEntry:
    path: str
    display_name: str
    last_opened: datetime

    def to_dict(self) -> dict:
        return {"path": self.path, "name": self.display_name, "last_opened": format_timestamp(self.last_opened)}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecencyStore:
    """
    MRU list of RecentEntry. Mutate only through record_access() and clear();
    every mutation writes a full snapshot through the gateway.
    """

    def __init__(
        self,
        gateway: StateFile,
        entries: Optional[List[RecentEntry]] = None,
        capacity: int = CAPACITY,
        lock_timeout: float = LOCK_TIMEOUT,
        clock=_utcnow,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._gateway = gateway
        self._capacity = capacity
        self._lock_timeout = lock_timeout
        self._clock = clock
        self._entries: List[RecentEntry] = _dedupe(entries or [])[:capacity]
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @classmethod
    def load_or_default(
        cls,
        gateway: StateFile,
        capacity: int = CAPACITY,
        lock_timeout: float = LOCK_TIMEOUT,
    ) -> "RecencyStore":
        """
        Seed from the persisted snapshot. Missing or unreadable -> empty store.
        Undecodable -> file moved aside to <name>.corrupt, warning logged, empty store.
        """
        entries: List[RecentEntry] = []
        try:
            data = gateway.read()
        except FlowCraftError as e:
            logger.warning("Recent files unavailable, starting empty: %s", e)
            data = None
        if data is not None:
            try:
                entries = [RecentEntry(p, n, ts) for p, n, ts in decode_snapshot(data)]
            except CorruptSnapshot as e:
                moved = gateway.quarantine()
                logger.warning("%s; starting with empty history (backup: %s)", e, moved)
        return cls(gateway, entries, capacity=capacity, lock_timeout=lock_timeout)

    @contextmanager
    def _locked(self) -> Iterator[None]:
        if not self._lock.acquire(timeout=self._lock_timeout):
            raise LockUnavailable("Failed to access recent files (lock timeout %.1fs)" % self._lock_timeout)
        try:
            yield
        finally:
            self._lock.release()

    def _persist(self) -> bool:
        # Called with the lock held
        try:
            self._gateway.write(encode_snapshot(self._entries))
        except FlowCraftError as e:
            logger.warning("Recent files not saved: %s", e)
            return False
        return True

    def record_access(self, path: str, display_name: str) -> None:
        """Insert or promote `path` to the front, truncate to capacity, persist."""
        with self._locked():
            entry = RecentEntry(path=path, display_name=display_name, last_opened=self._clock())
            kept = [e for e in self._entries if e.path != path]
            self._entries = [entry] + kept[: self._capacity - 1]
            self._persist()
        logger.debug("Recorded recent file %s", path)

    def list(self) -> List[RecentEntry]:
        """Copy of the current order, most recent first."""
        with self._locked():
            return list(self._entries)

    def clear(self) -> bool:
        """Empty the list and persist. Returns False if the empty snapshot was not written."""
        with self._locked():
            self._entries = []
            return self._persist()

    def __len__(self) -> int:
        with self._locked():
            return len(self._entries)


def _dedupe(entries: List[RecentEntry]) -> List[RecentEntry]:
    """Keep the first occurrence of each path (snapshot order is most recent first)."""
    seen = set()
    out = []
    for e in entries:
        if e.path in seen:
            continue
        seen.add(e.path)
        out.append(e)
    return out
