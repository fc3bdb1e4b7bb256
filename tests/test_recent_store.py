"""RecencyStore: ordering, dedup, capacity, persistence, corrupt snapshots, locking."""
import json
import threading
from datetime import datetime, timedelta, timezone

import pytest

from flowcraft.core.config import CAPACITY
from flowcraft.core.exceptions import IOFailure, LockUnavailable
from flowcraft.core.recent import RecencyStore, RecentEntry
from flowcraft.core.state import StateFile


def _paths(store):
    return [e.path for e in store.list()]


class FailingStateFile(StateFile):
    """Gateway whose writes always fail."""

    def write(self, data):
        raise IOFailure("Failed to write state file: disk full")


def test_new_store_is_empty(store, state_file):
    assert store.list() == []
    assert not state_file.path.exists()


def test_record_puts_latest_first(store):
    store.record_access("/d/a.mmd", "a.mmd")
    store.record_access("/d/b.mmd", "b.mmd")
    assert _paths(store) == ["/d/b.mmd", "/d/a.mmd"]
    assert store.list()[0].display_name == "b.mmd"


def test_capacity_keeps_most_recent_distinct_paths(store):
    paths = ["/d/%02d.mmd" % i for i in range(15)]
    for p in paths:
        store.record_access(p, p.rsplit("/", 1)[-1])
    assert len(store.list()) == CAPACITY
    assert _paths(store) == list(reversed(paths))[:CAPACITY]


def test_rerecord_promotes_without_duplicate(store):
    for name in ("a", "b", "c"):
        store.record_access("/d/%s" % name, name)
    store.record_access("/d/a", "a")
    assert _paths(store) == ["/d/a", "/d/c", "/d/b"]


def test_rerecord_at_capacity_does_not_drop_others(store):
    for i in range(CAPACITY):
        store.record_access("/d/%d" % i, str(i))
    store.record_access("/d/0", "0")
    assert len(store.list()) == CAPACITY
    assert _paths(store)[0] == "/d/0"
    assert set(_paths(store)) == {"/d/%d" % i for i in range(CAPACITY)}


def test_rerecord_refreshes_timestamp(state_file):
    t0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
    ticks = iter([t0, t0 + timedelta(minutes=1), t0 + timedelta(minutes=2)])
    store = RecencyStore(state_file, clock=lambda: next(ticks))
    store.record_access("/d/a", "a")
    store.record_access("/d/b", "b")
    store.record_access("/d/a", "a")
    assert store.list()[0].last_opened == t0 + timedelta(minutes=2)


def test_list_returns_a_copy(store):
    store.record_access("/d/a", "a")
    view = store.list()
    view.clear()
    assert _paths(store) == ["/d/a"]


def test_every_mutation_writes_snapshot(store, state_file):
    store.record_access("/d/a.mmd", "a.mmd")
    doc = json.loads(state_file.path.read_text(encoding="utf-8"))
    assert [item["path"] for item in doc["recent_files"]] == ["/d/a.mmd"]
    assert doc["recent_files"][0]["name"] == "a.mmd"
    assert doc["recent_files"][0]["last_opened"].endswith("Z")


def test_reload_round_trip(store, state_file):
    for name in ("x", "y", "z"):
        store.record_access("/d/%s.mmd" % name, "%s.mmd" % name)
    reloaded = RecencyStore.load_or_default(state_file)
    assert reloaded.list() == store.list()


def test_clear_persists_empty_list(store, state_file):
    store.record_access("/d/a", "a")
    assert store.clear() is True
    assert store.list() == []
    assert RecencyStore.load_or_default(state_file).list() == []


def test_corrupt_snapshot_yields_empty_store_and_backup(state_file):
    state_file.path.parent.mkdir(parents=True)
    state_file.path.write_text("{not json", encoding="utf-8")
    store = RecencyStore.load_or_default(state_file)
    assert store.list() == []
    backup = state_file.path.with_name(state_file.path.name + ".corrupt")
    assert backup.read_text(encoding="utf-8") == "{not json"
    assert not state_file.path.exists()


@pytest.mark.parametrize(
    "payload",
    [
        b"[]",
        b'{"recent_files": {}}',
        b'{"recent_files": [{"path": "/a"}]}',
        b'{"recent_files": [{"path": "/a", "name": "a", "last_opened": "yesterday"}]}',
        b"\xff\xfe",
        b'{"recent_files": [{"path": "/a", "name": "a", "last_opened": "0001-01-01T00:00:00+01:00"}]}',
        b'{"recent_files": [{"path": "/a", "name": "a", "last_opened": "9999-12-31T23:59:59-01:00"}]}',
        b"[" * 100000,
    ],
)
def test_malformed_snapshots_are_discarded(state_file, payload):
    state_file.path.parent.mkdir(parents=True)
    state_file.path.write_bytes(payload)
    assert RecencyStore.load_or_default(state_file).list() == []


def test_snapshot_from_older_writer_loads(state_file):
    """Nanosecond timestamps and duplicate / oversize lists are normalised on load."""
    items = [{"path": "/d/%d" % i, "name": str(i), "last_opened": "2024-03-01T10:00:00.123456789Z"} for i in range(12)]
    items.append({"path": "/d/0", "name": "0", "last_opened": "2024-02-01T10:00:00Z"})
    state_file.path.parent.mkdir(parents=True)
    state_file.path.write_text(json.dumps({"recent_files": items}), encoding="utf-8")
    store = RecencyStore.load_or_default(state_file)
    entries = store.list()
    assert len(entries) == CAPACITY
    assert entries[0] == RecentEntry("/d/0", "0", datetime(2024, 3, 1, 10, 0, 0, 123456, tzinfo=timezone.utc))


def test_persistence_failure_does_not_fail_caller(tmp_path):
    store = RecencyStore(FailingStateFile(tmp_path / "state.json"))
    store.record_access("/d/a", "a")
    assert _paths(store) == ["/d/a"]
    assert store.clear() is False
    assert store.list() == []


def test_configurable_capacity(state_file):
    store = RecencyStore(state_file, capacity=3)
    for i in range(5):
        store.record_access("/d/%d" % i, str(i))
    assert _paths(store) == ["/d/4", "/d/3", "/d/2"]


def test_capacity_must_be_positive(state_file):
    with pytest.raises(ValueError):
        RecencyStore(state_file, capacity=0)


def test_concurrent_records_keep_invariants(store, state_file):
    paths = ["/d/%d" % (i % 14) for i in range(200)]
    barrier = threading.Barrier(8)

    def worker(chunk):
        barrier.wait()
        for p in chunk:
            store.record_access(p, p)

    threads = [threading.Thread(target=worker, args=(paths[i::8],)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    current = _paths(store)
    assert len(current) == CAPACITY
    assert len(set(current)) == CAPACITY
    assert RecencyStore.load_or_default(state_file).list() == store.list()


def test_lock_timeout_raises_lock_unavailable(state_file):
    store = RecencyStore(state_file, lock_timeout=0.05)
    store._lock.acquire()
    try:
        with pytest.raises(LockUnavailable):
            store.list()
        with pytest.raises(LockUnavailable):
            store.record_access("/d/a", "a")
    finally:
        store._lock.release()
    store.record_access("/d/a", "a")
    assert _paths(store) == ["/d/a"]
