"""EventBus subscribe / unsubscribe / emit, errors in callbacks."""
from flowcraft.core.event_bus import EventBus


def test_emit_reaches_subscribers_in_order():
    bus = EventBus()
    seen = []
    bus.subscribe("e", lambda ev, data: seen.append(("first", data)))
    bus.subscribe("e", lambda ev, data: seen.append(("second", data)))
    assert bus.emit("e", 42) == 2
    assert seen == [("first", 42), ("second", 42)]


def test_unsubscribe_handle():
    bus = EventBus()
    seen = []
    off = bus.subscribe("e", lambda ev, data: seen.append(data))
    off()
    off()
    assert bus.emit("e", 1) == 0
    assert seen == []
    assert "e" not in bus._handlers


def test_failing_callback_is_logged_not_raised(caplog):
    bus = EventBus()
    seen = []

    def boom(ev, data):
        raise RuntimeError("boom")

    bus.subscribe("e", boom)
    bus.subscribe("e", lambda ev, data: seen.append(data))
    assert bus.emit("e", "x") == 1
    assert seen == ["x"]
    assert "EventBus callback error" in caplog.text
