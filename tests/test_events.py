from __future__ import annotations

import pytest

from stairs.core.events import EventChannel


def test_emit_calls_listeners_in_subscription_order() -> None:
    channel = EventChannel()
    calls: list = []
    channel.on("step", lambda *args: calls.append(("first", args)))
    channel.on("step", lambda *args: calls.append(("second", args)))

    assert channel.emit("step", "a", 1, 2) is True
    assert calls == [("first", ("a", 1, 2)), ("second", ("a", 1, 2))]


def test_emit_without_listeners_is_dropped() -> None:
    channel = EventChannel()
    assert channel.emit("error", "boom", {}) is False


def test_on_works_as_decorator_and_off_removes() -> None:
    channel = EventChannel()
    seen: list = []

    @channel.on("done")
    def listener(*scope: object) -> None:
        seen.append(scope)

    channel.emit("done", {"x": 1})
    channel.off("done", listener)
    channel.off("done", listener)
    channel.emit("done", {"x": 2})

    assert seen == [({"x": 1},)]
    assert channel.listeners("done") == []


def test_unknown_events_and_bad_listeners_fail_fast() -> None:
    channel = EventChannel()
    with pytest.raises(ValueError):
        channel.on("finish", print)
    with pytest.raises(ValueError):
        channel.emit("finish")
    with pytest.raises(TypeError):
        channel.on("step", "nope")  # type: ignore[arg-type]
