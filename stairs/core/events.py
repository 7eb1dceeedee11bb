"""Lifecycle notifications emitted while a run advances."""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

Listener = Callable[..., Any]

EVENTS = ("step", "done", "error")


class EventChannel:
    """Dispatches ``step``, ``done`` and ``error`` events to subscribers.

    Listeners run synchronously, in subscription order. Events with no
    subscribers are dropped; :meth:`emit` reports whether anyone listened.
    """

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {event: [] for event in EVENTS}

    def _bucket(self, event: str) -> List[Listener]:
        try:
            return self._listeners[event]
        except KeyError as exc:
            raise ValueError(
                f"Unknown event '{event}'. Use one of: {', '.join(EVENTS)}."
            ) from exc

    def on(self, event: str, listener: Optional[Listener] = None) -> Any:
        """Subscribe *listener* to *event*; without a listener, act as a decorator."""

        bucket = self._bucket(event)
        if listener is None:

            def decorator(func: Listener) -> Listener:
                bucket.append(func)
                return func

            return decorator
        if not callable(listener):
            raise TypeError("listener must be callable")
        bucket.append(listener)
        return listener

    def off(self, event: str, listener: Listener) -> None:
        """Remove the first subscription of *listener* to *event*, if any."""

        bucket = self._bucket(event)
        if listener in bucket:
            bucket.remove(listener)

    def listeners(self, event: str) -> List[Listener]:
        return list(self._bucket(event))

    def emit(self, event: str, *args: Any) -> bool:
        """Call every listener of *event* with *args*."""

        listeners = self.listeners(event)
        for listener in listeners:
            listener(*args)
        return bool(listeners)


__all__ = ["EVENTS", "EventChannel", "Listener"]
