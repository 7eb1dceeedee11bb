"""Exception types raised by the stairs runtime."""
from __future__ import annotations

from typing import Any, Tuple


class StairsError(Exception):
    """Base class for errors raised by stairs."""


class StepFailed(StairsError):
    """Raised by :meth:`Stairs.complete` when a step signals an error."""

    def __init__(self, error: Any, scope: Tuple[Any, ...]) -> None:
        super().__init__(f"Step failed: {error!r}")
        self.error = error
        self.scope = scope


class SkipTargetNotFound(StairsError, LookupError):
    """No registered step carries the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Step '{name}' is not registered")
        self.name = name


__all__ = ["SkipTargetNotFound", "StairsError", "StepFailed"]
