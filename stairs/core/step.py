"""Step primitives for the stairs runtime."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


class StepCallable(Protocol):
    """Callable protocol for a step: the scope values followed by the signal."""

    def __call__(self, *args: Any) -> None:
        """Execute the step logic and eventually call the trailing signal."""


@dataclass(slots=True, frozen=True)
class Step:
    """A named unit of work held by a :class:`StepRegistry`."""

    name: str
    callable: StepCallable
    module: str
