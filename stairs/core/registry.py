"""Step registry utilities for the stairs runtime."""
from __future__ import annotations

from typing import Iterator, List, Optional

from .step import Step, StepCallable


class StepRegistry:
    """Ordered, append-only sequence of steps."""

    def __init__(self) -> None:
        self._steps: List[Step] = []

    def register(
        self,
        func: StepCallable,
        name: Optional[str] = None,
        *,
        exclude: bool = False,
    ) -> Optional[Step]:
        """Append *func* as a new step unless *exclude* is set."""

        if not callable(func):
            raise TypeError("fn must be a function")
        if exclude:
            return None
        if name is None:
            name = f"Untitled Step {len(self._steps)}"
        step = Step(
            name=name,
            callable=func,
            module=getattr(func, "__module__", None) or __name__,
        )
        self._steps.append(step)
        return step

    def list(self) -> List[Step]:
        """Return a copy of the registered steps in execution order."""

        return list(self._steps)

    def names(self) -> List[str]:
        return [step.name for step in self._steps]

    def __contains__(self, name: object) -> bool:
        return any(step.name == name for step in self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(list(self._steps))

    def __len__(self) -> int:
        return len(self._steps)
