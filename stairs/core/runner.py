"""Sequential step runner driven by the asyncio event loop."""
from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from stairs.errors import SkipTargetNotFound, StepFailed
from stairs.settings import Settings

from .events import EventChannel, Listener
from .registry import StepRegistry
from .step import Step, StepCallable

logger = logging.getLogger(__name__)


def _completed(*scope: Any) -> None:
    logger.debug("done")


def _off_loop(loop: asyncio.AbstractEventLoop) -> bool:
    """True when *loop* is running on some other thread than the caller."""

    if not loop.is_running():
        return False
    try:
        return asyncio.get_running_loop() is not loop
    except RuntimeError:
        return True


@dataclass(slots=True)
class RunState:
    """Execution state owned by a single :meth:`Stairs.run` call."""

    run_id: int
    scope: List[Any]
    steps: List[Step]
    loop: asyncio.AbstractEventLoop
    completion: Callable[..., Any] = _completed
    cursor: int = -1
    terminated: bool = False
    outcome: Optional[asyncio.Future] = field(default=None, repr=False)


class StepSignal:
    """Handle passed to a step as its last argument.

    Calling the signal reports that the step finished; passing a truthy value
    reports a failure instead. The advancement it triggers always happens on a
    later iteration of the event loop. A signal fires at most once; further
    calls are ignored.
    """

    def __init__(self, runner: "Stairs", state: RunState, step: Optional[Step] = None) -> None:
        self._runner = runner
        self._state = state
        self._step = step
        self._fired = False

    @property
    def title(self) -> str:
        return self._runner.title

    @property
    def name(self) -> Optional[str]:
        """Name of the step holding this signal."""

        return self._step.name if self._step is not None else None

    def __call__(self, err: Any = None) -> None:
        if self._fired:
            logger.debug("run %s: ignoring repeated signal from %s", self._state.run_id, self.name)
            return
        self._fired = True
        self._state.loop.call_soon_threadsafe(self._runner._advance, self._state, err)

    def end(self) -> None:
        """Finish the run now, as if every remaining step had completed."""

        if _off_loop(self._state.loop):
            self._state.loop.call_soon_threadsafe(self._runner._end, self._state)
        else:
            self._runner._end(self._state)

    def skip(self, name: str) -> None:
        """Run the first step called *name* next, even if it already ran."""

        if self._fired:
            logger.debug("run %s: ignoring skip to '%s' after signal", self._state.run_id, name)
            return
        for index, step in enumerate(self._state.steps):
            if step.name == name:
                self._fired = True
                if _off_loop(self._state.loop):
                    self._state.loop.call_soon_threadsafe(self._jump, index)
                else:
                    self._jump(index)
                return
        logger.warning(
            "run %s of %s: cannot skip to unknown step '%s'",
            self._state.run_id,
            self.title,
            name,
        )
        if self._runner.settings.strict_skip:
            self(SkipTargetNotFound(name))

    def _jump(self, index: int) -> None:
        self._state.cursor = index - 1
        self._state.loop.call_soon_threadsafe(self._runner._advance, self._state, None)


class Stairs:
    """Run registered steps one after another against a shared scope."""

    def __init__(
        self,
        title: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        self.title = title if isinstance(title, str) and title else "Untitled"
        self.settings = settings or Settings.load()
        self._registry = StepRegistry()
        self._events = EventChannel()
        self._loop = loop
        self._run_ids = itertools.count(1)

    @property
    def registry(self) -> StepRegistry:
        return self._registry

    def step(
        self,
        func: StepCallable,
        name: Optional[str] = None,
        *,
        exclude: bool = False,
    ) -> "Stairs":
        """Register *func* as the next step and return the runner for chaining."""

        self._registry.register(func, name, exclude=exclude)
        return self

    def register(
        self, name: Optional[str] = None, *, exclude: bool = False
    ) -> Callable[[StepCallable], StepCallable]:
        """Decorator form of :meth:`step`."""

        def decorator(func: StepCallable) -> StepCallable:
            self._registry.register(func, name, exclude=exclude)
            return func

        return decorator

    def steps(self) -> List[Step]:
        return self._registry.list()

    def on(self, event: str, listener: Optional[Listener] = None) -> Any:
        """Subscribe to ``step``, ``done`` or ``error`` notifications."""

        return self._events.on(event, listener)

    def off(self, event: str, listener: Listener) -> None:
        self._events.off(event, listener)

    def run(self, *args: Any) -> "Stairs":
        """Start a pass over the steps and return before any of them runs.

        ``None`` arguments are dropped. A callable last argument is taken as
        the completion callback. An empty scope becomes a single ``{}``.
        """

        loop = self._loop or asyncio.get_running_loop()
        self._start(args, loop)
        return self

    async def complete(self, *args: Any) -> Tuple[Any, ...]:
        """Run the steps and wait for the final scope.

        Raises :class:`StepFailed` when a step signals an error.
        """

        loop = asyncio.get_running_loop()
        outcome = loop.create_future()
        self._start(args, loop, outcome)
        return await outcome

    def _start(
        self,
        args: Tuple[Any, ...],
        loop: asyncio.AbstractEventLoop,
        outcome: Optional[asyncio.Future] = None,
    ) -> RunState:
        scope = [arg for arg in args if arg is not None]
        completion = scope.pop() if scope and callable(scope[-1]) else _completed
        if not scope:
            scope.append({})
        state = RunState(
            run_id=next(self._run_ids),
            scope=scope,
            steps=self._registry.list(),
            loop=loop,
            completion=completion,
            outcome=outcome,
        )
        logger.debug("running %s (run %s, %d steps)", self.title, state.run_id, len(state.steps))
        StepSignal(self, state)()
        return state

    def _advance(self, state: RunState, err: Any = None) -> None:
        state.cursor += 1
        logger.debug("next %s / %s", state.cursor + 1, len(state.steps))
        if state.terminated:
            return
        if err:
            self._fail(state, err)
            return
        if state.cursor >= len(state.steps):
            self._end(state)
            return

        step = state.steps[state.cursor]
        signal = StepSignal(self, state, step)
        try:
            self._events.emit("step", step.name, state.cursor + 1, len(state.steps))
            step.callable(*state.scope, signal)
        except Exception as exc:
            logging.getLogger(step.module).exception(
                "Step '%s' of %s raised", step.name, self.title
            )
            signal(exc)

    def _end(self, state: RunState) -> None:
        if state.terminated:
            return
        state.terminated = True
        logger.debug("run %s of %s finished", state.run_id, self.title)
        if state.outcome is not None and not state.outcome.done():
            state.outcome.set_result(tuple(state.scope))
        self._events.emit("done", *state.scope)
        state.completion(*state.scope)

    def _fail(self, state: RunState, err: Any) -> None:
        state.terminated = True
        if state.outcome is not None and not state.outcome.done():
            failure = StepFailed(err, tuple(state.scope))
            if isinstance(err, BaseException):
                failure.__cause__ = err
            state.outcome.set_exception(failure)
        heard = self._events.emit("error", err, *state.scope)
        if not heard and state.outcome is None:
            logger.warning(
                "run %s of %s failed with no error listener: %r",
                state.run_id,
                self.title,
                err,
            )


__all__ = ["RunState", "Stairs", "StepSignal"]
