"""Core step-running primitives for stairs."""
from __future__ import annotations

from .events import EventChannel
from .registry import StepRegistry
from .runner import RunState, Stairs, StepSignal
from .step import Step, StepCallable

__all__ = [
    "EventChannel",
    "RunState",
    "Stairs",
    "Step",
    "StepCallable",
    "StepRegistry",
    "StepSignal",
]
