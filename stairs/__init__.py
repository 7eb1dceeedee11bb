"""stairs - run steps in order against a shared scope."""
from __future__ import annotations

from importlib import metadata

from stairs.core import Stairs, Step, StepRegistry, StepSignal
from stairs.errors import SkipTargetNotFound, StairsError, StepFailed
from stairs.settings import Settings

__all__ = [
    "__version__",
    "Settings",
    "SkipTargetNotFound",
    "Stairs",
    "StairsError",
    "Step",
    "StepFailed",
    "StepRegistry",
    "StepSignal",
]


def __getattr__(name: str):  # pragma: no cover - passthrough to package metadata
    if name == "__version__":
        try:
            return metadata.version("stairs")
        except metadata.PackageNotFoundError:
            return "0.0.0"
    raise AttributeError(name)
