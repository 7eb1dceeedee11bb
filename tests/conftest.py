from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

import pytest

from stairs.core.runner import Stairs
from stairs.settings import Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's STAIRS_* variables out of the tests."""

    for name in ("STAIRS_CONFIG", "STAIRS_LOG_LEVEL", "STAIRS_LOGGING_CONFIG", "STAIRS_STRICT_SKIP"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def stairs(settings: Settings) -> Stairs:
    return Stairs("test", settings=settings)


async def _settle(ticks: int = 50) -> None:
    for _ in range(ticks):
        await asyncio.sleep(0)


@pytest.fixture
def settle() -> Callable[..., Awaitable[None]]:
    """Coroutine function that lets the event loop process pending advancements."""

    return _settle


@pytest.fixture
def drive() -> Callable[..., None]:
    """Start a run inside a fresh event loop and let it play out."""

    def _drive(stairs: Stairs, *args: object) -> None:
        async def main() -> None:
            stairs.run(*args)
            await _settle()

        asyncio.run(main())

    return _drive
