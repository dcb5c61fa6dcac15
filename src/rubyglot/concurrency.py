"""Single-flight initialization primitives."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class AsyncOnce(Generic[T]):
    """Compute-once cell for an async factory.

    Concurrent first callers await the same computation. A factory that raises
    (or is cancelled) leaves the cell empty, so the next caller retries.
    """

    def __init__(self, factory: Callable[[], Awaitable[T]]) -> None:
        self._factory = factory
        self._lock: asyncio.Lock | None = None
        self._ready = False
        self._value: T | None = None

    @property
    def ready(self) -> bool:
        return self._ready

    async def get(self) -> T:
        if self._ready:
            return self._value  # type: ignore[return-value]

        if self._lock is None:
            self._lock = asyncio.Lock()
        async with self._lock:
            if not self._ready:
                self._value = await self._factory()
                self._ready = True
        return self._value  # type: ignore[return-value]

    def reset(self) -> None:
        """Forget the computed value and any event-loop bound state."""
        self._lock = None
        self._ready = False
        self._value = None
