"""Single-flight memoization of one async load.

Concurrent ``get()`` calls during a cold cache all await the same task, so
the loader runs once. The task is shielded: a caller that gets cancelled
does not cancel the load for everybody else. On success the value is
memoized; on failure nothing is stored and the next ``get()`` starts over.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

import structlog

T = TypeVar("T")

log = structlog.get_logger()


class SingleFlight(Generic[T]):
    def __init__(self, name: str, loader: Callable[[], Awaitable[T]]) -> None:
        self._name = name
        self._loader = loader
        self._value: T | None = None
        self._loaded = False
        self._task: asyncio.Task[T] | None = None
        # Bumped by reset(); a load started under an older epoch is not memoized.
        self._epoch = 0

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def in_flight(self) -> bool:
        return self._task is not None

    async def get(self) -> T:
        if self._loaded:
            return self._value  # type: ignore[return-value]
        if self._task is None:
            self._task = asyncio.ensure_future(self._run(self._epoch))
        else:
            log.debug("singleflight_joined", target=self._name)
        return await asyncio.shield(self._task)

    async def _run(self, epoch: int) -> T:
        try:
            value = await self._loader()
        except BaseException:
            if epoch == self._epoch:
                self._task = None
            raise
        if epoch == self._epoch:
            self._value = value
            self._loaded = True
            self._task = None
        return value

    def reset(self) -> None:
        """Forget the memoized value. An in-flight load finishes but is not stored."""
        self._value = None
        self._loaded = False
        self._task = None
        self._epoch += 1
