"""Bounded-concurrency hydration of index entries into entities.

A fixed pool of ``min(concurrency, len(entries))`` workers pulls positions
from one shared cursor. Claiming a position is a plain ``next()`` call with
no await in between, so under asyncio no two workers can claim the same
entry. Each worker has at most one request outstanding, which caps the
batch at ``concurrency`` concurrent requests.

Per-entry failures are logged and the entry is left out; the batch itself
never fails because of them. Any other exception cancels the remaining
workers and propagates. Successful results keep their input order.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterator, Sequence
from typing import TYPE_CHECKING

import structlog

from pokecards.errors import PokeCardsError

if TYPE_CHECKING:
    from pokecards.models.entity import Entity
    from pokecards.models.index import IndexEntry

log = structlog.get_logger()

Resolver = Callable[["IndexEntry"], Awaitable["Entity"]]


class BatchDetailFetcher:
    def __init__(self, resolve: Resolver, concurrency: int = 6) -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        self._resolve = resolve
        self._concurrency = concurrency

    @property
    def concurrency(self) -> int:
        return self._concurrency

    async def fetch_all(self, entries: Sequence[IndexEntry]) -> list[Entity]:
        if not entries:
            return []

        results: list[Entity | None] = [None] * len(entries)
        cursor: Iterator[int] = iter(range(len(entries)))

        async def worker() -> None:
            for position in cursor:
                entry = entries[position]
                try:
                    results[position] = await self._resolve(entry)
                except PokeCardsError as exc:
                    log.warning(
                        "detail_fetch_failed",
                        name=entry.name,
                        code=exc.code,
                        error=exc.message,
                    )

        worker_count = min(self._concurrency, len(entries))
        workers = [asyncio.ensure_future(worker()) for _ in range(worker_count)]
        try:
            await asyncio.gather(*workers)
        except BaseException:
            # No worker may keep claiming entries once the batch has failed.
            for task in workers:
                task.cancel()
            await asyncio.gather(*workers, return_exceptions=True)
            raise

        entities = [entity for entity in results if entity is not None]
        log.info(
            "batch_fetch_complete",
            requested=len(entries),
            fetched=len(entities),
            failed=len(entries) - len(entities),
            workers=worker_count,
        )
        return entities
