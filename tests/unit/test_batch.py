"""Unit tests for pokecards.batch."""

from __future__ import annotations

import asyncio

import pytest

from pokecards.batch import BatchDetailFetcher
from pokecards.errors import ErrorCode, PokeCardsError
from pokecards.models.entity import Entity
from pokecards.models.index import IndexEntry


def _entries(count: int) -> list[IndexEntry]:
    return [
        IndexEntry(name=f"mon-{i}", reference=f"https://pokeapi.test/api/v2/pokemon/{i + 1}/")
        for i in range(count)
    ]


class _Resolver:
    """Fake per-entry fetch that tracks concurrency and fails chosen positions."""

    def __init__(self, fail: set[int] | None = None, delays: dict[int, float] | None = None):
        self.fail = fail or set()
        self.delays = delays or {}
        self.in_flight = 0
        self.max_in_flight = 0
        self.claimed: list[str] = []

    async def __call__(self, entry: IndexEntry) -> Entity:
        position = int(entry.name.split("-")[1])
        self.claimed.append(entry.name)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(position, 0))
            if position in self.fail:
                raise PokeCardsError(ErrorCode.FETCH_FAILED, f"boom {position}")
            return Entity(id=str(position + 1), name=entry.name, image="https://img.test/x.png")
        finally:
            self.in_flight -= 1


class TestBatchDetailFetcher:
    async def test_partial_failure_keeps_order(self) -> None:
        resolver = _Resolver(fail={3, 7})
        batch = BatchDetailFetcher(resolver, concurrency=6)

        entities = await batch.fetch_all(_entries(10))

        assert len(entities) == 8
        assert [e.name for e in entities] == [
            f"mon-{i}" for i in range(10) if i not in {3, 7}
        ]

    async def test_order_independent_of_completion_time(self) -> None:
        # Earlier entries finish last.
        delays = {i: 0.01 * (5 - i) for i in range(5)}
        resolver = _Resolver(delays=delays)
        batch = BatchDetailFetcher(resolver, concurrency=5)

        entities = await batch.fetch_all(_entries(5))

        assert [e.name for e in entities] == [f"mon-{i}" for i in range(5)]

    async def test_concurrency_is_bounded(self) -> None:
        resolver = _Resolver(delays={i: 0.001 for i in range(20)})
        batch = BatchDetailFetcher(resolver, concurrency=4)

        await batch.fetch_all(_entries(20))

        assert resolver.max_in_flight == 4

    async def test_each_entry_claimed_exactly_once(self) -> None:
        resolver = _Resolver(delays={i: 0.001 * (i % 3) for i in range(25)})
        batch = BatchDetailFetcher(resolver, concurrency=6)

        await batch.fetch_all(_entries(25))

        assert sorted(resolver.claimed) == sorted(f"mon-{i}" for i in range(25))
        assert len(resolver.claimed) == 25

    async def test_fewer_entries_than_workers(self) -> None:
        resolver = _Resolver()
        batch = BatchDetailFetcher(resolver, concurrency=6)

        entities = await batch.fetch_all(_entries(2))

        assert len(entities) == 2
        assert resolver.max_in_flight <= 2

    async def test_all_failures_returns_empty(self) -> None:
        batch = BatchDetailFetcher(_Resolver(fail=set(range(4))), concurrency=2)
        assert await batch.fetch_all(_entries(4)) == []

    async def test_empty_input(self) -> None:
        resolver = _Resolver()
        assert await BatchDetailFetcher(resolver).fetch_all([]) == []
        assert resolver.claimed == []

    async def test_unexpected_errors_propagate(self) -> None:
        async def broken(entry: IndexEntry) -> Entity:
            raise RuntimeError("bug")

        with pytest.raises(RuntimeError):
            await BatchDetailFetcher(broken, concurrency=2).fetch_all(_entries(3))

    async def test_unexpected_error_stops_remaining_workers(self) -> None:
        completed: list[str] = []

        async def resolve(entry: IndexEntry) -> Entity:
            if entry.name == "mon-0":
                raise RuntimeError("bug")
            await asyncio.sleep(0.05)
            completed.append(entry.name)
            return Entity(id=entry.name, name=entry.name, image="https://img.test/x.png")

        with pytest.raises(RuntimeError):
            await BatchDetailFetcher(resolve, concurrency=4).fetch_all(_entries(8))

        await asyncio.sleep(0.1)
        assert completed == []

    def test_rejects_zero_concurrency(self) -> None:
        with pytest.raises(ValueError):
            BatchDetailFetcher(_Resolver(), concurrency=0)
