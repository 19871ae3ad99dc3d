"""Debounced search with stale-result supersession.

Every ``submit()`` takes the next value of a monotonically increasing
generation counter. A submission only commits its results (or its error) to
the session if its generation is still the latest when it resolves; anything
older is dropped silently and never touches shared state.
"""

from __future__ import annotations

import asyncio
import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from pokecards.errors import PokeCardsError

if TYPE_CHECKING:
    from pokecards.models.entity import Entity
    from pokecards.service import CatalogService

log = structlog.get_logger()


@dataclass(frozen=True)
class SearchOutcome:
    query: str
    generation: int
    results: list[Entity] = field(default_factory=list)
    error: PokeCardsError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class SearchSession:
    """Search state for one consumer (one search box)."""

    def __init__(self, service: CatalogService, debounce_seconds: float = 1.0) -> None:
        self._service = service
        self._debounce_seconds = debounce_seconds
        self._generations = itertools.count(1)
        self._current = 0
        self.outcome: SearchOutcome | None = None

    @property
    def current_generation(self) -> int:
        return self._current

    def is_current(self, generation: int) -> bool:
        return generation == self._current

    async def submit(self, query: str) -> SearchOutcome | None:
        """Run ``query`` after the debounce interval.

        Returns the committed outcome, or ``None`` if a later submission
        superseded this one before it resolved. A blank query clears the
        session immediately without touching the network.
        """
        generation = next(self._generations)
        self._current = generation
        trimmed = query.strip()

        if not trimmed:
            self.outcome = None
            return None

        if self._debounce_seconds:
            await asyncio.sleep(self._debounce_seconds)
            if not self.is_current(generation):
                log.debug("search_debounced", query=trimmed, generation=generation)
                return None

        try:
            results = await self._service.search(trimmed)
        except PokeCardsError as exc:
            if not self.is_current(generation):
                log.debug("search_superseded", query=trimmed, generation=generation)
                return None
            log.warning("search_failed", query=trimmed, code=exc.code, error=exc.message)
            self.outcome = SearchOutcome(trimmed, generation, error=exc)
            return self.outcome

        if not self.is_current(generation):
            log.debug("search_superseded", query=trimmed, generation=generation)
            return None
        self.outcome = SearchOutcome(trimmed, generation, results=results)
        return self.outcome
