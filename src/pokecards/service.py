"""CatalogService: the one object that owns remote loading and caching.

UI collaborators receive a service instance instead of reaching for module
globals. All caches live here, start empty, fill lazily, and are only
invalidated through ``reload()``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from pokecards.batch import BatchDetailFetcher
from pokecards.cache import EntityCache
from pokecards.catalog import RARITY_ORDER
from pokecards.errors import ErrorCode, PokeCardsError
from pokecards.normalizer import normalize, title_case
from pokecards.ranking import sort_entities
from pokecards.singleflight import SingleFlight

if TYPE_CHECKING:
    from pokecards.config import LoaderSettings
    from pokecards.fetcher import Fetcher
    from pokecards.models.entity import Entity
    from pokecards.models.index import IndexEntry

log = structlog.get_logger()


class CatalogService:
    def __init__(
        self,
        fetcher: Fetcher,
        settings: LoaderSettings,
        cache: EntityCache | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._settings = settings
        self.cache = cache if cache is not None else EntityCache()
        self._index = SingleFlight("index", self._load_index)
        self._all = SingleFlight("all_entities", self._load_all)
        # Bumped by reset(); fetches started under an older epoch never write to the cache.
        self._epoch = 0

    # ------------------------------------------------------------------
    # Index
    # ------------------------------------------------------------------

    async def get_index(self) -> list[IndexEntry]:
        """Full remote listing, fetched once and shared by concurrent callers."""
        return await self._index.get()

    async def _load_index(self) -> list[IndexEntry]:
        try:
            page = await self._fetcher.fetch_index(limit=self._settings.index_limit)
        except PokeCardsError as exc:
            log.error("index_load_failed", code=exc.code, error=exc.message)
            raise PokeCardsError(
                ErrorCode.LOAD_FAILED,
                f"Failed to load the entity index: {exc.message}",
                recoverable=exc.recoverable,
            ) from exc
        log.info("index_loaded", entries=len(page.results), remote_count=page.count)
        return page.results

    # ------------------------------------------------------------------
    # Entities
    # ------------------------------------------------------------------

    async def fetch_entity_by_id(self, identifier: str | int, *aliases: object) -> Entity:
        """Entity by numeric id or name, served from cache when any alias is known.

        ``aliases`` are extra identifiers the caller already associates with
        this entity; they are cached alongside the canonical keys.
        """
        return await self._fetch_entity(identifier, aliases, self._epoch)

    async def _fetch_entity(
        self, identifier: str | int, aliases: Sequence[object], epoch: int
    ) -> Entity:
        cached = self.cache.get(identifier)
        if cached is not None:
            return cached

        raw = await self._fetcher.fetch_pokemon(identifier)
        try:
            entity = normalize(raw)
        except ValidationError as exc:
            raise PokeCardsError(
                ErrorCode.INVALID_RESPONSE,
                f"Payload for {identifier!r} cannot be normalized: {exc.error_count()} error(s)",
            ) from exc

        if epoch != self._epoch:
            log.debug("stale_entity_discarded", identifier=str(identifier))
            return entity
        self.cache.put(
            entity, identifier, *aliases, entity.id, entity.local_id, entity.name, raw.name
        )
        return entity

    def _batch_for(self, epoch: int) -> BatchDetailFetcher:
        async def resolve(entry: IndexEntry) -> Entity:
            return await self._fetch_entity(entry.name, (entry.numeric_id,), epoch)

        return BatchDetailFetcher(resolve, self._settings.detail_concurrency)

    async def load_all_entities(self) -> list[Entity]:
        """The first ``max_entities`` index rows, hydrated. Partial success is kept."""
        return await self._all.get()

    async def _load_all(self) -> list[Entity]:
        epoch = self._epoch
        index = await self.get_index()
        entities = await self._batch_for(epoch).fetch_all(index[: self._settings.max_entities])
        log.info("all_entities_loaded", count=len(entities), cached_keys=len(self.cache))
        return entities

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search(self, query: str) -> list[Entity]:
        """Index entries whose name contains ``query``, hydrated and sorted by name."""
        normalized = query.strip().lower()
        if not normalized:
            return []
        epoch = self._epoch

        try:
            index = await self.get_index()
        except PokeCardsError as exc:
            raise PokeCardsError(
                ErrorCode.SEARCH_FAILED,
                f"Search for {normalized!r} failed: {exc.message}",
                recoverable=exc.recoverable,
            ) from exc

        matched = [
            entry
            for entry in index
            if normalized in entry.name.lower() or entry.name.lower() == normalized
        ]
        entities = await self._batch_for(epoch).fetch_all(matched)
        log.info("search_complete", query=normalized, matched=len(matched), found=len(entities))
        return sort_entities(entities)

    # ------------------------------------------------------------------
    # Facets
    # ------------------------------------------------------------------

    async def list_types(self) -> list[str]:
        entries = await self._fetcher.fetch_named_list("/type")
        return [title_case(entry.name) for entry in entries]

    async def list_generations(self) -> list[str]:
        entries = await self._fetcher.fetch_named_list("/generation")
        return [title_case(entry.name) for entry in entries]

    def list_rarities(self) -> list[str]:
        return list(RARITY_ORDER)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Drop every cached index row and entity."""
        self._epoch += 1
        self._index.reset()
        self._all.reset()
        self.cache.clear()
        log.info("catalog_reset")

    async def reload(self) -> list[Entity]:
        """Clear all caches and load everything again from scratch."""
        self.reset()
        return await self.load_all_entities()
