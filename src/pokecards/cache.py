"""In-memory multi-key entity cache.

One entity is reachable through several lookup keys (numeric id, display
name, the identifier the caller asked for). Every key points at the same
instance; entries are never copied per key and never evicted. The cache
lives as long as the owning service, ``clear()`` is the only invalidation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from pokecards.models.entity import Entity

log = structlog.get_logger()


def normalize_key(key: object) -> str:
    """Lowercased, stripped string form of ``key``; ``""`` for ``None``."""
    if key is None:
        return ""
    return str(key).strip().lower()


class EntityCache:
    """Case-insensitive key -> Entity map."""

    def __init__(self) -> None:
        self._entries: dict[str, Entity] = {}

    def get(self, key: object) -> Entity | None:
        """Exact lookup. Returns ``None`` on miss."""
        normalized = normalize_key(key)
        if not normalized:
            return None
        return self._entries.get(normalized)

    def put(self, entity: Entity, *keys: object) -> None:
        """Associate each non-empty key with ``entity``. Blank keys are skipped."""
        aliases = {normalize_key(key) for key in keys} - {""}
        for alias in aliases:
            self._entries[alias] = entity
        log.debug("entity_cached", entity_id=entity.id, keys=sorted(aliases))

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._entries)
