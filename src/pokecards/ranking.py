"""Sort and filter semantics shared by every view.

Nothing here raises on odd data: a missing stat counts as 0, a missing or
unknown rarity/generation gets the maximum rank.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cmp_to_key
from typing import TYPE_CHECKING

from pokecards.catalog import generation_rank, rarity_rank
from pokecards.models.query import FilterCriteria, SortDirection, SortProperty, SortSpec

if TYPE_CHECKING:
    from pokecards.models.entity import Entity

_NUMERIC_STATS: dict[SortProperty, Callable[[Entity], int | None]] = {
    SortProperty.HP: lambda e: e.hp,
    SortProperty.ATTACK: lambda e: e.attack,
    SortProperty.DEFENSE: lambda e: e.defense,
    SortProperty.SPECIAL_ATTACK: lambda e: e.special_attack,
    SortProperty.SPECIAL_DEFENSE: lambda e: e.special_defense,
    SortProperty.SPEED: lambda e: e.speed,
}


def _cmp(a: int | str | tuple[str, str], b: int | str | tuple[str, str]) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


def _name_key(name: str) -> tuple[str, str]:
    # Case-aware: casefolded order first, lowercase before uppercase on ties.
    return name.casefold(), name.swapcase()


def _set_name(entity: Entity) -> str:
    return entity.set.name if entity.set else ""


def hp_value(entity: Entity) -> int:
    return entity.hp or 0


def dex_number(entity: Entity) -> int:
    return entity.dex_id[0] if entity.dex_id else 0


def compare_entities(a: Entity, b: Entity, spec: SortSpec) -> int:
    """Three-way compare. Direction flips the primary key only."""
    sign = 1 if spec.direction is SortDirection.ASC else -1
    prop = spec.property

    if prop is SortProperty.SET:
        primary = _cmp(generation_rank(_set_name(a)), generation_rank(_set_name(b)))
        if primary:
            return sign * primary
        # Tie-break is always ascending.
        return _cmp(_name_key(_set_name(a)), _name_key(_set_name(b)))

    if prop is SortProperty.RARITY:
        return sign * _cmp(rarity_rank(a.rarity), rarity_rank(b.rarity))
    if prop is SortProperty.DEX_ID:
        return sign * _cmp(dex_number(a), dex_number(b))
    if prop in _NUMERIC_STATS:
        stat = _NUMERIC_STATS[prop]
        return sign * _cmp(stat(a) or 0, stat(b) or 0)
    return sign * _cmp(_name_key(a.name), _name_key(b.name))


def sort_entities(entities: Iterable[Entity], spec: SortSpec | None = None) -> list[Entity]:
    """New list in ``spec`` order. Stable: equal entities keep their input order."""
    spec = spec or SortSpec()
    return sorted(entities, key=cmp_to_key(lambda a, b: compare_entities(a, b, spec)))


def matches_filters(entity: Entity, criteria: FilterCriteria) -> bool:
    """True when the entity satisfies every active filter.

    Series and rarities match if any selected value matches; types match only
    if the entity has all selected types.
    """
    if criteria.series:
        wanted = {series.lower() for series in criteria.series}
        names = {_set_name(entity).lower(), (entity.serie.name if entity.serie else "").lower()}
        if not wanted & names:
            return False

    if criteria.types:
        owned = {t.lower() for t in entity.types or ()}
        if not all(t.lower() in owned for t in criteria.types):
            return False

    if criteria.rarities:
        rarity = (entity.rarity or "").lower()
        if rarity not in {r.lower() for r in criteria.rarities}:
            return False

    low, high = criteria.hp_range
    return low <= hp_value(entity) <= high


def filter_entities(entities: Iterable[Entity], criteria: FilterCriteria) -> list[Entity]:
    return [entity for entity in entities if matches_filters(entity, criteria)]


def apply_view(
    entities: Iterable[Entity],
    criteria: FilterCriteria | None = None,
    spec: SortSpec | None = None,
) -> list[Entity]:
    """Filter then sort; the pipeline every list view runs."""
    filtered = filter_entities(entities, criteria or FilterCriteria())
    return sort_entities(filtered, spec)
