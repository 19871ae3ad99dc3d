from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator


class SortProperty(StrEnum):
    NAME = "name"
    HP = "hp"
    ATTACK = "attack"
    DEFENSE = "defense"
    SPECIAL_ATTACK = "special_attack"
    SPECIAL_DEFENSE = "special_defense"
    SPEED = "speed"
    RARITY = "rarity"
    SET = "set"
    DEX_ID = "dex_id"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


class SortSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    property: SortProperty = SortProperty.NAME
    direction: SortDirection = SortDirection.ASC


class FilterCriteria(BaseModel):
    """Active view filters. Empty sets mean "no constraint"."""

    model_config = ConfigDict(frozen=True)

    series: frozenset[str] = frozenset()
    types: frozenset[str] = frozenset()
    rarities: frozenset[str] = frozenset()
    # Inclusive; an inverted range matches nothing.
    hp_range: tuple[int, int] = (0, 1000)

    @field_validator("series", "types", "rarities")
    @classmethod
    def drop_blank(cls, v: frozenset[str]) -> frozenset[str]:
        return frozenset(item.strip() for item in v if item.strip())
