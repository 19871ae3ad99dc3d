from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Frozen(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class SetInfo(_Frozen):
    id: str
    name: str


class SerieInfo(_Frozen):
    id: str
    name: str


class Legal(_Frozen):
    standard: bool | None = None
    expanded: bool | None = None


class Images(_Frozen):
    small: str | None = None
    large: str | None = None


class Ability(_Frozen):
    name: str
    hidden: bool = False


class BaseStat(_Frozen):
    name: str
    value: int


class MoveSummary(_Frozen):
    name: str
    level_learned_at: int | None = None
    learn_method: str | None = None
    version_group: str | None = None


class Attack(_Frozen):
    name: str
    cost: tuple[str, ...]
    converted_energy_cost: int
    damage: str | None = None
    text: str | None = None


class Entity(_Frozen):
    """Canonical, denormalized card for one Pokémon.

    Only ``id``, ``name`` and ``image`` are guaranteed. Every other attribute
    is either meaningful or ``None``; it is never an empty string or empty
    collection.
    """

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    image: str = Field(min_length=1)

    local_id: str | None = None
    image_hi_res: str | None = None
    rarity: str | None = None
    set: SetInfo | None = None
    serie: SerieInfo | None = None
    category: str | None = None
    dex_id: tuple[int, ...] | None = None
    types: tuple[str, ...] | None = None

    hp: int | None = None
    attack: int | None = None
    defense: int | None = None
    special_attack: int | None = None
    special_defense: int | None = None
    speed: int | None = None

    retreat_cost: int | None = None
    converted_retreat_cost: int | None = None
    number: str | None = None
    series: str | None = None
    set_code: str | None = None
    text: tuple[str, ...] | None = None
    attacks: tuple[Attack, ...] | None = None
    national_pokedex_numbers: tuple[int, ...] | None = None
    legal: Legal | None = None
    images: Images | None = None

    height: str | None = None
    weight: str | None = None
    abilities_summary: str | None = None
    base_stats_summary: str | None = None
    moves_summary: str | None = None
    abilities: tuple[Ability, ...] | None = None
    base_stats: tuple[BaseStat, ...] | None = None
    top_moves: tuple[MoveSummary, ...] | None = None

    def to_payload(self) -> dict[str, Any]:
        """camelCase JSON-ready mapping with absent attributes omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
