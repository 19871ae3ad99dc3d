from __future__ import annotations

from pokecards.models.entity import (
    Ability,
    Attack,
    BaseStat,
    Entity,
    Images,
    Legal,
    MoveSummary,
    SerieInfo,
    SetInfo,
)
from pokecards.models.index import IndexEntry, IndexPage
from pokecards.models.query import FilterCriteria, SortDirection, SortProperty, SortSpec
from pokecards.models.raw import RawPokemon

__all__ = [
    # entity
    "Entity",
    "Ability",
    "Attack",
    "BaseStat",
    "Images",
    "Legal",
    "MoveSummary",
    "SerieInfo",
    "SetInfo",
    # index
    "IndexEntry",
    "IndexPage",
    # raw payload
    "RawPokemon",
    # query
    "FilterCriteria",
    "SortDirection",
    "SortProperty",
    "SortSpec",
]
