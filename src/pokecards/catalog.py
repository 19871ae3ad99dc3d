"""Static lookup tables: generation ranges, rarity thresholds and rank orders."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationRange:
    id: str
    name: str
    code: str
    max_primary_id: int


@dataclass(frozen=True)
class RarityThreshold:
    min_stat_sum: int
    tier: str


# Ascending by max_primary_id; the last bound is effectively unbounded.
GENERATION_RANGES: tuple[GenerationRange, ...] = (
    GenerationRange("generation-i", "Generation I", "GEN1", 151),
    GenerationRange("generation-ii", "Generation II", "GEN2", 251),
    GenerationRange("generation-iii", "Generation III", "GEN3", 386),
    GenerationRange("generation-iv", "Generation IV", "GEN4", 493),
    GenerationRange("generation-v", "Generation V", "GEN5", 649),
    GenerationRange("generation-vi", "Generation VI", "GEN6", 721),
    GenerationRange("generation-vii", "Generation VII", "GEN7", 809),
    GenerationRange("generation-viii", "Generation VIII", "GEN8", 905),
    GenerationRange("generation-ix", "Generation IX", "GEN9", sys.maxsize),
)

# Strictly descending by min_stat_sum; anything below the last row is Common.
RARITY_THRESHOLDS: tuple[RarityThreshold, ...] = (
    RarityThreshold(600, "Legendary"),
    RarityThreshold(520, "Epic"),
    RarityThreshold(450, "Rare"),
    RarityThreshold(380, "Uncommon"),
)
DEFAULT_RARITY = "Common"

RARITY_ORDER: tuple[str, ...] = ("Common", "Uncommon", "Rare", "Epic", "Legendary")

# lowercase name -> rank
RARITY_RANK: dict[str, int] = {name.lower(): rank for rank, name in enumerate(RARITY_ORDER)}
GENERATION_RANK: dict[str, int] = {
    generation.name.lower(): rank for rank, generation in enumerate(GENERATION_RANGES)
}

# Sentinel for values missing from a rank table.
UNRANKED = sys.maxsize

ARTWORK_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/"
    "other/official-artwork/{id}.png"
)


def generation_for_id(primary_id: int) -> GenerationRange:
    """First range whose upper bound covers ``primary_id``."""
    for generation in GENERATION_RANGES:
        if primary_id <= generation.max_primary_id:
            return generation
    return GENERATION_RANGES[-1]


def rarity_for_stat_total(total: int) -> str:
    for threshold in RARITY_THRESHOLDS:
        if total >= threshold.min_stat_sum:
            return threshold.tier
    return DEFAULT_RARITY


def rarity_rank(rarity: str | None) -> int:
    return RARITY_RANK.get((rarity or "").lower(), UNRANKED)


def generation_rank(name: str | None) -> int:
    return GENERATION_RANK.get((name or "").lower(), UNRANKED)
