"""Shared fixtures: settings pointed at a fake PokeAPI host and payload builders."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from pokecards.config import Settings

BASE_URL = "https://pokeapi.test/api/v2"

BULBASAUR_STATS = {
    "hp": 45,
    "attack": 49,
    "defense": 49,
    "special-attack": 65,
    "special-defense": 65,
    "speed": 45,
}  # total 318


def build_payload(
    pokemon_id: int,
    name: str,
    *,
    stats: dict[str, int] | None = None,
    types: list[str] | None = None,
    abilities: list[tuple[str, bool]] | None = None,
    moves: list[dict[str, Any]] | None = None,
    height: int = 7,
    weight: int = 69,
    front_default: str | None = "https://img.test/front.png",
    artwork: str | None = "https://img.test/art.png",
) -> dict[str, Any]:
    """Minimal ``/pokemon/{id}`` payload in PokeAPI's shape."""
    stats = BULBASAUR_STATS if stats is None else stats
    return {
        "id": pokemon_id,
        "name": name,
        "height": height,
        "weight": weight,
        "sprites": {
            "front_default": front_default,
            "other": {"official-artwork": {"front_default": artwork}},
        },
        "stats": [{"base_stat": value, "stat": {"name": key}} for key, value in stats.items()],
        "types": [
            {"slot": slot, "type": {"name": type_name}}
            for slot, type_name in enumerate(types or [], start=1)
        ],
        "abilities": [
            {"ability": {"name": ability, "url": ""}, "is_hidden": hidden}
            for ability, hidden in (abilities or [])
        ],
        "moves": moves or [],
        "species": {"name": name, "url": f"{BASE_URL}/pokemon-species/{pokemon_id}/"},
    }


def build_move(name: str, *details: tuple[int, str, str]) -> dict[str, Any]:
    """Move entry; each detail is ``(level, learn_method, version_group)``."""
    return {
        "move": {"name": name, "url": ""},
        "version_group_details": [
            {
                "level_learned_at": level,
                "move_learn_method": {"name": method, "url": ""},
                "version_group": {"name": version, "url": ""},
            }
            for level, method, version in details
        ],
    }


@pytest.fixture()
def make_payload() -> Callable[..., dict[str, Any]]:
    return build_payload


@pytest.fixture()
def make_move() -> Callable[..., dict[str, Any]]:
    return build_move


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        api={"base_url": BASE_URL},
        loader={"detail_concurrency": 3, "max_entities": 50},
        search={"debounce_seconds": 0},
    )


@pytest.fixture()
def base_url() -> str:
    return BASE_URL
