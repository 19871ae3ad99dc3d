"""Raw PokeAPI payload -> canonical Entity.

``normalize`` is pure: no clock, no randomness, no I/O. It assembles a plain
candidate mapping that may still hold empty intermediate values, prunes them
with ``strip_empty`` and validates the result into an ``Entity``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from pokecards.catalog import ARTWORK_URL_TEMPLATE, generation_for_id, rarity_for_stat_total
from pokecards.models.entity import Entity
from pokecards.models.raw import RawMove, RawPokemon, RawStat, RawVersionDetail

MAX_TOP_MOVES = 6
MAX_ATTACKS = 3
MAX_ATTACK_COST_TYPES = 2
GENERIC_ENERGY_TYPE = "Colorless"
CATEGORY = "Pokemon"
SUMMARY_SEPARATOR = " • "

_WORD_SPLIT = re.compile(r"[-_\s]+")


def title_case(value: str) -> str:
    """``"special-attack"`` -> ``"Special Attack"``."""
    return " ".join(part[:1].upper() + part[1:] for part in _WORD_SPLIT.split(value) if part)


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, Mapping | list | tuple):
        return len(value) == 0
    return False


def strip_empty(value: Any) -> Any:
    """Recursively drop ``None``, ``""`` and empty containers.

    Children are pruned first, so a mapping or sequence that only held empty
    values disappears from its parent too. ``False`` and ``0`` are kept.
    Applying it to already-stripped data returns an equal value.
    """
    if isinstance(value, Mapping):
        pruned = {key: strip_empty(item) for key, item in value.items()}
        return {key: item for key, item in pruned.items() if not is_empty(item)}
    if isinstance(value, list | tuple):
        pruned_items = [strip_empty(item) for item in value]
        return type(value)(item for item in pruned_items if not is_empty(item))
    return value


# ---------------------------------------------------------------------------
# Field derivations
# ---------------------------------------------------------------------------


def stat_total(stats: Sequence[RawStat]) -> int:
    return sum(stat.base_stat for stat in stats)


def stat_value(stats: Sequence[RawStat], name: str) -> int:
    for stat in stats:
        if stat.stat.name == name:
            return stat.base_stat
    return 0


def format_measure(raw: int, unit: str) -> str | None:
    """Decimetres/hectograms to ``"0.7 m"`` / ``"6.9 kg"``; ``None`` when zero."""
    if not raw:
        return None
    return f"{raw / 10:.1f} {unit}"


def named_moves(moves: Sequence[RawMove]) -> list[tuple[str, RawMove]]:
    """Moves with a non-empty name, paired with their display name."""
    return [(title_case(move.move.name), move) for move in moves if move.move and move.move.name]


def preferred_detail(move: RawMove) -> RawVersionDetail | None:
    """First detail learned at a positive level, else the first detail at all."""
    for detail in move.version_group_details:
        if detail.level_learned_at > 0:
            return detail
    return move.version_group_details[0] if move.version_group_details else None


def _resource_title(resource: Any) -> str | None:
    if resource is None or not resource.name:
        return None
    return title_case(resource.name)


def _top_moves(moves: list[tuple[str, RawMove]]) -> list[dict[str, Any]]:
    seen: dict[str, dict[str, Any]] = {}
    for name, move in moves[:MAX_TOP_MOVES]:
        if name in seen:
            continue
        detail = preferred_detail(move)
        seen[name] = {
            "name": name,
            "level_learned_at": (detail.level_learned_at or None) if detail else None,
            "learn_method": _resource_title(detail.move_learn_method) if detail else None,
            "version_group": _resource_title(detail.version_group) if detail else None,
        }
    return list(seen.values())


def _attacks(moves: list[tuple[str, RawMove]], types: list[str]) -> list[dict[str, Any]]:
    cost = types[:MAX_ATTACK_COST_TYPES] or [GENERIC_ENERGY_TYPE]
    attacks = []
    for name, move in moves[:MAX_ATTACKS]:
        notes: list[str] = []
        detail = preferred_detail(move)
        if detail is not None:
            method = _resource_title(detail.move_learn_method)
            if method:
                notes.append(method)
            if detail.level_learned_at > 0:
                notes.append(f"Lv {detail.level_learned_at}")
            version = _resource_title(detail.version_group)
            if version:
                notes.append(version)
        attacks.append(
            {
                "name": name,
                "cost": list(cost),
                "converted_energy_cost": max(1, len(cost)),
                "text": SUMMARY_SEPARATOR.join(notes),
            }
        )
    return attacks


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_candidate(raw: RawPokemon) -> dict[str, Any]:
    """Assemble the unpruned entity mapping. May contain empty values."""
    generation = generation_for_id(raw.id)
    types = [title_case(slot.type.name) for slot in raw.types if slot.type.name]

    other = raw.sprites.other
    official_art = (
        other.official_artwork.front_default if other and other.official_artwork else None
    ) or ARTWORK_URL_TEMPLATE.format(id=raw.id)
    small_sprite = raw.sprites.front_default or official_art

    abilities = [
        {"name": title_case(entry.ability.name), "hidden": entry.is_hidden}
        for entry in raw.abilities
        if entry.ability is not None and entry.ability.name
    ]
    abilities_summary = ", ".join(
        f"{ability['name']} (Hidden)" if ability["hidden"] else ability["name"]
        for ability in abilities
    )

    base_stats = [
        {"name": title_case(stat.stat.name), "value": stat.base_stat}
        for stat in raw.stats
        if stat.stat.name
    ]
    base_stats_summary = SUMMARY_SEPARATOR.join(
        f"{stat['name']} {stat['value']}" for stat in base_stats
    )

    moves = named_moves(raw.moves)
    top_moves = _top_moves(moves)
    moves_summary = ", ".join(move["name"] for move in top_moves)

    height = format_measure(raw.height, "m")
    weight = format_measure(raw.weight, "kg")

    text = [
        f"{label}: {value}"
        for label, value in (
            ("Abilities", abilities_summary),
            ("Height", height),
            ("Weight", weight),
            ("Base Stats", base_stats_summary),
            ("Moves", moves_summary),
        )
        if value
    ]

    retreat_cost = max(len(types), 1)
    number = str(raw.id)

    return {
        "id": number,
        "local_id": number,
        "name": title_case(raw.name),
        "image": small_sprite,
        "image_hi_res": official_art,
        "rarity": rarity_for_stat_total(stat_total(raw.stats)),
        "set": {"id": generation.id, "name": generation.name},
        "serie": {"id": generation.id, "name": generation.name},
        "category": CATEGORY,
        "dex_id": [raw.id],
        "types": types,
        # zero stats are treated as unknown
        "hp": stat_value(raw.stats, "hp") or None,
        "attack": stat_value(raw.stats, "attack") or None,
        "defense": stat_value(raw.stats, "defense") or None,
        "special_attack": stat_value(raw.stats, "special-attack") or None,
        "special_defense": stat_value(raw.stats, "special-defense") or None,
        "speed": stat_value(raw.stats, "speed") or None,
        "retreat_cost": retreat_cost,
        "converted_retreat_cost": retreat_cost,
        "number": number,
        "series": generation.name,
        "set_code": generation.code,
        "text": text,
        "attacks": _attacks(moves, types),
        "national_pokedex_numbers": [raw.id],
        "legal": {"standard": True, "expanded": True},
        "images": {"small": small_sprite, "large": official_art},
        "height": height,
        "weight": weight,
        "abilities_summary": abilities_summary,
        "base_stats_summary": base_stats_summary,
        "moves_summary": moves_summary,
        "abilities": abilities,
        "base_stats": base_stats,
        "top_moves": top_moves,
    }


def normalize(raw: RawPokemon | Mapping[str, Any]) -> Entity:
    """Map a raw ``/pokemon/{id}`` payload to a canonical Entity.

    Raises ``pydantic.ValidationError`` when the payload lacks an id or name.
    """
    if not isinstance(raw, RawPokemon):
        raw = RawPokemon.model_validate(raw)
    return Entity.model_validate(strip_empty(build_candidate(raw)))
