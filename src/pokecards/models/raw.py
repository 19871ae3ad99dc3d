"""PokeAPI ``/pokemon/{id}`` payload, reduced to the fields the normalizer reads.

Collections default to empty and unknown fields are ignored, so a sparse or
slightly reshaped payload still validates.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NamedResource(BaseModel):
    name: str = ""
    url: str = ""


class RawStat(BaseModel):
    base_stat: int = 0
    stat: NamedResource = NamedResource()


class RawTypeSlot(BaseModel):
    slot: int = 0
    type: NamedResource = NamedResource()


class RawAbility(BaseModel):
    ability: NamedResource | None = None
    is_hidden: bool = False


class RawVersionDetail(BaseModel):
    level_learned_at: int = 0
    move_learn_method: NamedResource | None = None
    version_group: NamedResource | None = None


class RawMove(BaseModel):
    move: NamedResource | None = None
    version_group_details: list[RawVersionDetail] = []


class RawArtwork(BaseModel):
    front_default: str | None = None


class RawOtherSprites(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    official_artwork: RawArtwork | None = Field(default=None, alias="official-artwork")


class RawSprites(BaseModel):
    front_default: str | None = None
    other: RawOtherSprites | None = None


class RawPokemon(BaseModel):
    id: int
    name: str
    height: int = 0  # decimetres
    weight: int = 0  # hectograms
    sprites: RawSprites = RawSprites()
    stats: list[RawStat] = []
    types: list[RawTypeSlot] = []
    abilities: list[RawAbility] = []
    moves: list[RawMove] = []
    species: NamedResource | None = None
