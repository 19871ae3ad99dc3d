from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

_TRAILING_ID = re.compile(r"/(\d+)/?$")


class IndexEntry(BaseModel):
    """Single row of the remote ``/pokemon`` listing, not yet hydrated."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    reference: str = Field(alias="url")  # e.g. https://pokeapi.co/api/v2/pokemon/25/

    @property
    def numeric_id(self) -> int | None:
        match = _TRAILING_ID.search(self.reference)
        return int(match.group(1)) if match else None


class IndexPage(BaseModel):
    count: int = 0
    results: list[IndexEntry] = []
