"""Unit-specific fixtures (HTTP is always mocked with respx)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pokecards.fetcher import Fetcher, build_http_client
from pokecards.service import CatalogService

if TYPE_CHECKING:
    from pokecards.config import Settings


@pytest.fixture()
async def fetcher(settings: Settings):
    """Fetcher over a real AsyncClient; tests mock the wire with respx."""
    async with build_http_client(settings.api) as client:
        yield Fetcher(client)


@pytest.fixture()
def service(fetcher: Fetcher, settings: Settings) -> CatalogService:
    return CatalogService(fetcher, settings.loader)
