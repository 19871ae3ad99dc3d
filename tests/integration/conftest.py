"""Integration test fixtures.

Provides a fully wired AppState over a real httpx client. Tests mock the
PokeAPI host with respx; shared payload builders come from tests/conftest.py.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pokecards.fetcher import build_http_client
from pokecards.state import build_app_state

if TYPE_CHECKING:
    from pokecards.config import Settings
    from pokecards.state import AppState


@pytest.fixture()
async def app_state(settings: Settings) -> AppState:
    """Full AppState wired the same way open_app_state() does it."""
    async with build_http_client(settings.api) as client:
        yield build_app_state(settings, client)
