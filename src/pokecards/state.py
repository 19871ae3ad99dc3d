"""Application state wiring.

``AppState`` bundles the long-lived collaborators so consumers receive them
explicitly. ``open_app_state`` owns the HTTP client and closes it on exit.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx

from pokecards.config import Settings
from pokecards.fetcher import Fetcher, build_http_client
from pokecards.logging_config import configure_logging
from pokecards.search import SearchSession
from pokecards.service import CatalogService


@dataclass
class AppState:
    settings: Settings
    http_client: httpx.AsyncClient
    fetcher: Fetcher
    service: CatalogService

    def new_search_session(self) -> SearchSession:
        return SearchSession(self.service, self.settings.search.debounce_seconds)


def build_app_state(settings: Settings, http_client: httpx.AsyncClient) -> AppState:
    fetcher = Fetcher(http_client)
    return AppState(
        settings=settings,
        http_client=http_client,
        fetcher=fetcher,
        service=CatalogService(fetcher, settings.loader),
    )


@asynccontextmanager
async def open_app_state(settings: Settings | None = None) -> AsyncIterator[AppState]:
    settings = settings or Settings()
    configure_logging(settings.logging)
    async with build_http_client(settings.api) as client:
        yield build_app_state(settings, client)
