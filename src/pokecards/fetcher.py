"""Read-only PokeAPI client.

Every transport, status and decoding failure is translated into a
``PokeCardsError`` here, so callers only ever handle one exception type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx
import structlog
from pydantic import ValidationError

from pokecards.errors import ErrorCode, PokeCardsError
from pokecards.models.index import IndexEntry, IndexPage
from pokecards.models.raw import RawPokemon

if TYPE_CHECKING:
    from pokecards.config import ApiSettings

log = structlog.get_logger()


def build_http_client(settings: ApiSettings) -> httpx.AsyncClient:
    """Create the shared AsyncClient. The caller owns its lifetime."""
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.timeout_seconds),
        headers={"User-Agent": settings.user_agent, "Accept": "application/json"},
        follow_redirects=True,
    )


class Fetcher:
    """Thin typed layer over the PokeAPI endpoints this package consumes."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            log.warning("fetch_network_error", path=path, error=str(exc))
            raise PokeCardsError(
                ErrorCode.FETCH_FAILED,
                f"Network error fetching {path}: {exc}",
                recoverable=True,
            ) from exc

        if response.status_code == 404:
            raise PokeCardsError(ErrorCode.NOT_FOUND, f"Not found: {path}", recoverable=False)
        if response.is_error:
            log.warning("fetch_http_error", path=path, status_code=response.status_code)
            raise PokeCardsError(
                ErrorCode.FETCH_FAILED,
                f"HTTP {response.status_code} fetching {path}",
                recoverable=True,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise PokeCardsError(
                ErrorCode.INVALID_RESPONSE, f"Response from {path} is not valid JSON"
            ) from exc

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def fetch_index(self, limit: int, offset: int = 0) -> IndexPage:
        """One page of ``/pokemon``. A single call with a large limit covers everything."""
        payload = await self.get_json("/pokemon", params={"offset": offset, "limit": limit})
        return self._validate(IndexPage, payload, "/pokemon")

    async def fetch_pokemon(self, identifier: str | int) -> RawPokemon:
        path = f"/pokemon/{quote(str(identifier).strip().lower(), safe='')}"
        payload = await self.get_json(path)
        return self._validate(RawPokemon, payload, path)

    async def fetch_named_list(self, path: str) -> list[IndexEntry]:
        """``/type``, ``/generation`` and similar ``{results: [{name, url}]}`` listings."""
        payload = await self.get_json(path)
        return self._validate(IndexPage, payload, path).results

    @staticmethod
    def _validate(model: Any, payload: Any, path: str) -> Any:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise PokeCardsError(
                ErrorCode.INVALID_RESPONSE,
                f"Unexpected payload shape from {path}: {exc.error_count()} error(s)",
            ) from exc
