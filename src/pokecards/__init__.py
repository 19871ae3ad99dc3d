from __future__ import annotations

from pokecards.cache import EntityCache
from pokecards.config import Settings
from pokecards.errors import ErrorCode, PokeCardsError
from pokecards.normalizer import normalize, strip_empty
from pokecards.ranking import apply_view, filter_entities, matches_filters, sort_entities
from pokecards.search import SearchOutcome, SearchSession
from pokecards.service import CatalogService
from pokecards.state import AppState, open_app_state

__all__ = [
    "AppState",
    "CatalogService",
    "EntityCache",
    "ErrorCode",
    "PokeCardsError",
    "SearchOutcome",
    "SearchSession",
    "Settings",
    "apply_view",
    "filter_entities",
    "matches_filters",
    "normalize",
    "open_app_state",
    "sort_entities",
    "strip_empty",
]
