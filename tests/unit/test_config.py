"""Unit tests for static configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pokecards.config import LoaderSettings, Settings


class TestDefaults:
    def test_loader_defaults(self) -> None:
        settings = Settings()
        assert settings.loader.max_entities == 1000
        assert settings.loader.detail_concurrency == 6
        assert settings.loader.index_limit == 5000

    def test_api_and_search_defaults(self) -> None:
        settings = Settings()
        assert settings.api.base_url == "https://pokeapi.co/api/v2"
        assert settings.api.timeout_seconds == 15.0
        assert settings.search.debounce_seconds == 1.0

    def test_environment_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings are static: env vars never override defaults."""
        monkeypatch.setenv("LOADER", '{"detail_concurrency": 99}')
        monkeypatch.setenv("POKECARDS__LOADER__DETAIL_CONCURRENCY", "99")
        assert Settings().loader.detail_concurrency == 6

    def test_constructor_overrides(self) -> None:
        settings = Settings(loader={"detail_concurrency": 2})
        assert settings.loader.detail_concurrency == 2
        assert settings.loader.max_entities == 1000


class TestConfigValidation:
    def test_wrong_type_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            Settings(loader={"detail_concurrency": "many"})  # type: ignore[arg-type]

    def test_zero_concurrency_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoaderSettings(detail_concurrency=0)

    def test_unknown_top_level_field_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            Settings(completely_unknown_field="oops")  # type: ignore[call-arg]

    def test_unknown_nested_field_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            LoaderSettings(max_entitys=10)  # type: ignore[call-arg]
