"""Configuration.

Every setting has a hardcoded default. Settings are static: the only source
is constructor arguments, so neither environment variables nor config files
can change loader behaviour behind the caller's back.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


class ApiSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_url: str = "https://pokeapi.co/api/v2"
    timeout_seconds: float = Field(default=15.0, gt=0)
    user_agent: str = "pokecards/0.1"


class LoaderSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Cap on entities hydrated by load_all_entities(); larger slows first load.
    max_entities: int = Field(default=1000, ge=1)
    detail_concurrency: int = Field(default=6, ge=1)
    index_limit: int = Field(default=5000, ge=1)


class SearchSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    debounce_seconds: float = Field(default=1.0, ge=0)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(extra="forbid")

    api: ApiSettings = ApiSettings()
    loader: LoaderSettings = LoaderSettings()
    search: SearchSettings = SearchSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args only
            # env, dotenv and file secrets intentionally excluded
        )
