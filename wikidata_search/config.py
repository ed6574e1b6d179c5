"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = "WikidataSearchProvider extension for GNOME Shell"


class ClientConfig(BaseModel):
    protocol: Literal["http", "https"] = "https"
    base_url: str = Field(default="wikidata.org", min_length=1)
    api_path: str = Field(default="w/api.php", min_length=1)
    lang: str = Field(default="en", min_length=1)
    timeout_seconds: float = Field(default=10, gt=0, le=120)
    user_agent: str = DEFAULT_USER_AGENT
    limit: int = Field(default=10, ge=1, le=50, description="Results requested per query.")

    @field_validator("base_url", "api_path")
    @classmethod
    def _strip_slashes(cls, value: str) -> str:
        return value.strip().strip("/")


class ProviderSettings(BaseModel):
    trigger_token: str = Field(default="wd", min_length=1)
    cache_max_entries: int | None = Field(
        default=1000,
        ge=10,
        description="Upper bound for cached entities; None keeps every entity for the process lifetime.",
    )
    honor_host_max: bool = Field(
        default=False,
        description="Use the host-supplied max in filter_results instead of only the client limit.",
    )


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WDSP_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    extension_path: str = "."

    api: ClientConfig = Field(default_factory=ClientConfig)
    provider: ProviderSettings = Field(default_factory=ProviderSettings)

    @model_validator(mode="after")
    def _cache_holds_a_full_page(self) -> "AppSettings":
        cap = self.provider.cache_max_entries
        if cap is not None and cap < self.api.limit:
            raise ValueError(
                f"provider.cache_max_entries ({cap}) must be at least api.limit ({self.api.limit})"
            )
        return self


@lru_cache
def get_settings() -> AppSettings:
    """Return cached settings instance."""

    return AppSettings()


__all__ = [
    "AppSettings",
    "ClientConfig",
    "DEFAULT_USER_AGENT",
    "ProviderSettings",
    "get_settings",
]
