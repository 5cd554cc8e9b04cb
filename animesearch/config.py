"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import AnyHttpUrl, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class JikanSettings(BaseModel):
    base_url: AnyHttpUrl = Field(
        default="https://api.jikan.moe/v4/",
        description="Root of the Jikan REST API.",
    )
    search_path: str = Field(default="anime", min_length=1)
    result_limit: int = Field(default=5, ge=1, le=25)
    # Comma separated in the environment, e.g. ANIME_SEARCH_JIKAN__FIELDS=title,synopsis
    fields: Annotated[tuple[str, ...], NoDecode] = ("title", "synopsis")
    request_timeout_seconds: float = Field(default=10.0, ge=1, le=60)

    @field_validator("fields", mode="before")
    @classmethod
    def _split_fields(cls, value):
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value

    @property
    def search_endpoint(self) -> str:
        base = str(self.base_url)
        if not base.endswith("/"):
            base = f"{base}/"
        return f"{base}{self.search_path.lstrip('/')}"


class DisplaySettings(BaseModel):
    wrap_width: int = Field(default=80, ge=20, le=400)
    continuation_indent: int = Field(default=11, ge=0, le=40)
    divider_char: str = Field(default="─", min_length=1, max_length=1)
    divider_length: int = Field(default=81, ge=1, le=400)

    @field_validator("continuation_indent")
    @classmethod
    def _indent_below_width(cls, value: int, info):
        width = info.data.get("wrap_width")
        if width is not None and value >= width:
            raise ValueError("continuation_indent must be smaller than wrap_width")
        return value


class AnimeSearchSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ANIME_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"

    jikan: JikanSettings = Field(default_factory=JikanSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> AnimeSearchSettings:
    """Return cached settings instance."""

    return AnimeSearchSettings()


__all__ = [
    "AnimeSearchSettings",
    "DisplaySettings",
    "JikanSettings",
    "get_settings",
]
