"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

import pendulum
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Blog content API settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    debug: bool = False
    expose_docs: bool = False

    # Content
    content_dir: Path = Path("./content")
    default_lang: str = Field(default="en", min_length=1)
    # IANA zone used to place filename dates at local midnight; None means host zone.
    timezone: str | None = None

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @field_validator("default_lang", mode="before")
    @classmethod
    def strip_default_lang(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, v: str | None) -> str | None:
        if not v:
            return None
        try:
            pendulum.timezone(v)
        except (KeyError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {v}") from exc
        return v
