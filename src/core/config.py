"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets adapters (OMDB/Spotify/Twitter) read config consistently.
"""

from __future__ import annotations

import os
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DIST_NAME = "liri"
FALLBACK_VERSION = "1.1.0"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / DIST_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / DIST_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / DIST_NAME
    return Path.home() / ".config" / DIST_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def app_version() -> str:
    """Installed distribution version, or the bundled constant in a source checkout."""

    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return FALLBACK_VERSION


class AppSettings(BaseSettings):
    """Central application configuration.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without polluting the Core.
    - A single configuration contract for CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="LIRI_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    log_path: Path = Field(
        default=Path("log.txt"),
        validation_alias=AliasChoices("LIRI_LOG_PATH", "LOG_PATH", "log_path"),
        description="Append-only text log receiving every rendered record.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Level for the stderr error channel.",
    )
    stored_command_path: Path = Field(
        default=Path("random.txt"),
        description="File holding one `command,argument` line for do-what-it-says.",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="liri/1.1 (+https://local)",
        min_length=1,
        description="User-Agent sent to every API.",
    )

    omdb_base_url: str = Field(
        default="https://www.omdbapi.com/",
        min_length=8,
        description="OMDB endpoint.",
    )
    omdb_api_key: str | None = Field(
        default=None,
        description="OMDB API key.",
    )

    spotify_client_id: str | None = Field(default=None, description="Spotify client id.")
    spotify_client_secret: str | None = Field(default=None, description="Spotify client secret.")
    spotify_accounts_url: str = Field(
        default="https://accounts.spotify.com/api/token",
        min_length=8,
        description="Client-credentials token endpoint.",
    )
    spotify_api_url: str = Field(
        default="https://api.spotify.com/v1",
        min_length=8,
        description="Spotify Web API base URL.",
    )

    twitter_consumer_key: str | None = Field(default=None, description="Twitter consumer key.")
    twitter_consumer_secret: str | None = Field(default=None, description="Twitter consumer secret.")
    twitter_bearer_token: str | None = Field(
        default=None,
        description="App-only bearer token; exchanged from the consumer pair when unset.",
    )
    twitter_api_url: str = Field(
        default="https://api.twitter.com",
        min_length=8,
        description="Twitter API base URL.",
    )

    timeline_account: str = Field(
        default="amcnulty88",
        min_length=1,
        description="Account whose latest posts `my-tweets` shows.",
    )
    timeline_fetch_count: int = Field(
        default=200,
        ge=1,
        le=200,
        description="Posts requested per timeline call (API maximum is 200).",
    )

    default_track_query: str = Field(
        default="The Sign Ace of Base",
        min_length=1,
        description="Query used by spotify-this-song when no argument is given.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value
