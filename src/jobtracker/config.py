"""Configuration loading and validation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_LOG_FORMATS = ("json", "text")


@dataclass(frozen=True)
class Config:
    """Shell configuration. All values sourced from environment variables.

    The database location is fixed and is not part of it.
    """

    # Optional — Web
    web_host: str = "127.0.0.1"
    web_port: int = 8080

    # Optional — Application
    log_level: str = "INFO"
    log_format: str = "text"
    app_env: str = "production"


def load_config(env_path: str | Path | None = None) -> Config:
    """Load configuration from environment variables.

    Loads a .env file if present (for local development). Raises
    ValueError if WEB_PORT is not an integer or LOG_FORMAT is unknown.
    """
    load_dotenv(dotenv_path=env_path)

    raw_port = os.environ.get("WEB_PORT", "8080")
    try:
        web_port = int(raw_port)
    except ValueError:
        raise ValueError(f"WEB_PORT must be an integer, got {raw_port!r}") from None

    log_format = os.environ.get("LOG_FORMAT", "text")
    if log_format not in _LOG_FORMATS:
        raise ValueError(
            f"LOG_FORMAT must be one of: {', '.join(_LOG_FORMATS)}; got {log_format!r}"
        )

    return Config(
        # Optional — Web
        web_host=os.environ.get("WEB_HOST", "127.0.0.1"),
        web_port=web_port,
        # Optional — Application
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
        log_format=log_format,
        app_env=os.environ.get("APP_ENV", "production"),
    )
