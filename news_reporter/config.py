"""Configuration loaded from the environment and an optional .env file."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.openai.com/v1"


class ConfigError(Exception):
    """Raised when required configuration is missing."""


@dataclass(frozen=True)
class Config:
    """Credentials and endpoint for the API."""

    openai_api_key: str
    base_url: str = DEFAULT_BASE_URL


def load_config() -> Config:
    """Read configuration, loading ``.env`` from the working directory if present."""
    load_dotenv(".env")

    api_key = os.environ.get("OPENAI_API_KEY", "")
    if not api_key:
        raise ConfigError("OPENAI_API_KEY environment variable is required")

    base_url = os.environ.get("OPENAI_BASE_URL", "") or DEFAULT_BASE_URL
    return Config(openai_api_key=api_key, base_url=base_url)