"""Stats API client configuration using Pydantic.

Supports configuration from:
1. Explicit parameters
2. Environment variables
3. A YAML file
"""

import os
from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://statsapi.mlb.com/api"
DEFAULT_ENDPOINT_TEMPLATE = "v1.1/game/${GAME_PK}/feed/live"


class LineupMode(str, Enum):
    """Which batters to keep in the lineup table."""

    STARTING = "starting"  # Starters only (batting position 0)
    ALL = "all"  # Every batter that appeared


class StatsAPIConfig(BaseModel):
    """Connection settings for the MLB Stats API."""

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Stats API root URL")
    endpoint_template: str = Field(
        default=DEFAULT_ENDPOINT_TEMPLATE,
        description="Live feed path relative to base_url (supports ${GAME_PK})",
    )
    timeout: float = Field(default=30.0, ge=1, le=300, description="Request timeout in seconds")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and strip the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL: {v}")
        return v.rstrip("/")

    @field_validator("endpoint_template")
    @classmethod
    def validate_endpoint_template(cls, v: str) -> str:
        """Endpoint paths are relative to base_url."""
        return v.lstrip("/")

    @classmethod
    def from_env(cls) -> "StatsAPIConfig":
        """Create configuration from environment variables.

        Environment variables:
        - MLB_STATSAPI_BASE_URL: Stats API root URL
        - MLB_STATSAPI_ENDPOINT: Live feed endpoint template
        - MLB_STATSAPI_TIMEOUT: Request timeout in seconds

        Returns:
            StatsAPIConfig instance
        """
        return cls(
            base_url=os.getenv("MLB_STATSAPI_BASE_URL", DEFAULT_BASE_URL),
            endpoint_template=os.getenv("MLB_STATSAPI_ENDPOINT", DEFAULT_ENDPOINT_TEMPLATE),
            timeout=float(os.getenv("MLB_STATSAPI_TIMEOUT", "30")),
        )


def load_config(path: str | Path) -> StatsAPIConfig:
    """Load Stats API configuration from a YAML file.

    The file may hold the settings at the top level or under a
    ``statsapi`` key.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated StatsAPIConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with open(config_path) as f:
        config_data = yaml.safe_load(f) or {}

    if not isinstance(config_data, dict):
        raise ValueError(f"Config must be a mapping: {config_path}")

    return StatsAPIConfig(**config_data.get("statsapi", config_data))
