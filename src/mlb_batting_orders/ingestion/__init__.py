"""Ingestion layer for the MLB Stats API live game feed.

Provides:
- LiveFeedClient: httpx client for v1.1/game/{game_pk}/feed/live
- StatsAPIConfig: Connection settings (defaults, env vars or YAML)
- TemplateResolver: ${VAR} substitution for endpoint paths
"""

from .client import LiveFeedClient
from .config import LineupMode, StatsAPIConfig, load_config
from .template import TemplateResolver, resolve_endpoint

__all__ = [
    "LiveFeedClient",
    "LineupMode",
    "StatsAPIConfig",
    "load_config",
    "TemplateResolver",
    "resolve_endpoint",
]
