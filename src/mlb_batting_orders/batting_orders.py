"""Retrieve batting orders for a given MLB game."""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from .ingestion.client import LiveFeedClient
from .ingestion.config import LineupMode, StatsAPIConfig
from .lineup.assembler import assemble_lineup
from .models.lineup import LineupTable

logger = logging.getLogger(__name__)

FeedFetcher = Callable[[int | str], dict[str, Any]]


def mlb_batting_orders(
    game_pk: int | str,
    mode: LineupMode | str = LineupMode.STARTING,
    fetch: Optional[FeedFetcher] = None,
    config: Optional[StatsAPIConfig] = None,
) -> Optional[LineupTable]:
    """Retrieve the batting order table for ``game_pk``.

    Columns: id, fullName, abbreviation, battingOrder, battingPositionNum,
    team, teamName, teamId.

    Any failure (network, unexpected feed shape, malformed batting order,
    unknown mode) is logged and ``None`` is returned; no partial table is
    ever produced.

    Args:
        game_pk: The unique game_pk identifier for the game
        mode: "starting" for the starting lineup only, "all" for every
            batter that appeared
        fetch: Callable returning the live feed for a game_pk; defaults to
            a LiveFeedClient request
        config: Stats API configuration for the default fetcher
            (defaults to StatsAPIConfig.from_env())

    Returns:
        LineupTable, or None on failure

    Example:
        >>> table = mlb_batting_orders(566001)
        >>> [row.full_name for row in table.for_team("away")]
    """
    try:
        if fetch is None:
            with LiveFeedClient(config or StatsAPIConfig.from_env()) as client:
                feed = client.fetch_live_feed(game_pk)
        else:
            feed = fetch(game_pk)

        return assemble_lineup(feed, mode)

    except Exception as e:
        logger.error(f"{datetime.now(timezone.utc).isoformat()}: Invalid arguments provided")
        logger.debug(f"Batting order retrieval failed for game {game_pk}: {e}", exc_info=True)
        return None


# Legacy name
get_batting_orders = mlb_batting_orders
