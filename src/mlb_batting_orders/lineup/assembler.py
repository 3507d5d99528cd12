"""Assemble the lineup table for both teams of a game."""

import logging
from typing import Any, Mapping

from ..ingestion.config import LineupMode
from ..models.feed import TEAM_SIDES, LiveFeed, TeamSide, decode_feed
from ..models.lineup import BATTING_ORDER_SOURCE, LineupRow, LineupTable
from .extractor import extract_player_record

logger = logging.getLogger(__name__)


def _side_rows(feed: LiveFeed, side: TeamSide) -> list[LineupRow]:
    """Extract every player of one side, sorted by batting slot (nulls last)."""
    team = feed.team(side)

    # KeysView is a set: each player id is extracted once
    player_ids = feed.players(side).keys()

    rows = [
        LineupRow.from_record(
            extract_player_record(feed, side, player_id),
            team=side,
            team_name=team.name,
            team_id=team.id,
        )
        for player_id in player_ids
    ]
    rows.sort(key=lambda row: (row.batting_order is None, row.batting_order or ""))
    return rows


def assemble_lineup(
    feed: Mapping[str, Any] | LiveFeed, mode: LineupMode | str = LineupMode.STARTING
) -> LineupTable:
    """Build the batting order table for a live game feed.

    Away rows come before home rows, then rows are ordered by batting slot
    and substitution number. Players without a batting order (pitchers
    who did not bat, bench, bullpen) are left out.

    Args:
        feed: Raw feed document or decoded LiveFeed
        mode: "starting" keeps batting position 0 only, "all" keeps
            every batter that appeared

    Returns:
        LineupTable

    Raises:
        ValueError: If mode is unknown
        FeedDecodeError: If the feed is missing a required path
        BattingOrderParseError: If any batting order code is malformed
    """
    mode = LineupMode(mode)
    decoded = decode_feed(feed)

    rows: list[LineupRow] = []
    for side in TEAM_SIDES:
        side_rows = _side_rows(decoded, side)
        logger.debug(f"Extracted {len(side_rows)} {side} players")
        rows.extend(side_rows)

    rows.sort(key=LineupRow.sort_key)
    rows = [row for row in rows if row.batting_order is not None]

    table = LineupTable(rows=rows, source=BATTING_ORDER_SOURCE)
    if mode == LineupMode.STARTING:
        table = table.starters()

    logger.info(f"Assembled {len(table)} lineup rows ({mode.value})")
    return table
