"""Feed and lineup models."""

from mlb_batting_orders.models.feed import LiveFeed, decode_feed
from mlb_batting_orders.models.lineup import (
    BATTING_ORDER_SOURCE,
    STARTING_BATTING_ORDER_SOURCE,
    LineupRow,
    LineupTable,
    PlayerRecord,
)

__all__ = [
    "LiveFeed",
    "decode_feed",
    "BATTING_ORDER_SOURCE",
    "STARTING_BATTING_ORDER_SOURCE",
    "LineupRow",
    "LineupTable",
    "PlayerRecord",
]
