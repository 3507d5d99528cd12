"""MLB batting orders from the Stats API live game feed.

Usage:
    from mlb_batting_orders import mlb_batting_orders

    table = mlb_batting_orders(566001, mode="all")
    for row in table:
        print(row.team, row.batting_order, row.full_name)
"""

from mlb_batting_orders.batting_orders import get_batting_orders, mlb_batting_orders
from mlb_batting_orders.ingestion.config import LineupMode, StatsAPIConfig
from mlb_batting_orders.lineup import assemble_lineup, extract_player_record
from mlb_batting_orders.models import LineupRow, LineupTable, PlayerRecord

__version__ = "0.1.0"

__all__ = [
    "mlb_batting_orders",
    "get_batting_orders",
    "assemble_lineup",
    "extract_player_record",
    "LineupMode",
    "StatsAPIConfig",
    "LineupRow",
    "LineupTable",
    "PlayerRecord",
]
