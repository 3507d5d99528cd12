#!/usr/bin/env python3
"""Example: Batting orders for a game.

This example demonstrates:
1. Fetching the starting lineup for a game from the live feed
2. Fetching every batter that appeared (starters and substitutes)
3. Exporting rows as JSON

Usage:
    python examples/batting_orders_example.py 775296
"""

import logging
import sys

from mlb_batting_orders import LineupMode, mlb_batting_orders

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)


def main(game_pk: int) -> int:
    starting = mlb_batting_orders(game_pk)
    if starting is None:
        print(f"❌ Could not retrieve batting orders for game {game_pk}")
        return 1

    print(f"\n{starting.source} ({starting.generated_at:%Y-%m-%d %H:%M:%S %Z})")
    for team in ("away", "home"):
        rows = starting.for_team(team)
        if rows:
            print(f"\n{rows[0].team_name}")
        for row in rows:
            print(f"  {row.batting_order}. {row.full_name} ({row.abbreviation})")

    all_batters = mlb_batting_orders(game_pk, mode=LineupMode.ALL)
    if all_batters is not None:
        subs = [row for row in all_batters if not row.is_starter]
        print(f"\n{len(subs)} substitutes batted")
        for row in subs:
            print(f"  {row.team_name}: {row.full_name} batting {row.batting_order}")

        print("\nJSON:")
        print(all_batters.to_json())

    return 0


if __name__ == "__main__":
    sys.exit(main(int(sys.argv[1]) if len(sys.argv) > 1 else 775296))
