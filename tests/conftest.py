"""Pytest configuration and fixtures for all tests."""

from typing import Any, Callable, Optional

import pytest

from mlb_batting_orders.ingestion.config import StatsAPIConfig


# ============================================================================
# Live Feed Fixtures
# ============================================================================

POSITIONS = {
    "P": ("1", "Pitcher", "Pitcher"),
    "C": ("2", "Catcher", "Catcher"),
    "1B": ("3", "First Base", "Infielder"),
    "2B": ("4", "Second Base", "Infielder"),
    "3B": ("5", "Third Base", "Infielder"),
    "SS": ("6", "Shortstop", "Infielder"),
    "LF": ("7", "Outfielder", "Outfielder"),
    "CF": ("8", "Outfielder", "Outfielder"),
    "RF": ("9", "Outfielder", "Outfielder"),
    "DH": ("10", "Designated Hitter", "Hitter"),
    "PH": ("11", "Pinch Hitter", "Hitter"),
}


def _player(
    person_id: int, full_name: str, abbreviation: str, batting_order: Optional[str] = None
) -> dict[str, Any]:
    """Build one boxscore player entry the way the live feed shapes it."""
    code, name, position_type = POSITIONS[abbreviation]
    entry: dict[str, Any] = {
        "person": {
            "id": person_id,
            "fullName": full_name,
            "link": f"/api/v1/people/{person_id}",
        },
        "jerseyNumber": "99",
        "position": {
            "code": code,
            "name": name,
            "type": position_type,
            "abbreviation": abbreviation,
        },
        "status": {"code": "A", "description": "Active"},
        "parentTeamId": 0,
        "stats": {"batting": {}, "pitching": {}, "fielding": {}},
    }
    if batting_order is not None:
        entry["battingOrder"] = batting_order
    return entry


def _players(*entries: dict[str, Any]) -> dict[str, dict[str, Any]]:
    return {f"ID{entry['person']['id']}": entry for entry in entries}


def _live_feed(
    away_players: dict[str, Any],
    home_players: dict[str, Any],
) -> dict[str, Any]:
    return {
        "copyright": "Copyright 2024 MLB Advanced Media, L.P.",
        "gamePk": 775296,
        "metaData": {"timeStamp": "20241026_033455", "gameEvents": [], "logicalEvents": []},
        "gameData": {
            "game": {"pk": 775296, "type": "W", "season": "2024"},
            "teams": {
                "away": {"id": 147, "name": "New York Yankees", "abbreviation": "NYY"},
                "home": {"id": 119, "name": "Los Angeles Dodgers", "abbreviation": "LAD"},
            },
            "status": {"abstractGameState": "Final", "detailedState": "Final"},
        },
        "liveData": {
            "plays": {"allPlays": []},
            "boxscore": {
                "teams": {
                    "away": {"team": {"id": 147}, "players": away_players},
                    "home": {"team": {"id": 119}, "players": home_players},
                },
                "officials": [],
            },
        },
    }


@pytest.fixture
def make_player() -> Callable[..., dict[str, Any]]:
    """Factory for a single boxscore player entry."""
    return _player


@pytest.fixture
def make_live_feed() -> Callable[..., dict[str, Any]]:
    """Factory for a live feed from away/home player maps."""
    return _live_feed


@pytest.fixture
def away_players() -> dict[str, Any]:
    """Yankees boxscore players, deliberately out of batting order."""
    return _players(
        _player(543037, "Gerrit Cole", "P"),
        _player(592450, "Aaron Judge", "CF", "300"),
        _player(650402, "Gleyber Torres", "2B", "100"),
        _player(669224, "Austin Wells", "C", "800"),
        _player(665742, "Juan Soto", "RF", "200"),
        _player(543309, "Jose Trevino", "PH", "801"),
        _player(519317, "Giancarlo Stanton", "DH", "500"),
        _player(665862, "Jazz Chisholm Jr.", "3B", "400"),
        _player(519203, "Anthony Rizzo", "1B", "600"),
        _player(657077, "Alex Verdugo", "LF", "900"),
        _player(683011, "Anthony Volpe", "SS", "700"),
        _player(641482, "Nestor Cortes", "P"),
    )


@pytest.fixture
def home_players() -> dict[str, Any]:
    """Dodgers boxscore players, deliberately out of batting order."""
    return _players(
        _player(656427, "Jack Flaherty", "P"),
        _player(518692, "Freddie Freeman", "1B", "300"),
        _player(660271, "Shohei Ohtani", "DH", "100"),
        _player(621035, "Chris Taylor", "PH", "701"),
        _player(605141, "Mookie Betts", "RF", "200"),
        _player(606192, "Teoscar Hernández", "LF", "400"),
        _player(571970, "Max Muncy", "3B", "500"),
        _player(669257, "Will Smith", "C", "600"),
        _player(666158, "Gavin Lux", "2B", "700"),
        _player(669242, "Tommy Edman", "SS", "800"),
        _player(571771, "Enrique Hernández", "CF", "900"),
        _player(621111, "Walker Buehler", "P"),
    )


@pytest.fixture
def live_feed(away_players, home_players) -> dict[str, Any]:
    """Sample Game.liveGameV1 response for World Series 2024 Game 1."""
    return _live_feed(away_players, home_players)


# ============================================================================
# Config Fixtures
# ============================================================================

@pytest.fixture
def statsapi_config() -> StatsAPIConfig:
    """Stats API configuration pointing at a test host."""
    return StatsAPIConfig(base_url="https://statsapi.test/api", timeout=5)
