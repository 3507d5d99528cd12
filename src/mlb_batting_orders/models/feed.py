"""Pydantic models for the parts of the live game feed we read.

Only the paths needed to build a lineup are modeled:

- ``gameData.teams.{home,away}.{id,name}``
- ``liveData.boxscore.teams.{home,away}.players.{ID}.{person,position,battingOrder}``

Everything else in the feed is ignored.
"""

from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import FeedDecodeError

TeamSide = Literal["home", "away"]
TEAM_SIDES: tuple[TeamSide, ...] = ("away", "home")


class FeedModel(BaseModel):
    """Base for feed models: camelCase aliases, extra fields ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class Person(FeedModel):
    """``players.{ID}.person``."""

    id: int
    full_name: str = Field(..., alias="fullName")
    link: Optional[str] = None


class Position(FeedModel):
    """``players.{ID}.position``."""

    abbreviation: str
    code: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    link: Optional[str] = None


class BoxscorePlayer(FeedModel):
    """One entry of ``boxscore.teams.{side}.players``."""

    person: Person
    position: Position
    batting_order: Optional[str] = Field(None, alias="battingOrder")

    @field_validator("batting_order", mode="before")
    @classmethod
    def coerce_batting_order(cls, v: Any) -> Any:
        """The feed sends a string, but accept a bare integer too."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class BoxscoreTeam(FeedModel):
    """``liveData.boxscore.teams.{side}``."""

    players: dict[str, BoxscorePlayer]

    @field_validator("players")
    @classmethod
    def validate_players(cls, v: dict[str, BoxscorePlayer]) -> dict[str, BoxscorePlayer]:
        """A side without players cannot produce a lineup."""
        if not v:
            raise ValueError("players map is empty")
        return v


class BoxscoreTeams(FeedModel):
    home: BoxscoreTeam
    away: BoxscoreTeam


class Boxscore(FeedModel):
    teams: BoxscoreTeams


class LiveData(FeedModel):
    boxscore: Boxscore


class GameTeam(FeedModel):
    """``gameData.teams.{side}``."""

    id: int
    name: str


class GameTeams(FeedModel):
    home: GameTeam
    away: GameTeam


class GameData(FeedModel):
    teams: GameTeams


class LiveFeed(FeedModel):
    """Decoded ``v1.1/game/{game_pk}/feed/live`` document."""

    game_data: GameData = Field(..., alias="gameData")
    live_data: LiveData = Field(..., alias="liveData")

    def team(self, side: TeamSide) -> GameTeam:
        """Team name/id for one side."""
        return getattr(self.game_data.teams, _check_side(side, "gameData.teams"))

    def players(self, side: TeamSide) -> dict[str, BoxscorePlayer]:
        """Boxscore players for one side, keyed by player-id string."""
        side = _check_side(side, "liveData.boxscore.teams")
        return getattr(self.live_data.boxscore.teams, side).players


def _check_side(side: str, parent: str) -> str:
    if side not in TEAM_SIDES:
        raise FeedDecodeError(
            f"team must be one of {', '.join(TEAM_SIDES)}", path=f"{parent}.{side}"
        )
    return side


def decode_feed(data: Mapping[str, Any] | LiveFeed) -> LiveFeed:
    """Decode a raw feed document.

    Args:
        data: Parsed JSON from the live feed endpoint, or an already
            decoded ``LiveFeed``

    Returns:
        LiveFeed

    Raises:
        FeedDecodeError: Naming the first missing or mismatched path
    """
    if isinstance(data, LiveFeed):
        return data

    if not isinstance(data, Mapping):
        raise FeedDecodeError(f"expected a JSON object, got {type(data).__name__}")

    try:
        return LiveFeed.model_validate(dict(data))
    except ValidationError as e:
        error = e.errors()[0]
        path = ".".join(str(part) for part in error["loc"])
        raise FeedDecodeError(error["msg"], path=path) from e
