"""Lineup data models.

PlayerRecord is one boxscore player with the batting-order code split into
slot and substitution number. LineupRow is the published row shape, and
LineupTable the ordered result of one retrieval.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .feed import TeamSide

BATTING_ORDER_SOURCE = "MLB Game Batting Order data from MLB.com"
STARTING_BATTING_ORDER_SOURCE = "MLB Game Starting Batting Order data from MLB.com"

# Position detail columns that are read from the feed but not published
DROPPED_FIELDS = frozenset({"link", "code", "name", "type"})


class _BattingFields(BaseModel):
    """Shared batting-order fields and their joint-null invariant."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    batting_order: Optional[str] = Field(None, alias="battingOrder")
    batting_position_num: Optional[str] = Field(None, alias="battingPositionNum")

    @model_validator(mode="after")
    def check_batting_fields(self):
        if (self.batting_order is None) != (self.batting_position_num is None):
            raise ValueError(
                "battingOrder and battingPositionNum must both be set or both be null"
            )
        return self

    @property
    def is_starter(self) -> bool:
        """Batting position 0 is the player who started in the slot."""
        return self.batting_position_num == "0"


class PlayerRecord(_BattingFields):
    """Person and position of one player merged into a flat record."""

    id: int
    full_name: str = Field(..., alias="fullName")
    abbreviation: str
    code: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    link: Optional[str] = None


class LineupRow(_BattingFields):
    """Published lineup row."""

    id: int
    full_name: str = Field(..., alias="fullName")
    abbreviation: str
    team: TeamSide
    team_name: str = Field(..., alias="teamName")
    team_id: int = Field(..., alias="teamId")

    @classmethod
    def from_record(
        cls, record: PlayerRecord, team: TeamSide, team_name: str, team_id: int
    ) -> "LineupRow":
        """Attach team metadata to a player record, dropping position detail."""
        data = record.model_dump(exclude=set(DROPPED_FIELDS))
        return cls(team=team, team_name=team_name, team_id=team_id, **data)

    def sort_key(self) -> tuple[str, str, str]:
        """(team, battingOrder, battingPositionNum), all compared as strings.

        String comparison means "10" sorts before "2"; batting slots never
        exceed one digit.
        """
        return (self.team, self.batting_order or "", self.batting_position_num or "")

    def to_record(self) -> dict[str, Any]:
        """Row as a camelCase dict."""
        return {
            "id": self.id,
            "fullName": self.full_name,
            "abbreviation": self.abbreviation,
            "battingOrder": self.batting_order,
            "battingPositionNum": self.batting_position_num,
            "team": self.team,
            "teamName": self.team_name,
            "teamId": self.team_id,
        }


@dataclass
class LineupTable:
    """Lineup rows tagged with a source label and generation time."""

    rows: list[LineupRow]
    source: str = BATTING_ORDER_SOURCE
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[LineupRow]:
        return iter(self.rows)

    def starters(self) -> "LineupTable":
        """Only the starting lineup, relabeled and re-timestamped."""
        return LineupTable(
            rows=[row for row in self.rows if row.is_starter],
            source=STARTING_BATTING_ORDER_SOURCE,
        )

    def for_team(self, team: TeamSide) -> list[LineupRow]:
        """Rows for one side."""
        return [row for row in self.rows if row.team == team]

    def to_records(self) -> list[dict[str, Any]]:
        """Rows as camelCase dicts."""
        return [row.to_record() for row in self.rows]

    def to_json(self, indent: int | None = 2) -> str:
        """Rows plus provenance metadata as JSON."""
        return json.dumps(
            {
                "source": self.source,
                "generated_at": self.generated_at.isoformat(),
                "rows": self.to_records(),
            },
            indent=indent,
        )
