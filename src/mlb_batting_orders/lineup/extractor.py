"""Player record extraction from the live game boxscore.

The boxscore ``battingOrder`` code packs two numbers into one string:
the first character is the lineup slot (1-9) and characters 2-3 count
the players who have batted in that slot, 0 being the starter. A pinch
hitter for the cleanup hitter is ``"401"``, the next substitute ``"402"``.
"""

from typing import Any, Mapping, Optional

from ..exceptions import BattingOrderParseError, FeedDecodeError
from ..models.feed import LiveFeed, TeamSide, decode_feed
from ..models.lineup import PlayerRecord


def parse_batting_order(raw: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """Split a raw ``battingOrder`` code into (slot, position number).

    The position number goes through ``int`` so leading zeros disappear:

        >>> parse_batting_order("100")
        ('1', '0')
        >>> parse_batting_order("213")
        ('2', '13')
        >>> parse_batting_order(None)
        (None, None)

    Raises:
        BattingOrderParseError: If the code is shorter than two characters
            or is not all digits in its first three characters
    """
    if raw is None:
        return None, None

    if len(raw) < 2:
        raise BattingOrderParseError(
            f"battingOrder must have at least 2 characters: {raw!r}", raw=raw
        )

    slot, digits = raw[0], raw[1:3]
    if not (slot.isascii() and slot.isdigit()):
        raise BattingOrderParseError(f"battingOrder slot is not a digit: {raw!r}", raw=raw)

    # int() would accept signs and whitespace
    if not (digits.isascii() and digits.isdigit()):
        raise BattingOrderParseError(
            f"battingOrder position is not numeric: {raw!r}", raw=raw
        )

    return slot, str(int(digits))


def extract_player_record(
    feed: Mapping[str, Any] | LiveFeed, team: TeamSide, player_id: str
) -> PlayerRecord:
    """Build the flat record for one boxscore player.

    Person and position fields are merged side by side; on a name clash
    (``link``) the position value wins.

    Args:
        feed: Raw feed document or decoded LiveFeed
        team: "home" or "away"
        player_id: Key under ``boxscore.teams.{team}.players`` (e.g. "ID660271")

    Returns:
        PlayerRecord

    Raises:
        FeedDecodeError: If the feed is malformed, ``team`` is not "home"/"away"
            or ``player_id`` is not in the side's players
        BattingOrderParseError: If the batting order code is malformed
    """
    feed = decode_feed(feed)
    players = feed.players(team)
    if player_id not in players:
        raise FeedDecodeError(
            "player not found", path=f"liveData.boxscore.teams.{team}.players.{player_id}"
        )

    player = players[player_id]
    merged = {
        **player.person.model_dump(exclude_none=True),
        **player.position.model_dump(exclude_none=True),
    }
    batting_order, batting_position_num = parse_batting_order(player.batting_order)

    return PlayerRecord(
        **merged,
        batting_order=batting_order,
        batting_position_num=batting_position_num,
    )
