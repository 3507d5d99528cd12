"""Exceptions raised while fetching and decoding batting orders."""

from typing import Optional


class BattingOrderError(Exception):
    """Base exception for batting order retrieval errors."""


class FeedFetchError(BattingOrderError):
    """Raised when the live game feed cannot be fetched."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class FeedDecodeError(BattingOrderError):
    """Raised when the live game feed does not have the expected shape.

    ``path`` is the dotted location of the first offending field
    (e.g. ``gameData.teams.home.name``).
    """

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class BattingOrderParseError(BattingOrderError):
    """Raised when a player's ``battingOrder`` code is malformed."""

    def __init__(self, message: str, raw: Optional[str] = None):
        self.raw = raw
        super().__init__(message)
