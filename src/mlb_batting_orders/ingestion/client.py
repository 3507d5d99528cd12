"""HTTP client for the MLB Stats API live game feed."""

import logging
from typing import Any

import httpx

from ..exceptions import FeedFetchError
from .config import StatsAPIConfig
from .template import resolve_endpoint

logger = logging.getLogger(__name__)


class LiveFeedClient:
    """Fetch ``v1.1/game/{game_pk}/feed/live`` documents.

    One GET per call: no caching, retries or authentication.

    Examples:
        >>> with LiveFeedClient() as client:
        ...     feed = client.fetch_live_feed(744834)
    """

    DEFAULT_HEADERS = {"Accept": "application/json"}

    def __init__(self, config: StatsAPIConfig | None = None):
        """Initialize live feed client.

        Args:
            config: Stats API configuration (uses defaults if None)
        """
        self.config = config or StatsAPIConfig()
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.config.base_url,
                headers=self.DEFAULT_HEADERS,
                timeout=self.config.timeout,
            )

        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - close HTTP client."""
        self.close()

    def endpoint_path(self, game_pk: int | str) -> str:
        """Resolve the feed path for a game."""
        return resolve_endpoint(self.config.endpoint_template, GAME_PK=game_pk)

    def endpoint_url(self, game_pk: int | str) -> str:
        """Full feed URL for a game."""
        return f"{self.config.base_url}/{self.endpoint_path(game_pk)}"

    def fetch_live_feed(self, game_pk: int | str) -> dict[str, Any]:
        """Fetch the live game feed for ``game_pk``.

        Args:
            game_pk: MLB game primary key

        Returns:
            Parsed JSON document

        Raises:
            FeedFetchError: On transport errors, non-2xx responses or
                a body that is not a JSON object
        """
        path = self.endpoint_path(game_pk)
        url = f"{self.config.base_url}/{path}"
        logger.info(f"Fetching live feed for game {game_pk}: {url}")

        try:
            response = self._get_client().get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP {e.response.status_code} fetching {url}")
            raise FeedFetchError(
                f"HTTP {e.response.status_code} from {url}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"HTTP error fetching {url}: {e}")
            raise FeedFetchError(f"Request failed: {e}", url=url) from e

        try:
            data = response.json()
        except ValueError as e:
            raise FeedFetchError(f"Response is not valid JSON: {url}", url=url) from e

        if not isinstance(data, dict):
            raise FeedFetchError(f"Expected a JSON object from {url}", url=url)

        return data
