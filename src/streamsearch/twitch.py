from typing import Any
from urllib.parse import urljoin

import httpx
import orjson
from loguru import logger

from streamsearch.constants import (
    SEARCH_CATEGORIES_PATH,
    STREAMS_PAGE_SIZE,
    STREAMS_PATH,
    TOP_GAMES_PATH,
    TWITCH_API_BASE_URL,
)
from streamsearch.errors import NoDataError, ResponseDecodeError
from streamsearch.schemas.twitch import Category, StreamEntry, parse_record
from streamsearch.settings import Credentials


def next_cursor(body: Any) -> str | None:
    """Returns `pagination.cursor` of a response body, or None on the last page."""
    pagination = body.get("pagination") if isinstance(body, dict) else None
    cursor = pagination.get("cursor") if isinstance(pagination, dict) else None
    if isinstance(cursor, str) and cursor:
        return cursor
    return None


def data_array(body: Any) -> list:
    """Returns the `data` array of a response body, raises `NoDataError` if there is none."""
    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, list):
        raise NoDataError("Response has no data")
    return data


class TwitchAPI:
    """A class for handling Twitch API requests"""

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = TWITCH_API_BASE_URL,
        timeout: float | None = None,
    ) -> None:
        self._client_id = credentials.client_id
        self._access_token = credentials.token
        self._base_url = base_url
        self._httpx_client = httpx.Client(timeout=timeout)

    def __enter__(self) -> "TwitchAPI":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        logger.debug("Closing HTTPX Twitch client")
        self._httpx_client.close()

    def url(self, path: str) -> str:
        return urljoin(self._base_url, path)

    def get(self, url: str) -> httpx.Response:
        """Makes an authenticated GET request to the Twitch API"""
        headers = {
            "Client-Id": self._client_id,
            "Authorization": f"Bearer {self._access_token}",
        }

        try:
            logger.debug(f"Making GET request to {url}")
            response = self._httpx_client.get(url, headers=headers)
            logger.debug(f"GET request to {url} returned {response.status_code}")
        except httpx.RequestError as e:
            logger.debug(f"Request to {url} failed: {e!r}")
            raise e

        response.raise_for_status()
        return response

    def fetch(self, url: str, after: str | None = None) -> tuple[Any, str | None]:
        """Fetches and decodes one page, returns the body and the cursor of the next page."""
        if after is not None:
            url = f"{url}&after={after}"

        response = self.get(url)
        try:
            body = orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            raise ResponseDecodeError(f"failed to decode json: {e}") from e

        return body, next_cursor(body)

    def fetch_categories(self, term: str) -> list[Category]:
        """Searches categories by name, or lists the top categories if `term` is empty.

        Only the first page is read.
        """
        if term:
            url = self.url(SEARCH_CATEGORIES_PATH) + term
        else:
            url = self.url(TOP_GAMES_PATH)

        logger.debug(f"Fetching categories for {term!r}")
        body, _ = self.fetch(url)
        return [parse_record(Category, x) for x in data_array(body)]

    def fetch_streams(self, game_id: str, after: str | None = None) -> tuple[list[StreamEntry], str | None]:
        """Fetches one page of live streams in the category `game_id`."""
        url = self.url(STREAMS_PATH.format(first=STREAMS_PAGE_SIZE)) + game_id

        body, cursor = self.fetch(url, after)
        entries = [StreamEntry.from_api(x) for x in data_array(body)]
        logger.debug(f"Fetched {len(entries)} streams, next cursor: {cursor}")
        return entries, cursor
