"""
HTTP client for Reddit's public thread endpoint.

Reddit serves any thread as JSON when ``.json`` is appended to its URL.
No authentication is used.
"""

import httpx
import logging
from typing import Any, Optional

from .config import config
from .exceptions import FetchError, MissingURLError
from .importers.reddit_json import RedditJSONImporter, check_response


def thread_json_url(url: str) -> str:
    """
    Turn a thread URL into its JSON endpoint.

    Raises:
        MissingURLError: If the URL is empty
    """
    url = (url or "").strip()
    if not url:
        raise MissingURLError("Please enter a valid Reddit post URL before exporting.")
    return url + ".json"


class RedditThreadClient:
    """
    Fetches thread listings from Reddit.
    """

    def __init__(self, user_agent: Optional[str] = None, timeout: Optional[float] = None,
                 client: Optional[httpx.Client] = None):
        """
        Initialize the thread client.

        Args:
            user_agent: User-Agent header (defaults to config value)
            timeout: Request timeout in seconds (defaults to config value)
            client: Preconfigured httpx client, mainly for tests
        """
        self.user_agent = user_agent or config.user_agent
        self.timeout = timeout or config.fetch_timeout
        self.client = client or httpx.Client(
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent},
            follow_redirects=True,
        )

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.client.close()

    def fetch_json(self, url: str) -> Any:
        """
        Download the raw listing for a thread.

        Args:
            url: The thread URL as the user entered it

        Returns:
            The decoded JSON payload

        Raises:
            MissingURLError: If no URL was given
            FetchError: If the request fails or Reddit returns an error
        """
        json_url = thread_json_url(url)
        logging.info(f"Fetching {json_url}")

        try:
            response = self.client.get(json_url)
            response.raise_for_status()
            payload = response.json()
        except httpx.RequestError as e:
            raise FetchError(f"Failed to connect to Reddit: {e}") from e
        except httpx.HTTPStatusError as e:
            raise FetchError(f"Reddit request failed: {e}") from e
        except ValueError as e:
            raise FetchError(f"Reddit did not return JSON: {e}") from e

        check_response(payload)
        return payload

    def fetch_thread(self, url: str) -> RedditJSONImporter:
        """Fetch a thread and wrap it in an importer."""
        return RedditJSONImporter(self.fetch_json(url))
