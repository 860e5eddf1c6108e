"""HTTP client for the local random article endpoint."""

import logging
from typing import Any, Optional

import httpx

from .config import Config

logger = logging.getLogger(__name__)


class RandomArticleClient:
    """Fetches navigation targets from the random article endpoint.

    The response body is returned verbatim. The status code is not checked,
    so an error page body is handed back like any other target. Requests are
    never retried.
    """

    def __init__(self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = config.endpoint_url
        self.timeout = config.request_timeout_seconds
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "RandomArticleClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def fetch_target(self) -> Optional[str]:
        """GET the endpoint and return the body text, or None on failure."""
        try:
            response = await self.get_client().get(self.url)
        except httpx.HTTPError as e:
            logger.warning(f"Random article request failed: {e}")
            return None

        logger.debug(f"GET {self.url} -> {response.status_code}")
        return response.text
