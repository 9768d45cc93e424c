"""
Registry Client - HTTP access to the remote network registry.

Issues a single GET per call and returns the JSON-decoded body. Non-2xx
responses, transport errors and undecodable bodies all surface as
RemoteFetchFailed. There is no retry; timeouts belong to the httpx client.
"""

from typing import Any, Optional

import httpx

from smartconfig.errors import RemoteFetchFailed
from smartconfig.utils.logger import get_logger

logger = get_logger("registry")

DEFAULT_TIMEOUT = 10.0  # seconds


class RegistryClient:
    """
    Async HTTP client for registry lookups.

    If an ``httpx.AsyncClient`` is supplied, the RegistryClient takes it over:
    it serves every request and aclose() closes it. Without one, a
    short-lived client is opened and closed per request.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._client = client
        self.timeout = timeout

    async def get(self, url: str) -> Any:
        """
        GET ``url`` and decode the JSON body.

        Args:
            url: Absolute URL

        Returns:
            The decoded JSON body

        Raises:
            RemoteFetchFailed: On non-2xx status, transport error or bad JSON
        """
        if self._client is not None:
            return await self._fetch(self._client, url)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._fetch(client, url)

    async def _fetch(self, client: httpx.AsyncClient, url: str) -> Any:
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Registry returned {e.response.status_code} for {url}")
            raise RemoteFetchFailed(url, status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.error(f"Registry request failed for {url}: {e}")
            raise RemoteFetchFailed(url, reason=str(e) or type(e).__name__) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Registry returned invalid JSON for {url}")
            raise RemoteFetchFailed(url, reason="invalid JSON body") from e

    async def aclose(self) -> None:
        """Close the supplied client, if any. Per-request clients are already closed."""
        if self._client is not None:
            await self._client.aclose()

    async def __aenter__(self) -> "RegistryClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
