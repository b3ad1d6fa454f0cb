"""HTTP retrieval of remote JWK and JWKS documents."""

import asyncio
import logging
import random
from typing import Any

import httpx

from ._constants import VERSION
from .exceptions import DataError

logger = logging.getLogger(__name__)


class KeySetFetcher:
    """Fetches JSON key documents, retrying transient failures.

    May be used as an async context manager to share one connection pool
    across fetches; otherwise each fetch opens a short-lived client.
    """

    def __init__(self, timeout: float = 10.0, max_retries: int = 3,
                 transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._timeout = timeout
        self._max_retries = max_retries
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "KeySetFetcher":
        self._client = self._new_client()
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Any, exc_tb: Any) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(http2=True, timeout=httpx.Timeout(self._timeout), transport=self._transport,
            follow_redirects=True, headers={"Accept": "application/json", "User-Agent": f"jwkset/{VERSION}"})

    def _backoff(self, attempt: int) -> float:
        delay = min(1.0 * (2 ** attempt), 30.0)
        return max(0.1, delay + delay * 0.25 * (2 * random.random() - 1))

    def _retryable(self, code: int) -> bool:
        return code in (408, 429, 500, 502, 503, 504)

    async def fetch_json(self, url: str) -> Any:
        """GET ``url`` and decode the JSON body. Raises DataError naming the URL."""
        if self._client:
            return await self._fetch(self._client, url)
        async with self._new_client() as client:
            return await self._fetch(client, url)

    async def _fetch(self, client: httpx.AsyncClient, url: str) -> Any:
        last_err: str = "no response"
        for i in range(self._max_retries):
            try:
                resp = await client.get(url)
            except httpx.HTTPError as e:
                last_err = str(e) or type(e).__name__
                logger.debug("Fetch of %s failed (attempt %d): %s", url, i + 1, last_err)
            else:
                if resp.is_success:
                    try:
                        return resp.json()
                    except ValueError as e:
                        raise DataError(f"invalid JSON from {url}", source=url) from e
                last_err = f"HTTP {resp.status_code}"
                if not self._retryable(resp.status_code):
                    break
                logger.debug("Fetch of %s returned %d (attempt %d)", url, resp.status_code, i + 1)
            if i < self._max_retries - 1:
                await asyncio.sleep(self._backoff(i))
        raise DataError(f"failed to fetch {url}: {last_err}", source=url)
