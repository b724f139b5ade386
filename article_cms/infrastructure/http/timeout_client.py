"""Single-attempt HTTP requests bounded by a wall-clock timeout.

Uses httpx; the whole request (connect, send, read) is cancelled once the
timeout elapses. There are no retries.
"""

import asyncio
import logging
from typing import Any

import httpx

from article_cms.domain.entities import FallbackReason
from article_cms.domain.exceptions import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 5000


class TimeoutHttpClient:
    """Issues one HTTP request and aborts it if it outlives the timeout."""

    def __init__(
        self,
        default_timeout_ms: int = DEFAULT_TIMEOUT_MS,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._default_timeout_ms = default_timeout_ms
        self._http_client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient()

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: Any = None,
        headers: dict[str, str] | None = None,
        timeout_ms: int | None = None,
    ) -> httpx.Response:
        """Send the request and return the raw response, whatever its status."""
        timeout_ms = timeout_ms if timeout_ms is not None else self._default_timeout_ms
        timeout_s = timeout_ms / 1000
        logger.info("Attempting to fetch: %s %s", method, url)

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            return await asyncio.wait_for(
                client.request(method, url, json=json, headers=headers, timeout=timeout_s),
                timeout=timeout_s,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.error("Fetch timed out after %d ms for: %s %s", timeout_ms, method, url)
            raise TransportError(
                FallbackReason.TIMEOUT, f"{method} {url} aborted after {timeout_ms} ms"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
            # InvalidURL and StreamError sit outside the HTTPError hierarchy.
            logger.error("Fetch error for: %s %s: %s", method, url, exc)
            raise TransportError(FallbackReason.NETWORK, f"{method} {url} failed: {exc}") from exc
        finally:
            if should_close:
                await client.aclose()
