"""HTTP adapter implementing the RemoteContentApi port.

Plain JSON over HTTP: GET for list/get, POST for create, PUT for update and
DELETE for delete, against ``{base_url}/{resource}[/{id}]``. Anything other
than a 2xx response is reported as a TransportError.
"""

import logging
from typing import Any

import httpx

from article_cms.application.interfaces import RemoteContentApi
from article_cms.domain.entities import FallbackReason
from article_cms.domain.exceptions import TransportError
from article_cms.infrastructure.http.timeout_client import TimeoutHttpClient

logger = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json"}


class HttpContentApi(RemoteContentApi):
    """Talks to the remote content backend through a TimeoutHttpClient."""

    def __init__(self, base_url: str, client: TimeoutHttpClient):
        self._base_url = base_url.rstrip("/")
        self._client = client

    def _url(self, resource: str, record_id: int | str | None = None) -> str:
        if record_id is None:
            return f"{self._base_url}/{resource}"
        return f"{self._base_url}/{resource}/{record_id}"

    async def _send(
        self,
        method: str,
        url: str,
        payload: dict[str, Any] | None = None,
    ) -> httpx.Response:
        headers = _JSON_HEADERS if payload is not None else None
        response = await self._client.request(method, url, json=payload, headers=headers)
        if not response.is_success:
            self._raise_status_error(method, url, response)
        return response

    @staticmethod
    def _raise_status_error(method: str, url: str, response: httpx.Response) -> None:
        """Raise a TransportError carrying the status and a snippet of the body."""
        body = response.text[:200] if response.content else ""
        raise TransportError(
            FallbackReason.HTTP_STATUS,
            f"{method} {url} returned {response.status_code} {body}".rstrip(),
            status_code=response.status_code,
        )

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                FallbackReason.INVALID_RESPONSE,
                f"Response from {response.request.url} is not valid JSON",
                status_code=response.status_code,
            ) from exc

    async def list(self, resource: str) -> Any:
        response = await self._send("GET", self._url(resource))
        return self._json(response)

    async def get(self, resource: str, record_id: int | str) -> Any:
        response = await self._send("GET", self._url(resource, record_id))
        return self._json(response)

    async def create(self, resource: str, payload: dict[str, Any]) -> Any:
        response = await self._send("POST", self._url(resource), payload)
        return self._json(response)

    async def update(
        self, resource: str, record_id: int | str, payload: dict[str, Any]
    ) -> Any:
        response = await self._send("PUT", self._url(resource, record_id), payload)
        return self._json(response)

    async def delete(self, resource: str, record_id: int | str) -> None:
        await self._send("DELETE", self._url(resource, record_id))
        logger.debug("Deleted %s/%s on remote API", resource, record_id)
