"""Port for the remote content backend: JSON resources over HTTP."""

from abc import ABC, abstractmethod
from typing import Any


class RemoteContentApi(ABC):
    """CRUD access to a remote collection such as ``articles`` or ``categories``.

    Implementations raise ``TransportError`` for timeouts, network failures,
    non-2xx responses and bodies that are not JSON.
    """

    @abstractmethod
    async def list(self, resource: str) -> Any:
        ...

    @abstractmethod
    async def get(self, resource: str, record_id: int | str) -> Any:
        ...

    @abstractmethod
    async def create(self, resource: str, payload: dict[str, Any]) -> Any:
        ...

    @abstractmethod
    async def update(
        self, resource: str, record_id: int | str, payload: dict[str, Any]
    ) -> Any:
        ...

    @abstractmethod
    async def delete(self, resource: str, record_id: int | str) -> None:
        ...
