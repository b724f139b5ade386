"""Provenance-tagged results returned by the content services."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ResultSource(str, Enum):
    """Where a service result was served from."""

    REMOTE = "remote"
    FALLBACK = "fallback"


class FallbackReason(str, Enum):
    """Why a call was served from the local store instead of the remote API."""

    UNREACHABLE = "unreachable"
    TIMEOUT = "timeout"
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    INVALID_RESPONSE = "invalid_response"


@dataclass
class ServiceResult(Generic[T]):
    """Payload plus the provenance tag operators need to spot outages."""

    data: T
    source: ResultSource
    fallback_reason: FallbackReason | None = None

    @property
    def from_fallback(self) -> bool:
        return self.source is ResultSource.FALLBACK


@dataclass
class DeleteAcknowledgement:
    """Result of a delete. Always successful, even when nothing matched."""

    id: int | str
    success: bool = True
