"""Shared remote-first, store-fallback façade behind the content services.

Every call asks the reachability probe first. When the remote API is not to be
used, or when it fails in any way (timeout, network error, non-2xx status,
undecodable body), the equivalent local-store operation runs instead. The
returned ``ServiceResult`` records which path served the data.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from article_cms.application.interfaces import (
    ReachabilityProbe,
    RecordStore,
    RemoteContentApi,
)
from article_cms.domain.entities import (
    DeleteAcknowledgement,
    FallbackReason,
    ResultSource,
    ServiceResult,
)
from article_cms.domain.exceptions import TransportError

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")
T = TypeVar("T")


class ContentService(Generic[EntityT]):
    """Base class for one entity kind. Subclasses set ``resource`` and the codec."""

    resource: str = ""
    entity_name: str = ""

    def __init__(
        self,
        store: RecordStore[EntityT],
        remote_api: RemoteContentApi,
        probe: ReachabilityProbe,
    ):
        self._store = store
        self._remote_api = remote_api
        self._probe = probe

    # ── Codec (implemented per entity) ───────────────────────────────

    def _decode(self, payload: Any) -> EntityT:
        raise NotImplementedError

    def _encode(self, entity: EntityT) -> dict[str, Any]:
        raise NotImplementedError

    def _decode_checked(self, payload: Any) -> EntityT:
        """Decode a remote body, treating any shape mismatch as a transport failure."""
        try:
            return self._decode(payload)
        except (TypeError, ValueError) as exc:
            raise TransportError(
                FallbackReason.INVALID_RESPONSE,
                f"Unexpected {self.entity_name} payload from remote API: {exc}",
            ) from exc

    # ── Fallback core ────────────────────────────────────────────────

    async def _serve(
        self,
        action: str,
        remote: Callable[[], Awaitable[T]],
        local: Callable[[], T],
    ) -> ServiceResult[T]:
        if not await self._probe.is_reachable():
            logger.debug("Remote API unreachable, %s %s from local store", action, self.resource)
            return ServiceResult(
                data=local(),
                source=ResultSource.FALLBACK,
                fallback_reason=FallbackReason.UNREACHABLE,
            )

        try:
            data = await remote()
        except TransportError as exc:
            logger.warning(
                "Error %s %s via remote API, falling back to local store: %s",
                action,
                self.resource,
                exc,
            )
            return ServiceResult(
                data=local(),
                source=ResultSource.FALLBACK,
                fallback_reason=exc.reason,
            )

        return ServiceResult(data=data, source=ResultSource.REMOTE)

    # ── CRUD primitives ──────────────────────────────────────────────

    async def _list_records(self) -> ServiceResult[list[EntityT]]:
        async def remote() -> list[EntityT]:
            payload = await self._remote_api.list(self.resource)
            if not isinstance(payload, list):
                raise TransportError(
                    FallbackReason.INVALID_RESPONSE,
                    f"Expected a list of {self.resource}, got {type(payload).__name__}",
                )
            return [self._decode_checked(item) for item in payload]

        return await self._serve("listing", remote, self._store.list_all)

    async def _get_record(self, record_id: int | str) -> ServiceResult[EntityT | None]:
        async def remote() -> EntityT:
            return self._decode_checked(await self._remote_api.get(self.resource, record_id))

        return await self._serve(
            f"fetching {record_id} from", remote, lambda: self._store.get_by_id(record_id)
        )

    async def _create_record(self, entity: EntityT) -> ServiceResult[EntityT]:
        async def remote() -> EntityT:
            payload = await self._remote_api.create(self.resource, self._encode(entity))
            return self._decode_checked(payload)

        return await self._serve("creating", remote, lambda: self._store.insert(entity))

    async def _update_record(self, record_id: int | str, entity: EntityT) -> ServiceResult[EntityT]:
        async def remote() -> EntityT:
            payload = await self._remote_api.update(
                self.resource, record_id, self._encode(entity)
            )
            return self._decode_checked(payload)

        return await self._serve(
            f"updating {record_id} in", remote, lambda: self._store.replace(record_id, entity)
        )

    async def _delete_record(self, record_id: int | str) -> ServiceResult[DeleteAcknowledgement]:
        async def remote() -> DeleteAcknowledgement:
            await self._remote_api.delete(self.resource, record_id)
            return DeleteAcknowledgement(id=record_id)

        return await self._serve(
            f"deleting {record_id} from", remote, lambda: self._store.remove(record_id)
        )


def merge_sources(*results: ServiceResult[Any]) -> tuple[ResultSource, FallbackReason | None]:
    """Provenance of a result assembled from several calls: fallback wins."""
    for result in results:
        if result.from_fallback:
            return ResultSource.FALLBACK, result.fallback_reason
    return ResultSource.REMOTE, None
