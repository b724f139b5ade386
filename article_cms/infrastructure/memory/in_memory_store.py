"""In-memory record store standing in for the remote content backend.

Each store owns one collection. It is seeded lazily from a factory on first
access and keeps every mutation until the store itself is discarded. Records
are copied on the way in and out, so only the store's own methods can change
what it holds.
"""

import copy
import dataclasses
import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from article_cms.application.interfaces import RecordStore
from article_cms.domain.entities import DeleteAcknowledgement

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


def coerce_id(record_id: object) -> int | None:
    """Numeric value of an id, or None when it cannot match any record.

    Accepts ints, integral floats and numeric-looking strings such as ``"7"``.
    """
    if isinstance(record_id, bool):
        return None
    if isinstance(record_id, int):
        return record_id
    if isinstance(record_id, float):
        return int(record_id) if record_id.is_integer() else None
    if isinstance(record_id, str):
        text = record_id.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


class InMemoryRecordStore(RecordStore[RecordT]):
    """Ordered, lazily seeded collection of dataclass records with an ``id`` field."""

    def __init__(self, name: str, seed: Callable[[], Iterable[RecordT]]):
        self._name = name
        self._seed = seed
        self._records: list[RecordT] | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_initialized(self) -> bool:
        return self._records is not None

    def _rows(self) -> list[RecordT]:
        if self._records is None:
            logger.info("Initializing mock %s storage", self._name)
            self._records = [copy.deepcopy(record) for record in self._seed()]
        return self._records

    def _index_of(self, record_id: object) -> int:
        key = coerce_id(record_id)
        if key is None:
            return -1
        for index, row in enumerate(self._rows()):
            if row.id == key:
                return index
        return -1

    def list_all(self) -> list[RecordT]:
        return copy.deepcopy(self._rows())

    def get_by_id(self, record_id: int | str) -> RecordT | None:
        index = self._index_of(record_id)
        if index == -1:
            return None
        return copy.deepcopy(self._rows()[index])

    def insert(self, record: RecordT) -> RecordT:
        rows = self._rows()
        max_id = max((row.id for row in rows if row.id is not None), default=0)
        stored = dataclasses.replace(copy.deepcopy(record), id=max_id + 1)
        rows.append(stored)
        logger.debug("Inserted %s record %d", self._name, stored.id)
        return copy.deepcopy(stored)

    def replace(self, record_id: int | str, record: RecordT) -> RecordT:
        key = coerce_id(record_id)
        echoed = dataclasses.replace(copy.deepcopy(record), id=key)
        if key is None:
            logger.warning(
                "Cannot replace %s record with non-numeric id %r; echoing input unsaved",
                self._name,
                record_id,
            )
            return echoed

        index = self._index_of(key)
        if index == -1:
            # Upsert-echo: report the record as saved although nothing was stored.
            logger.warning(
                "No %s record with id %d to replace; echoing input unsaved", self._name, key
            )
        else:
            self._rows()[index] = echoed
            logger.debug("Replaced %s record %d", self._name, key)
        return copy.deepcopy(echoed)

    def remove(self, record_id: int | str) -> DeleteAcknowledgement:
        index = self._index_of(record_id)
        if index != -1:
            del self._rows()[index]
            logger.debug("Removed %s record %s", self._name, record_id)
        return DeleteAcknowledgement(id=record_id)
