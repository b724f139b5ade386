"""Port for the local record store the services fall back to."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from article_cms.domain.entities import DeleteAcknowledgement

RecordT = TypeVar("RecordT")


class RecordStore(ABC, Generic[RecordT]):
    """Ordered collection of records keyed by integer id.

    Ids may be given as ints or numeric-looking strings.
    """

    @abstractmethod
    def list_all(self) -> list[RecordT]:
        """Return every record in insertion order."""
        ...

    @abstractmethod
    def get_by_id(self, record_id: int | str) -> RecordT | None:
        """Return the matching record, or None when absent."""
        ...

    @abstractmethod
    def insert(self, record: RecordT) -> RecordT:
        """Assign the next id (max + 1), append, and return the stored record."""
        ...

    @abstractmethod
    def replace(self, record_id: int | str, record: RecordT) -> RecordT:
        """Overwrite the matching slot in place and echo the record with its id.

        The echo is returned even when no row matched; nothing is stored then.
        """
        ...

    @abstractmethod
    def remove(self, record_id: int | str) -> DeleteAcknowledgement:
        """Delete the matching row if present. Always acknowledges success."""
        ...
