"""Book record store protocol."""

from typing import Protocol, runtime_checkable

from ..entities.book_record import BookRecord
from ..entities.reader_settings import ReaderSettings


@runtime_checkable
class BookRecordStore(Protocol):
    """Protocol for stores holding each reader's shelves and settings.

    Records are kept per reader id, in insertion order. The statistics engine
    never talks to a store; the application layer loads records and hands
    them over.
    """

    def get_records(self, reader_id: str) -> list[BookRecord]:
        """Return all records of a reader, in stored order.

        Args:
            reader_id: Identifier of the reader.

        Returns:
            list[BookRecord]: The reader's records, empty if none are stored.
        """
        ...

    def save_record(self, reader_id: str, record: BookRecord) -> BookRecord:
        """Insert or replace a record, keyed by its id.

        Args:
            reader_id: Identifier of the reader.
            record: The record to store.

        Returns:
            BookRecord: The record as stored, after shelf promotion.
        """
        ...

    def delete_record(self, reader_id: str, record_id: str) -> None:
        """Remove a record.

        Args:
            reader_id: Identifier of the reader.
            record_id: Identifier of the record.

        Raises:
            ValueError: If the record is not found.
        """
        ...

    def get_settings(self, reader_id: str) -> ReaderSettings:
        """Return a reader's settings, falling back to defaults."""
        ...
