"""Local in-memory implementation of BookRecordStore."""

import logging
from datetime import datetime
from typing import Dict, Optional

from ..domain.entities.book_record import BookRecord
from ..domain.entities.library_backup import LibraryBackup
from ..domain.entities.reader_settings import ReaderSettings
from ..domain.interfaces.book_record_store import BookRecordStore

logger = logging.getLogger(__name__)

READER_IDS = ("partner1", "partner2")


class LocalBookRecordStore(BookRecordStore):
    """Local in-memory implementation of the BookRecordStore protocol.

    Keeps each reader's records in a dictionary keyed by record id, which
    preserves insertion order. Useful for testing and for callers that load
    a backup file and only need statistics.
    """

    def __init__(self, default_settings: Optional[Dict[str, ReaderSettings]] = None):
        """Initialize the store.

        Args:
            default_settings: Settings returned for readers that have none
                saved, keyed by reader id.
        """
        self._records: Dict[str, Dict[str, BookRecord]] = {}
        self._settings: Dict[str, ReaderSettings] = {}
        self._default_settings = dict(default_settings or {})

    def get_records(self, reader_id: str) -> list[BookRecord]:
        """Return all records of a reader, in stored order."""
        return list(self._records.get(reader_id, {}).values())

    def get_record(self, reader_id: str, record_id: str) -> BookRecord:
        """Retrieve a single record.

        Raises:
            ValueError: If the record is not found.
        """
        records = self._records.get(reader_id, {})
        if record_id not in records:
            raise ValueError(f"Record with id {record_id} not found for reader {reader_id}")
        return records[record_id]

    def save_record(self, reader_id: str, record: BookRecord) -> BookRecord:
        """Insert or replace a record.

        A record with a finish date that is still marked as currently reading
        is moved to the finished shelf. Replacing a record keeps the time it
        was first added.

        Returns:
            BookRecord: The record as stored.
        """
        records = self._records.setdefault(reader_id, {})
        stored = record.with_auto_shelf()
        existing = records.get(stored.id)
        if existing is not None:
            stored = stored.model_copy(update={"added_at": existing.added_at})
        records[stored.id] = stored

        action = "Updated" if existing is not None else "Added"
        logger.info(f"{action} record {stored.id} on shelf {stored.shelf.value} for {reader_id}")
        return stored

    def delete_record(self, reader_id: str, record_id: str) -> None:
        """Remove a record.

        Raises:
            ValueError: If the record is not found.
        """
        self.get_record(reader_id, record_id)
        del self._records[reader_id][record_id]
        logger.info(f"Deleted record {record_id} for {reader_id}")

    def get_settings(self, reader_id: str) -> ReaderSettings:
        """Return a reader's saved settings, or the configured defaults."""
        if reader_id in self._settings:
            return self._settings[reader_id]
        return self._default_settings.get(reader_id, ReaderSettings())

    def save_settings(self, reader_id: str, settings: ReaderSettings) -> None:
        self._settings[reader_id] = settings

    def clear(self) -> None:
        """Clear all records and settings."""
        self._records.clear()
        self._settings.clear()

    def export_backup(self, exported_at: datetime) -> LibraryBackup:
        """Snapshot both readers' shelves and settings."""
        return LibraryBackup(
            settings={reader_id: self.get_settings(reader_id) for reader_id in READER_IDS},
            books_partner1=self.get_records("partner1"),
            books_partner2=self.get_records("partner2"),
            exported_at=exported_at,
        )

    def import_backup(self, backup: LibraryBackup) -> int:
        """Merge a backup into the store.

        Saved settings are replaced by the backup's when it has any. Records
        are appended only when their id is not stored yet; existing records
        are never overwritten.

        Returns:
            int: Number of records in the backup, imported or skipped.
        """
        if backup.settings:
            self._settings.update(backup.settings)

        processed = 0
        for reader_id in READER_IDS:
            incoming = backup.records_for(reader_id)
            if not incoming:
                continue
            records = self._records.setdefault(reader_id, {})
            added = 0
            for record in incoming:
                if record.id not in records:
                    records[record.id] = record
                    added += 1
            processed += len(incoming)
            logger.info(f"Imported {added} of {len(incoming)} records for {reader_id}")
        return processed
