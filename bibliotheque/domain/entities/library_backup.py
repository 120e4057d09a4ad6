"""Backup document exchanged by export and import."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .book_record import BookRecord
from .reader_settings import ReaderSettings


class LibraryBackup(BaseModel):
    """Snapshot of both readers' shelves and settings.

    Mirrors the JSON layout of a backup file: ``settings`` keyed by reader id,
    then one record list per reader.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    settings: Optional[dict[str, ReaderSettings]] = Field(None, description="Settings keyed by reader id")
    books_partner1: Optional[list[BookRecord]] = None
    books_partner2: Optional[list[BookRecord]] = None
    exported_at: Optional[datetime] = Field(None, alias="exportedAt")
    version: str = "1.0"

    @field_validator("settings", mode="before")
    @classmethod
    def _reader_entries_only(cls, value: Any) -> Any:
        # Backups also carry app-wide keys such as "theme" next to the readers
        if isinstance(value, dict):
            return {key: entry for key, entry in value.items() if isinstance(entry, dict)}
        return value

    def records_for(self, reader_id: str) -> Optional[list[BookRecord]]:
        return getattr(self, f"books_{reader_id}", None)
