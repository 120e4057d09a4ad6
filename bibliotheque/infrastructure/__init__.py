"""Infrastructure layer components."""

from .local_book_record_store import LocalBookRecordStore

__all__ = [
    "LocalBookRecordStore",
]
