"""Domain interfaces for the reading tracker."""

from .book_record_store import BookRecordStore

__all__ = ["BookRecordStore"]
