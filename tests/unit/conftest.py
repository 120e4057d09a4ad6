"""Shared fixtures for unit tests."""

from datetime import date
from itertools import count

import pytest

from bibliotheque.domain.entities import BookRecord, ReaderSettings, Shelf


@pytest.fixture
def make_record():
    """Factory building finished book records with sensible defaults."""
    ids = count(1)

    def _make(**overrides) -> BookRecord:
        record_id = overrides.pop("id", f"book-{next(ids)}")
        fields = {
            "title": f"Title {record_id}",
            "author": "Some Author",
            "pages": 0,
            "shelf": Shelf.FINISHED,
        }
        fields.update(overrides)
        return BookRecord(id=record_id, **fields)

    return _make


@pytest.fixture
def reader_settings():
    return ReaderSettings(name="Ian", goal=24)


@pytest.fixture
def year_end():
    """Reference date at the end of 2024, so every month has elapsed."""
    return date(2024, 12, 31)
