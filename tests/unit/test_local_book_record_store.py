"""Tests for LocalBookRecordStore."""

from datetime import date, datetime

import pytest

from bibliotheque.domain.entities import BookRecord, LibraryBackup, ReaderSettings, Shelf
from bibliotheque.domain.interfaces import BookRecordStore
from bibliotheque.infrastructure import LocalBookRecordStore


@pytest.fixture
def store():
    """Create a fresh LocalBookRecordStore for each test."""
    return LocalBookRecordStore(
        default_settings={"partner1": ReaderSettings(name="Ian", goal=24)},
    )


@pytest.fixture
def sample_record():
    return BookRecord(
        id="rec-1",
        title="The Hobbit",
        author="J.R.R. Tolkien",
        pages=310,
        shelf=Shelf.CURRENTLY_READING,
        date_started=date(2024, 1, 5),
        added_at=datetime(2024, 1, 5, 9, 0),
    )


def test_implements_protocol(store):
    """Test that LocalBookRecordStore implements BookRecordStore protocol."""
    assert isinstance(store, BookRecordStore)


def test_save_and_get_records(store, sample_record):
    """Test saving and retrieving a record."""
    stored = store.save_record("partner1", sample_record)

    assert stored == sample_record
    assert store.get_records("partner1") == [sample_record]
    assert store.get_record("partner1", "rec-1") == sample_record


def test_readers_are_separate(store, sample_record):
    store.save_record("partner1", sample_record)

    assert store.get_records("partner2") == []


def test_records_keep_insertion_order(store):
    for record_id in ("c", "a", "b"):
        store.save_record("partner1", BookRecord(id=record_id))

    assert [r.id for r in store.get_records("partner1")] == ["c", "a", "b"]


def test_save_promotes_finished_record(store, sample_record):
    """Test that a finish date moves a currently-reading record to finished."""
    finished = sample_record.model_copy(update={"date_finished": date(2024, 1, 30)})

    stored = store.save_record("partner1", finished)

    assert stored.shelf == Shelf.FINISHED
    assert store.get_record("partner1", "rec-1").shelf == Shelf.FINISHED


def test_update_keeps_original_added_at(store, sample_record):
    """Test that replacing a record keeps the time it was first added."""
    store.save_record("partner1", sample_record)
    edited = sample_record.model_copy(update={"current_page": 120, "added_at": datetime(2024, 2, 1)})

    store.save_record("partner1", edited)

    records = store.get_records("partner1")
    assert len(records) == 1
    assert records[0].current_page == 120
    assert records[0].added_at == datetime(2024, 1, 5, 9, 0)


def test_get_nonexistent_record(store):
    with pytest.raises(ValueError, match="Record with id nope not found"):
        store.get_record("partner1", "nope")


def test_delete_record(store, sample_record):
    store.save_record("partner1", sample_record)
    store.delete_record("partner1", "rec-1")

    assert store.get_records("partner1") == []
    with pytest.raises(ValueError, match="Record with id .* not found"):
        store.delete_record("partner1", "rec-1")


def test_settings_defaults_and_overrides(store):
    assert store.get_settings("partner1") == ReaderSettings(name="Ian", goal=24)
    assert store.get_settings("partner2") == ReaderSettings()

    store.save_settings("partner2", ReaderSettings(name="Hannah", goal=12))

    assert store.get_settings("partner2").goal == 12


def test_clear(store, sample_record):
    store.save_record("partner1", sample_record)
    store.save_settings("partner1", ReaderSettings(name="X", goal=1))

    store.clear()

    assert store.get_records("partner1") == []
    assert store.get_settings("partner1").name == "Ian"


def test_import_skips_existing_ids(store, sample_record):
    """Test that importing never overwrites records already stored."""
    store.save_record("partner1", sample_record)
    backup = LibraryBackup(
        books_partner1=[
            BookRecord(id="rec-1", title="Overwritten?"),
            BookRecord(id="rec-2", title="New"),
        ],
        books_partner2=[BookRecord(id="rec-9", title="Hers")],
    )

    processed = store.import_backup(backup)

    assert processed == 3
    assert [r.title for r in store.get_records("partner1")] == ["The Hobbit", "New"]
    assert [r.id for r in store.get_records("partner2")] == ["rec-9"]


def test_import_replaces_settings(store):
    store.import_backup(LibraryBackup(settings={"partner1": ReaderSettings(name="Ian", goal=50)}))

    assert store.get_settings("partner1").goal == 50


def test_export_then_import_into_empty_store(store, sample_record):
    store.save_record("partner1", sample_record)
    store.save_record("partner2", BookRecord(id="rec-2", shelf=Shelf.FINISHED))

    backup = store.export_backup(datetime(2024, 6, 1, 12, 0))
    restored = LocalBookRecordStore()
    restored.import_backup(LibraryBackup.model_validate(backup.model_dump(mode="json", by_alias=True)))

    assert backup.version == "1.0"
    assert restored.get_records("partner1") == store.get_records("partner1")
    assert restored.get_records("partner2") == store.get_records("partner2")
    assert restored.get_settings("partner1") == ReaderSettings(name="Ian", goal=24)
