"""Tests for ReadingStatsController."""

from datetime import date

import pytest

from bibliotheque.application.config import Settings
from bibliotheque.application.controller import ReadingStatsController
from bibliotheque.domain.entities import BookRecord, ReaderSettings, Shelf
from bibliotheque.infrastructure import LocalBookRecordStore

REFERENCE = date(2024, 12, 31)


@pytest.fixture
def app_settings():
    return Settings(_env_file=None, partner1_name="Ian", partner2_name="Hannah", default_goal=24)


@pytest.fixture
def store():
    store = LocalBookRecordStore()
    store.save_record(
        "partner1",
        BookRecord(id="p1-a", title="Dune", author="Frank Herbert", pages=600, rating=5,
                   genre="SciFi", shelf=Shelf.FINISHED, date_finished=date(2024, 2, 1)),
    )
    store.save_record(
        "partner1",
        BookRecord(id="p1-b", title="Emma", author="Jane Austen", pages=400,
                   shelf=Shelf.CURRENTLY_READING, date_started=date(2024, 12, 25)),
    )
    store.save_record(
        "partner2",
        BookRecord(id="p2-a", title="DUNE", author="frank herbert", pages=600, rating=4,
                   genre="SciFi", shelf=Shelf.FINISHED, date_finished=date(2024, 3, 1)),
    )
    return store


@pytest.fixture
def controller(store, app_settings):
    return ReadingStatsController(store, app_settings)


class TestReaderSettings:
    """Tests for resolving reader settings."""

    def test_falls_back_to_configured_names(self, controller):
        assert controller.reader_settings("partner1") == ReaderSettings(name="Ian", goal=24)
        assert controller.reader_settings("partner2").name == "Hannah"

    def test_saved_settings_win(self, controller, store):
        store.save_settings("partner2", ReaderSettings(name="Hana", goal=10))

        assert controller.reader_settings("partner2") == ReaderSettings(name="Hana", goal=10)

    def test_zero_goal_uses_default(self, controller, store):
        store.save_settings("partner1", ReaderSettings(name="Ian", goal=0))

        assert controller.reader_settings("partner1").goal == 24


class TestViews:
    """Tests for the views assembled by the controller."""

    def test_reader_stats(self, controller):
        stats = controller.reader_stats("partner1", REFERENCE)

        assert stats.total_books == 1
        assert len(stats.currently_reading) == 1
        assert stats.longest_streak == 7

    def test_dashboard(self, controller):
        dashboard = controller.dashboard("partner1", REFERENCE)

        assert dashboard["name"] == "Ian"
        assert dashboard["goal_progress"].percent == 4
        assert dashboard["goal_progress"].remaining == 23
        assert dashboard["fun_fact"].threshold == 500
        assert dashboard["heatmap"][1] == 1

    def test_dashboard_without_pages_has_no_fun_fact(self, app_settings):
        controller = ReadingStatsController(LocalBookRecordStore(), app_settings)

        dashboard = controller.dashboard("partner2", REFERENCE)

        assert dashboard["fun_fact"] is None
        assert dashboard["stats"].total_books == 0

    def test_achievements(self, controller):
        achievements = controller.achievements("partner1", REFERENCE)
        badges = {b.key: b for b in achievements["badges"]}

        assert len(achievements["challenges"]) == 6
        assert badges["first-chapter"].completed
        assert badges["on-fire"].completed
        assert badges["five-stars"].completed

    def test_joint_view(self, controller):
        summary = controller.joint_view(REFERENCE)

        assert summary.combined_books == 2
        assert summary.combined_pages == 1200
        assert summary.shared_count == 1

    def test_recap(self, controller):
        recap = controller.recap("combined", REFERENCE)

        assert recap.display_name == "Both of Us"
        assert recap.top_genres == [("SciFi", 2)]
        assert recap.avg_rating == 4.5

    def test_recap_for_one_reader(self, controller):
        recap = controller.recap("partner1", REFERENCE)

        assert recap.display_name == "Ian"
        assert recap.total_pages == 600

    def test_results_follow_store_changes(self, controller, store):
        """Test that nothing is cached between calls."""
        before = controller.reader_stats("partner1", REFERENCE)
        store.save_record(
            "partner1",
            BookRecord(id="p1-b", title="Emma", author="Jane Austen", pages=400,
                       shelf=Shelf.CURRENTLY_READING, date_started=date(2024, 12, 25),
                       date_finished=date(2024, 12, 30)),
        )

        after = controller.reader_stats("partner1", REFERENCE)

        assert before.total_books == 1
        assert after.total_books == 2
        assert after.total_pages == 1000
