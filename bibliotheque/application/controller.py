"""Reading tracker controller coordinating the store and the statistics engine."""

import logging
from datetime import date
from typing import Any, Optional

from ..domain.entities import (
    AchievementProgress,
    FunFact,
    GoalProgress,
    JointSummary,
    ReaderSettings,
    ReadingStats,
    RecapView,
)
from ..domain.interfaces.book_record_store import BookRecordStore
from ..domain.services import (
    StatsEngine,
    build_recap,
    evaluate_badges,
    evaluate_challenges,
    goal_progress,
    heatmap_levels,
    select_fun_fact,
    summarize_joint,
)
from .config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

PARTNER1 = "partner1"
PARTNER2 = "partner2"


class ReadingStatsController:
    """
    Controller for reading statistics.

    Loads a reader's records from the injected store and runs the stateless
    statistics engine over them. Nothing is cached; every call recomputes
    from the records currently stored.
    """

    def __init__(
        self,
        store: BookRecordStore,
        app_settings: Optional[Settings] = None,
        engine: Optional[StatsEngine] = None,
    ):
        """
        Initialize the controller with injected dependencies.

        Args:
            store: Store holding each reader's records and settings
            app_settings: Application settings, defaults to the environment
            engine: Statistics engine, a fresh one by default
        """
        self.store = store
        self.app_settings = app_settings or default_settings
        self.engine = engine or StatsEngine()

    def reader_settings(self, reader_id: str) -> ReaderSettings:
        saved = self.store.get_settings(reader_id)
        fallback_name = (
            self.app_settings.partner1_name if reader_id == PARTNER1 else self.app_settings.partner2_name
        )
        return ReaderSettings(
            name=saved.name or fallback_name,
            goal=saved.goal or self.app_settings.default_goal,
        )

    def reader_stats(self, reader_id: str, reference_date: date) -> ReadingStats:
        records = self.store.get_records(reader_id)
        logger.debug(f"Computing stats for {reader_id} over {len(records)} records")
        return self.engine.compute(records, self.reader_settings(reader_id), reference_date)

    def dashboard(self, reader_id: str, reference_date: date) -> dict[str, Any]:
        """Statistics, goal progress, fun fact and heatmap for one reader.

        The fun fact is only present once the reader has pages to their name.
        """
        stats = self.reader_stats(reader_id, reference_date)
        fun_fact: Optional[FunFact] = select_fun_fact(stats.total_pages) if stats.total_pages > 0 else None
        progress: GoalProgress = goal_progress(stats.total_books, stats.goal)
        return {
            "name": self.reader_settings(reader_id).name,
            "stats": stats,
            "goal_progress": progress,
            "fun_fact": fun_fact,
            "heatmap": heatmap_levels(stats.monthly_data),
        }

    def achievements(self, reader_id: str, reference_date: date) -> dict[str, list[AchievementProgress]]:
        stats = self.reader_stats(reader_id, reference_date)
        return {
            "challenges": evaluate_challenges(stats),
            "badges": evaluate_badges(stats),
        }

    def joint_view(self, reference_date: date) -> JointSummary:
        """Combined totals and shared books for both readers."""
        return summarize_joint(
            self.reader_stats(PARTNER1, reference_date),
            self.reader_stats(PARTNER2, reference_date),
        )

    def recap(self, view: str, reference_date: date) -> RecapView:
        """Year-in-review for "partner1", "partner2" or "combined"."""
        logger.info(f"Building {view} recap for {reference_date.year}")
        return build_recap(
            self.reader_stats(PARTNER1, reference_date),
            self.reader_stats(PARTNER2, reference_date),
            view,
            (self.reader_settings(PARTNER1).name, self.reader_settings(PARTNER2).name),
            genre_limit=self.app_settings.top_genre_limit,
        )
