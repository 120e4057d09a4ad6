"""Domain entities for the reading tracker."""

from .achievements import AchievementProgress
from .book_record import BookRecord, Shelf
from .combined_view import CombinedStats, JointSummary, RecapView, SharedBook
from .library_backup import LibraryBackup
from .reader_settings import ReaderSettings
from .reading_stats import FunFact, GoalProgress, ReadingStats

__all__ = [
    # Record entities
    "BookRecord",
    "Shelf",
    "ReaderSettings",
    # Statistics entities
    "ReadingStats",
    "GoalProgress",
    "FunFact",
    "AchievementProgress",
    # Two-reader entities
    "CombinedStats",
    "SharedBook",
    "JointSummary",
    "RecapView",
    # Backup entities
    "LibraryBackup",
]
