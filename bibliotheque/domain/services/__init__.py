"""Domain services for the reading tracker."""

from .achievements import BADGES, CHALLENGES, AchievementDefinition, evaluate_badges, evaluate_challenges
from .combined_view import (
    find_shared_books,
    merge_genre_counts,
    merge_stats,
    pick_larger,
    pick_shortest,
    summarize_joint,
)
from .fun_facts import FUN_FACTS, select_fun_fact
from .goal_progress import goal_progress
from .recap import build_recap, top_genres
from .stats_engine import StatsEngine, collect_reading_days, heatmap_levels, longest_streak

__all__ = [
    "StatsEngine",
    "collect_reading_days",
    "longest_streak",
    "heatmap_levels",
    "select_fun_fact",
    "FUN_FACTS",
    "goal_progress",
    "AchievementDefinition",
    "CHALLENGES",
    "BADGES",
    "evaluate_challenges",
    "evaluate_badges",
    "merge_stats",
    "merge_genre_counts",
    "pick_larger",
    "pick_shortest",
    "find_shared_books",
    "summarize_joint",
    "build_recap",
    "top_genres",
]
