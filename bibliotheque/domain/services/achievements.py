"""Challenge and badge evaluation over computed statistics.

Both are fixed declarative tables. Each entry names the statistic it tracks
and the target it must reach; entries are evaluated independently of each
other.
"""

from dataclasses import dataclass
from typing import Callable, Union

from ..entities.achievements import AchievementProgress
from ..entities.reading_stats import ReadingStats
from .stats_engine import clamp_goal

Metric = Callable[[ReadingStats], float]


@dataclass(frozen=True)
class AchievementDefinition:
    """One challenge or badge rule.

    ``target`` is either a fixed number or derived from the statistics (the
    annual goal). ``title`` may reference ``{target}``.
    """

    key: str
    title: str
    description: str
    icon: str
    target: Union[int, Callable[[ReadingStats], int]]
    metric: Metric

    def evaluate(self, stats: ReadingStats) -> AchievementProgress:
        target = self.target(stats) if callable(self.target) else self.target
        current = self.metric(stats)
        return AchievementProgress(
            key=self.key,
            title=self.title.format(target=target),
            description=self.description,
            icon=self.icon,
            current=current,
            target=target,
            progress=max(0.0, 100 * current / target),
            completed=current >= target,
        )


def _annual_goal(stats: ReadingStats) -> int:
    return clamp_goal(stats.goal)


def _total_books(stats: ReadingStats) -> float:
    return stats.total_books


def _total_pages(stats: ReadingStats) -> float:
    return stats.total_pages


def _distinct_genres(stats: ReadingStats) -> float:
    return stats.distinct_genres


def _longest_streak(stats: ReadingStats) -> float:
    return stats.longest_streak


CHALLENGES: tuple[AchievementDefinition, ...] = (
    AchievementDefinition(
        "annual-goal", "Read {target} Books", "Your annual reading goal",
        "\U0001F4DA", _annual_goal, _total_books,
    ),
    AchievementDefinition(
        "page-turner", "Page Turner", "Read 5,000 pages this year",
        "\U0001F4D6", 5000, _total_pages,
    ),
    AchievementDefinition(
        "genre-explorer", "Genre Explorer", "Read books from 5+ different genres",
        "\U0001F31F", 5, _distinct_genres,
    ),
    AchievementDefinition(
        "reading-streak", "Reading Streak", "Maintain a 30-day reading streak",
        "\U0001F525", 30, _longest_streak,
    ),
    AchievementDefinition(
        "speed-reader", "Speed Reader", "Average 50+ pages per day",
        "\U0001F4AB", 50, lambda stats: stats.pages_per_day,
    ),
    AchievementDefinition(
        "bookworm", "Bookworm", "Have 3+ books in progress at once",
        "\U0001F4DA", 3, lambda stats: len(stats.currently_reading),
    ),
)

BADGES: tuple[AchievementDefinition, ...] = (
    AchievementDefinition("first-chapter", "First Chapter", "Finish your first book", "\U0001F331", 1, _total_books),
    AchievementDefinition("bookworm", "Bookworm", "Read 10 books", "\U0001F4DA", 10, _total_books),
    AchievementDefinition("royalty", "Royalty", "Read 25 books", "\U0001F451", 25, _total_books),
    AchievementDefinition("champion", "Champion", "Read 50 books", "\U0001F3C6", 50, _total_books),
    AchievementDefinition("genre-explorer", "Genre Explorer", "Read 5+ genres", "\U0001F48E", 5, _distinct_genres),
    AchievementDefinition("on-fire", "On Fire", "7-day streak", "\U0001F525", 7, _longest_streak),
    AchievementDefinition("lightning", "Lightning", "30-day streak", "\u26A1", 30, _longest_streak),
    AchievementDefinition(
        "critic", "Critic", "Rate 10+ books", "\U0001F31F", 10,
        lambda stats: stats.rated_finished_count,
    ),
    AchievementDefinition("page-turner", "Page Turner", "Read 5,000 pages", "\U0001F4D6", 5000, _total_pages),
    AchievementDefinition(
        "librarian", "Librarian", "50+ books on shelves", "\U0001F3E0", 50,
        lambda stats: len(stats.books),
    ),
    AchievementDefinition(
        "five-stars", "Five Stars", "Give a 5-star rating", "\U0001F497", 1,
        lambda stats: 1 if any(book.rating == 5 for book in stats.finished) else 0,
    ),
    AchievementDefinition(
        "goal-crusher", "Goal Crusher", "Meet your annual goal", "\U0001F680", _annual_goal, _total_books,
    ),
)


def evaluate_challenges(stats: ReadingStats) -> list[AchievementProgress]:
    """Evaluate every challenge against ``stats``, in table order."""
    return [challenge.evaluate(stats) for challenge in CHALLENGES]


def evaluate_badges(stats: ReadingStats) -> list[AchievementProgress]:
    """Evaluate every badge against ``stats``, in table order."""
    return [badge.evaluate(stats) for badge in BADGES]
