"""Annual reading goal progress."""

from ..entities.reading_stats import GoalProgress
from .stats_engine import clamp_goal, round_half_up


def goal_progress(total_books: int, goal: int) -> GoalProgress:
    """Percent of the annual goal reached and books still to go.

    A goal of zero or less is treated as a goal of one book.
    """
    goal = clamp_goal(goal)
    percent = min(100, int(round_half_up(100 * total_books / goal)))
    return GoalProgress(
        total_books=total_books,
        goal=goal,
        percent=max(0, percent),
        remaining=max(0, goal - total_books),
    )
