"""Year-in-review summaries."""

from typing import Union

from ..entities.combined_view import CombinedStats, RecapView
from ..entities.reading_stats import ReadingStats
from .combined_view import merge_stats

COMBINED_VIEW = "combined"
COMBINED_DISPLAY_NAME = "Both of Us"
READER_VIEWS = ("partner1", "partner2")


def top_genres(genre_counts: dict[str, int], limit: int = 3) -> list[tuple[str, int]]:
    """Most-read genres, highest count first. Equal counts keep tally order."""
    return sorted(genre_counts.items(), key=lambda item: item[1], reverse=True)[:limit]


def build_recap(
    stats1: ReadingStats,
    stats2: ReadingStats,
    view: str,
    names: tuple[str, str],
    genre_limit: int = 3,
) -> RecapView:
    """Build the year-in-review for one reader or both together.

    Args:
        stats1: Statistics for the first reader.
        stats2: Statistics for the second reader.
        view: "partner1", "partner2" or "combined". Anything else is
            treated as "combined".
        names: Display names of the two readers.
        genre_limit: How many top genres to list.

    Returns:
        RecapView: The recap numbers for the chosen view.
    """
    source: Union[ReadingStats, CombinedStats]
    if view == READER_VIEWS[0]:
        source, display_name = stats1, names[0]
    elif view == READER_VIEWS[1]:
        source, display_name = stats2, names[1]
    else:
        source, display_name, view = merge_stats(stats1, stats2), COMBINED_DISPLAY_NAME, COMBINED_VIEW

    return RecapView(
        view=view,
        display_name=display_name,
        total_books=source.total_books,
        total_pages=source.total_pages,
        avg_per_month=source.avg_per_month,
        pages_per_day=source.pages_per_day,
        longest_streak=source.longest_streak,
        avg_rating=source.avg_rating,
        genre_counts=source.genre_counts,
        top_genres=top_genres(source.genre_counts, genre_limit),
        longest_book=source.longest_book,
        shortest_book=source.shortest_book,
        highest_rated=source.highest_rated,
        monthly_data=source.monthly_data,
    )
