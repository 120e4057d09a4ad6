"""Combined statistics and shared books for two readers."""

import logging
from typing import Optional

from ..entities.book_record import BookRecord
from ..entities.combined_view import CombinedStats, JointSummary, SharedBook
from ..entities.reading_stats import ReadingStats
from .stats_engine import round_half_up

logger = logging.getLogger(__name__)


def merge_genre_counts(counts1: dict[str, int], counts2: dict[str, int]) -> dict[str, int]:
    """Sum two genre tallies key by key."""
    merged = dict(counts1)
    for genre, count in counts2.items():
        merged[genre] = merged.get(genre, 0) + count
    return merged


def pick_larger(
    book1: Optional[BookRecord],
    book2: Optional[BookRecord],
    attribute: str,
) -> Optional[BookRecord]:
    """Return whichever book has the larger ``attribute``; ties go to ``book1``.

    A missing book counts as zero.
    """
    value1 = getattr(book1, attribute) if book1 is not None else 0
    value2 = getattr(book2, attribute) if book2 is not None else 0
    return book2 if value2 > value1 else book1


def pick_shortest(
    book1: Optional[BookRecord],
    book2: Optional[BookRecord],
) -> Optional[BookRecord]:
    """Return the book with fewer pages; ties go to ``book1``."""
    if book1 is None:
        return book2
    if book2 is None:
        return book1
    return book2 if book2.pages < book1.pages else book1


def merge_stats(stats1: ReadingStats, stats2: ReadingStats) -> CombinedStats:
    """Merge two readers' statistics for the combined view.

    Totals add up and streaks take the longer one. Averages are combined from
    the already-rounded per-reader figures: monthly averages are summed and
    ratings are the plain mean of the two readers' means.
    """
    return CombinedStats(
        total_books=stats1.total_books + stats2.total_books,
        total_pages=stats1.total_pages + stats2.total_pages,
        avg_per_month=round_half_up(stats1.avg_per_month + stats2.avg_per_month, 1),
        pages_per_day=stats1.pages_per_day + stats2.pages_per_day,
        longest_streak=max(stats1.longest_streak, stats2.longest_streak),
        avg_rating=round_half_up((stats1.avg_rating + stats2.avg_rating) / 2, 1),
        genre_counts=merge_genre_counts(stats1.genre_counts, stats2.genre_counts),
        longest_book=pick_larger(stats1.longest_book, stats2.longest_book, "pages"),
        shortest_book=pick_shortest(stats1.shortest_book, stats2.shortest_book),
        highest_rated=pick_larger(stats1.highest_rated, stats2.highest_rated, "rating"),
        monthly_data=[a + b for a, b in zip(stats1.monthly_data, stats2.monthly_data)],
        finished_this_year=[*stats1.finished_this_year, *stats2.finished_this_year],
    )


def _match_key(book: BookRecord) -> tuple[str, str]:
    return book.title.strip().lower(), book.author.strip().lower()


def find_shared_books(
    finished1: list[BookRecord],
    finished2: list[BookRecord],
) -> list[SharedBook]:
    """Find books both readers finished, matched on title and author.

    Matching ignores case and surrounding whitespace. Each of reader 1's
    books is paired with the first match in reader 2's list. Books missing
    a title or author never match.

    This is a pairwise scan, fine for personal libraries of a few hundred
    books.
    """
    shared: list[SharedBook] = []
    for book1 in finished1:
        key = _match_key(book1)
        if not all(key):
            continue
        match = next((book2 for book2 in finished2 if _match_key(book2) == key), None)
        if match is None:
            continue
        shared.append(
            SharedBook(
                title=book1.title,
                author=book1.author,
                cover=book1.cover or match.cover,
                rating1=book1.rating,
                rating2=match.rating,
            )
        )
    logger.debug(f"Found {len(shared)} shared books")
    return shared


def summarize_joint(stats1: ReadingStats, stats2: ReadingStats) -> JointSummary:
    """Headline numbers for the two readers' shared dashboard."""
    return JointSummary(
        combined_books=stats1.total_books + stats2.total_books,
        combined_pages=stats1.total_pages + stats2.total_pages,
        shared_books=find_shared_books(stats1.finished, stats2.finished),
    )
