"""Statistics engine deriving reading statistics from book records."""

import logging
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Iterable, Optional, Sequence, Union

from ..entities.book_record import BookRecord, Shelf
from ..entities.reader_settings import ReaderSettings
from ..entities.reading_stats import ReadingStats

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
MAX_HEATMAP_LEVEL = 5


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a calculator does: halves always go up."""
    quantum = Decimal(1).scaleb(-digits)
    # Exact binary value, so 1.15 (stored as 1.1499...) rounds down
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp_goal(goal: int) -> int:
    return max(1, goal)


def reading_duration_days(record: BookRecord) -> int:
    """Days spent reading a book with both dates set, never less than one."""
    return max(1, (record.date_finished - record.date_started).days)


def collect_reading_days(records: Iterable[BookRecord], reference_date: date) -> list[date]:
    """Return every day covered by a started record, ascending and unique.

    A record covers the days from its start through its finish, or through
    ``reference_date`` while it has no finish date.
    """
    days: set[date] = set()
    for record in records:
        if record.date_started is None:
            continue
        end = record.date_finished or reference_date
        day = record.date_started
        while day <= end:
            days.add(day)
            day += timedelta(days=1)
    return sorted(days)


def longest_streak(sorted_days: Sequence[date]) -> int:
    """Length of the longest run of consecutive days in ``sorted_days``.

    The run counter only reports once a second consecutive day is seen, so a
    lone day counts as a streak only when it is the only reading day at all.
    """
    if len(sorted_days) == 1:
        return 1

    longest = 0
    current = 1
    for previous, day in zip(sorted_days, sorted_days[1:]):
        if (day - previous).days == 1:
            current += 1
            longest = max(longest, current)
        else:
            current = 1
    return longest


def heatmap_levels(monthly_data: Sequence[int]) -> list[int]:
    """Map monthly finish counts onto heatmap intensities 0-5."""
    return [min(MAX_HEATMAP_LEVEL, count) for count in monthly_data]


def _first_best(
    records: Iterable[BookRecord],
    key: Callable[[BookRecord], int],
    better: Callable[[int, int], bool],
) -> Optional[BookRecord]:
    # Strict comparison keeps the earliest record on ties
    best: Optional[BookRecord] = None
    for record in records:
        if best is None or better(key(record), key(best)):
            best = record
    return best


class StatsEngine:
    """Stateless calculator turning one reader's records into ReadingStats.

    The reference date is always passed in; the engine never reads the
    clock, so the same inputs always produce the same statistics.
    """

    def compute(
        self,
        records: Sequence[BookRecord],
        settings: ReaderSettings,
        reference_date: Union[date, datetime],
    ) -> ReadingStats:
        """Compute statistics for one reader as of ``reference_date``.

        Args:
            records: The reader's book records, in stored order.
            settings: The reader's settings; only ``goal`` is used.
            reference_date: The day treated as "today".

        Returns:
            ReadingStats: Statistics for the reference date's calendar year.
        """
        if isinstance(reference_date, datetime):
            reference_date = reference_date.date()
        books = list(records)
        year = reference_date.year

        finished = [b for b in books if b.shelf == Shelf.FINISHED]
        currently_reading = [b for b in books if b.shelf == Shelf.CURRENTLY_READING]
        want_to_read = [b for b in books if b.shelf == Shelf.WANT_TO_READ]

        # Finished books without a finish date count toward the current year
        finished_this_year = [
            b for b in finished
            if b.date_finished is None or b.date_finished.year == year
        ]

        total_books = len(finished_this_year)
        total_pages = sum(b.pages for b in finished_this_year)
        avg_per_month = (
            round_half_up(total_books / reference_date.month, 1) if total_books > 0 else 0.0
        )

        rated = [b for b in finished_this_year if b.is_rated]
        avg_rating = (
            round_half_up(sum(b.rating for b in rated) / len(rated), 1) if rated else 0.0
        )

        days_reading = collect_reading_days(books, reference_date)

        stats = ReadingStats(
            books=books,
            finished=finished,
            currently_reading=currently_reading,
            want_to_read=want_to_read,
            finished_this_year=finished_this_year,
            total_books=total_books,
            total_pages=total_pages,
            avg_per_month=avg_per_month,
            pages_per_day=self._pages_per_day(finished_this_year),
            genre_counts=self._genre_counts(finished_this_year),
            longest_book=_first_best(
                (b for b in finished_this_year if b.pages > 0),
                key=lambda b: b.pages,
                better=lambda new, old: new > old,
            ),
            shortest_book=_first_best(
                (b for b in finished_this_year if b.pages > 0),
                key=lambda b: b.pages,
                better=lambda new, old: new < old,
            ),
            highest_rated=_first_best(
                rated,
                key=lambda b: b.rating,
                better=lambda new, old: new > old,
            ),
            avg_rating=avg_rating,
            monthly_data=self._monthly_data(finished_this_year),
            reading_days=days_reading,
            longest_streak=longest_streak(days_reading),
            goal=settings.goal,
        )

        logger.debug(
            f"Computed stats for {settings.name or 'reader'} as of {reference_date}: "
            f"{total_books} books, {total_pages} pages, streak {stats.longest_streak}"
        )
        return stats

    @staticmethod
    def _pages_per_day(finished_this_year: list[BookRecord]) -> int:
        total_days = 0
        total_pages = 0
        for book in finished_this_year:
            if book.date_started and book.date_finished and book.pages > 0:
                total_days += reading_duration_days(book)
                total_pages += book.pages
        if total_days == 0:
            return 0
        return int(round_half_up(total_pages / total_days))

    @staticmethod
    def _genre_counts(finished_this_year: list[BookRecord]) -> dict[str, int]:
        counts: dict[str, int] = {}
        for book in finished_this_year:
            if book.genre:
                counts[book.genre] = counts.get(book.genre, 0) + 1
        return counts

    @staticmethod
    def _monthly_data(finished_this_year: list[BookRecord]) -> list[int]:
        monthly = [0] * MONTHS_PER_YEAR
        for book in finished_this_year:
            # Undated books count toward the year but not toward any month
            if book.date_finished is not None:
                monthly[book.date_finished.month - 1] += 1
        return monthly
