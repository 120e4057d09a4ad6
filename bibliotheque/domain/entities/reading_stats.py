"""Statistics entities derived from a reader's book records."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .book_record import BookRecord


class ReadingStats(BaseModel):
    """Statistics for one reader, computed for a reference date.

    A pure value object: it is rebuilt from the records on every call and
    carries no identity of its own.
    """

    model_config = ConfigDict(frozen=True)

    books: list[BookRecord] = Field(default_factory=list, description="All records, input order")
    finished: list[BookRecord] = Field(default_factory=list)
    currently_reading: list[BookRecord] = Field(default_factory=list)
    want_to_read: list[BookRecord] = Field(default_factory=list)
    finished_this_year: list[BookRecord] = Field(default_factory=list)

    total_books: int = 0
    total_pages: int = 0
    avg_per_month: float = 0
    pages_per_day: int = 0
    genre_counts: dict[str, int] = Field(default_factory=dict)

    longest_book: Optional[BookRecord] = None
    shortest_book: Optional[BookRecord] = None
    highest_rated: Optional[BookRecord] = None
    avg_rating: float = 0

    monthly_data: list[int] = Field(default_factory=lambda: [0] * 12, min_length=12, max_length=12)
    reading_days: list[date] = Field(default_factory=list, description="Unique reading days, ascending")
    longest_streak: int = 0
    goal: int = 24

    @property
    def distinct_genres(self) -> int:
        return len(self.genre_counts)

    @property
    def rated_finished_count(self) -> int:
        """Number of finished records with a rating, regardless of year."""
        return sum(1 for book in self.finished if book.is_rated)


class GoalProgress(BaseModel):
    """Progress toward the annual reading goal."""

    model_config = ConfigDict(frozen=True)

    total_books: int = Field(ge=0)
    goal: int = Field(ge=1, description="Goal after clamping to at least one book")
    percent: int = Field(ge=0, le=100)
    remaining: int = Field(ge=0)

    @property
    def reached(self) -> bool:
        return self.percent >= 100


class FunFact(BaseModel):
    """A page-count milestone message."""

    model_config = ConfigDict(frozen=True)

    threshold: int
    text: str
