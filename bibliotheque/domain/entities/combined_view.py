"""Entities for views spanning both readers."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .book_record import BookRecord


class CombinedStats(BaseModel):
    """Two readers' statistics merged for the combined view.

    Averages are merged from the already-rounded per-reader values rather
    than recomputed from the underlying records.
    """

    model_config = ConfigDict(frozen=True)

    total_books: int = 0
    total_pages: int = 0
    avg_per_month: float = 0
    pages_per_day: int = 0
    longest_streak: int = 0
    avg_rating: float = 0
    genre_counts: dict[str, int] = Field(default_factory=dict)
    longest_book: Optional[BookRecord] = None
    shortest_book: Optional[BookRecord] = None
    highest_rated: Optional[BookRecord] = None
    monthly_data: list[int] = Field(default_factory=lambda: [0] * 12, min_length=12, max_length=12)
    finished_this_year: list[BookRecord] = Field(default_factory=list)


class SharedBook(BaseModel):
    """A book both readers have finished."""

    model_config = ConfigDict(frozen=True)

    title: str
    author: str
    cover: str = ""
    rating1: int = Field(ge=0, le=5)
    rating2: int = Field(ge=0, le=5)


class JointSummary(BaseModel):
    """Headline numbers for both readers together."""

    model_config = ConfigDict(frozen=True)

    combined_books: int = 0
    combined_pages: int = 0
    shared_books: list[SharedBook] = Field(default_factory=list)

    @property
    def shared_count(self) -> int:
        return len(self.shared_books)


class RecapView(BaseModel):
    """Year-in-review numbers for one reader or both together."""

    model_config = ConfigDict(frozen=True)

    view: str = Field(description="partner1, partner2 or combined")
    display_name: str
    total_books: int = 0
    total_pages: int = 0
    avg_per_month: float = 0
    pages_per_day: int = 0
    longest_streak: int = 0
    avg_rating: float = 0
    genre_counts: dict[str, int] = Field(default_factory=dict)
    top_genres: list[tuple[str, int]] = Field(default_factory=list)
    longest_book: Optional[BookRecord] = None
    shortest_book: Optional[BookRecord] = None
    highest_rated: Optional[BookRecord] = None
    monthly_data: list[int] = Field(default_factory=lambda: [0] * 12, min_length=12, max_length=12)
