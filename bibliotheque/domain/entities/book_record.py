"""Book record entities for the reading tracker."""

import logging
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class Shelf(str, Enum):
    """Shelf a record lives on. A record is on exactly one shelf."""

    CURRENTLY_READING = "currently-reading"
    FINISHED = "finished"
    WANT_TO_READ = "want-to-read"


def _parse_date(value: Any) -> Optional[date]:
    if value is None or isinstance(value, date) and not isinstance(value, datetime):
        return value
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            # Stored values may carry a time component ("2024-03-01T00:00:00Z")
            return date.fromisoformat(text[:10])
        except ValueError:
            logger.warning(f"Dropping malformed date {value!r}")
            return None
    logger.warning(f"Dropping date of unsupported type {type(value).__name__}")
    return None


def _parse_count(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, number)


class BookRecord(BaseModel):
    """A single book on one reader's shelves.

    Records arrive from storage as loosely typed dictionaries with camelCase
    keys. Validation is lenient: anything malformed is coerced to the field's
    "unknown" value instead of rejecting the record, so statistics can always
    be computed over whatever the store holds.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(description="Unique identifier assigned at creation")
    title: str = Field(default="", description="Title of the book")
    author: str = Field(default="", description="Author of the book")
    pages: int = Field(default=0, ge=0, description="Page count, 0 when unknown")
    current_page: int = Field(default=0, ge=0, description="Bookmark while currently reading")
    date_started: Optional[date] = Field(None, description="Day reading started")
    date_finished: Optional[date] = Field(None, description="Day reading finished")
    genre: Optional[str] = Field(None, description="Opaque genre key")
    rating: int = Field(default=0, ge=0, le=5, description="Star rating, 0 when unrated")
    shelf: Shelf = Field(default=Shelf.WANT_TO_READ, description="Shelf the record lives on")
    notes: str = Field(default="", description="Free-form notes")
    cover: str = Field(default="", description="Cover image URL")
    added_at: Optional[datetime] = Field(None, description="When the record was first stored")

    @field_validator("title", "author", "notes", "cover", mode="before")
    @classmethod
    def _blank_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("pages", "current_page", mode="before")
    @classmethod
    def _lenient_count(cls, value: Any) -> int:
        return _parse_count(value)

    @field_validator("rating", mode="before")
    @classmethod
    def _lenient_rating(cls, value: Any) -> int:
        rating = _parse_count(value)
        return rating if rating <= 5 else 0

    @field_validator("date_started", "date_finished", mode="before")
    @classmethod
    def _lenient_date(cls, value: Any) -> Optional[date]:
        return _parse_date(value)

    @field_validator("added_at", mode="before")
    @classmethod
    def _lenient_timestamp(cls, value: Any) -> Optional[datetime]:
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
            except ValueError:
                return None
        return value if isinstance(value, datetime) else None

    @field_validator("genre", mode="before")
    @classmethod
    def _blank_genre(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("shelf", mode="before")
    @classmethod
    def _known_shelf(cls, value: Any) -> Shelf:
        try:
            return Shelf(value)
        except ValueError:
            logger.warning(f"Unknown shelf {value!r}, filing under {Shelf.WANT_TO_READ.value}")
            return Shelf.WANT_TO_READ

    @property
    def is_rated(self) -> bool:
        return self.rating > 0

    def with_auto_shelf(self) -> "BookRecord":
        """Return the record promoted to ``finished`` if it has a finish date.

        Applied on the write path only; the statistics engine reads records
        exactly as stored.
        """
        if self.date_finished is not None and self.shelf == Shelf.CURRENTLY_READING:
            return self.model_copy(update={"shelf": Shelf.FINISHED})
        return self

    def to_storage(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON shape used by the store."""
        return self.model_dump(mode="json", by_alias=True)
