"""
Filter and sort criteria models.

Immutable values describing one analysis pass: which reviews to keep
and how to order them.
"""

import re
from dataclasses import dataclass, field
from datetime import date as Date, datetime, timedelta, timezone
from typing import Optional, Union

ALL = "All"

SORT_FIELDS = ("Date", "Rating", "Reviewer")
SORT_DIRECTIONS = ("asc", "desc")

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


@dataclass(frozen=True)
class DateRange:
    """
    Inclusive date bounds in YYYY-MM-DD format.
    A missing bound leaves that side unconstrained.
    """
    start: Optional[str] = None
    end: Optional[str] = None

    def __post_init__(self):
        # Bounds are compared as strings, so only zero-padded ISO dates work
        for name in ("start", "end"):
            value = getattr(self, name)
            if not value:
                object.__setattr__(self, name, None)
                continue
            if not _ISO_DATE.fullmatch(value):
                raise ValueError(f"Invalid {name} date: {value!r}. Must be YYYY-MM-DD")
            try:
                Date.fromisoformat(value)
            except ValueError:
                raise ValueError(f"Invalid {name} date: {value!r}. Not a calendar date")

    @classmethod
    def all_time(cls) -> "DateRange":
        return cls()

    @classmethod
    def last_n_days(cls, days: int, today: Optional[Date] = None) -> "DateRange":
        """
        Range ending today and starting `days` days earlier.

        Args:
            days: Window length in days
            today: Reference date (defaults to the current UTC date)

        Returns:
            DateRange with both bounds set
        """
        if days < 0:
            raise ValueError(f"Invalid window: {days}. Must be >= 0")

        if today is None:
            today = datetime.now(timezone.utc).date()

        start = today - timedelta(days=days)
        return cls(start=start.isoformat(), end=today.isoformat())

    @property
    def is_unbounded(self) -> bool:
        return not self.start and not self.end


@dataclass(frozen=True)
class FilterCriteria:
    """
    Everything the filter engine needs for one pass.

    rating_filter accepts "All", an int 1-5, or the same number as a
    string (e.g. "5"), which is converted to int.
    """
    search_term: str = ""
    date_range: DateRange = field(default_factory=DateRange)
    rating_filter: Union[str, int] = ALL
    category: str = ALL

    def __post_init__(self):
        rating = self.rating_filter
        if rating != ALL:
            try:
                rating = int(rating)
            except (TypeError, ValueError):
                raise ValueError(
                    f"Invalid rating filter: {self.rating_filter!r}. Must be 'All' or 1-5"
                )
            if not (1 <= rating <= 5):
                raise ValueError(f"Invalid rating filter: {rating}. Must be 'All' or 1-5")
            object.__setattr__(self, "rating_filter", rating)

        if self.search_term is None:
            object.__setattr__(self, "search_term", "")

    @property
    def is_noop(self) -> bool:
        """True when no predicate would remove any review."""
        return (
            not self.search_term
            and self.date_range.is_unbounded
            and self.rating_filter == ALL
            and self.category == ALL
        )


@dataclass(frozen=True)
class SortSpec:
    """Review ordering: one field and a direction."""
    field: str = "Date"
    direction: str = "desc"

    def __post_init__(self):
        if self.field not in SORT_FIELDS:
            raise ValueError(f"Invalid sort field: {self.field}. Must be one of {SORT_FIELDS}")
        if self.direction not in SORT_DIRECTIONS:
            raise ValueError(
                f"Invalid sort direction: {self.direction}. Must be 'asc' or 'desc'"
            )

    def toggled(self, field: str) -> "SortSpec":
        """
        Spec after the user picks a column header.

        Picking the current field while it is descending switches to
        ascending; anything else starts at descending.
        """
        if self.field == field and self.direction == "desc":
            return SortSpec(field=field, direction="asc")
        return SortSpec(field=field, direction="desc")
