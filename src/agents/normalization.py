"""
Review Normalization Agent.

Projects raw CSV records onto typed Review objects. Normalization never
fails: missing or malformed fields fall back to defaults.
"""

import logging
from typing import Dict, List, Optional

import pandas as pd

from src.models.review import RawRecord, Review
import config.settings as settings

logger = logging.getLogger(__name__)


def parse_rating(label: Optional[str], labels: Dict[str, int] = None,
                 default: int = settings.DEFAULT_RATING) -> int:
    """
    Convert a textual rating token (ONE..FIVE) into stars.
    Missing or unrecognized tokens map to `default`.
    """
    labels = labels or settings.RATING_LABELS
    return labels.get(label, default)


def parse_review_date(raw_date: Optional[str]) -> str:
    """
    Parse a date string in any format pandas understands.

    Args:
        raw_date: Date as exported (e.g. "2024-01-01", "Jan 5, 2024",
            "2024-06-01T10:00:00Z")

    Returns:
        UTC calendar date as YYYY-MM-DD, or settings.INVALID_DATE when
        the value cannot be parsed
    """
    if not raw_date or not raw_date.strip():
        return settings.INVALID_DATE

    try:
        parsed = pd.to_datetime(raw_date.strip(), errors="coerce", utc=True, format="mixed")
    except (ValueError, TypeError, OverflowError):
        # Some inputs raise even with errors="coerce"
        parsed = pd.NaT

    if pd.isna(parsed):
        return settings.INVALID_DATE

    return parsed.strftime("%Y-%m-%d")


def date_sort_key(date: str) -> pd.Timestamp:
    """Chronological key for a normalized date; invalid dates are oldest."""
    if date == settings.INVALID_DATE:
        return pd.Timestamp.min
    parsed = pd.to_datetime(date, format="%Y-%m-%d", errors="coerce")
    return pd.Timestamp.min if pd.isna(parsed) else parsed


class ReviewNormalizer:
    """
    Converts raw records into Review objects.

    Column names and rating tokens come from settings so a different
    export layout only needs a config change.
    """

    def __init__(
        self,
        date_column: str = settings.DATE_COLUMN,
        rating_column: str = settings.RATING_COLUMN,
        reviewer_column: str = settings.REVIEWER_COLUMN,
        text_column: str = settings.TEXT_COLUMN,
        default_rating: int = settings.DEFAULT_RATING
    ):
        self.date_column = date_column
        self.rating_column = rating_column
        self.reviewer_column = reviewer_column
        self.text_column = text_column
        self.default_rating = default_rating

    def normalize(self, raw_records: List[RawRecord]) -> List[Review]:
        """
        Normalize a whole dataset.

        Args:
            raw_records: Records from the ingestion agent

        Returns:
            One Review per record, most recent first
        """
        reviews = [self.normalize_record(record) for record in raw_records]

        unknown_ratings = sum(1 for r in reviews if r.rating_label is None)
        invalid_dates = sum(1 for r in reviews if r.date == settings.INVALID_DATE)
        if unknown_ratings:
            logger.warning(
                f"{unknown_ratings} reviews had a missing or unknown rating, "
                f"defaulted to {self.default_rating}"
            )
        if invalid_dates:
            logger.warning(f"{invalid_dates} reviews had an unparseable date")

        # Stable sort keeps export order for equal dates
        reviews = sorted(reviews, key=lambda r: date_sort_key(r.date), reverse=True)

        logger.info(f"Normalized {len(reviews)} reviews")
        return reviews

    def normalize_record(self, record: RawRecord) -> Review:
        """Project a single raw record onto a Review."""
        label = _clean(record.get(self.rating_column))
        raw_date = record.get(self.date_column) or ""

        return Review(
            rating_value=parse_rating(label, default=self.default_rating),
            date=parse_review_date(raw_date),
            raw_date=raw_date,
            rating_label=label if label in settings.RATING_LABELS else None,
            reviewer=_clean(record.get(self.reviewer_column)),
            text=_clean(record.get(self.text_column)),
        )


def _clean(value) -> Optional[str]:
    """Empty cells become None; everything else is kept as written."""
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    return value if value else None
