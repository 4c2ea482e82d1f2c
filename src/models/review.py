"""
Review data model.

Represents a normalized review from the reviews export.
"""

from dataclasses import dataclass
from typing import Dict, Optional

# One CSV row keyed by header, exactly as the parser produced it
RawRecord = Dict[str, str]


@dataclass(frozen=True)
class Review:
    """
    Normalized review, projected from a single RawRecord.
    Only the columns the analysis pipeline reads are kept.
    """
    rating_value: int  # 1-5 star rating
    date: str  # YYYY-MM-DD, or the invalid-date sentinel
    raw_date: str = ""  # Date exactly as exported
    rating_label: Optional[str] = None  # ONE..FIVE when recognized
    reviewer: Optional[str] = None
    text: Optional[str] = None

    def __post_init__(self):
        # Validate rating
        if not (1 <= self.rating_value <= 5):
            raise ValueError(f"Invalid rating: {self.rating_value}. Must be 1-5")

    @property
    def display_name(self) -> str:
        """Reviewer name as shown to users."""
        return self.reviewer or "Anonymous"

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "reviewer": self.reviewer,
            "text": self.text,
            "rating_label": self.rating_label,
            "rating_value": self.rating_value,
            "raw_date": self.raw_date,
            "date": self.date,
        }
