"""
Summary data models.

Outputs of the stats aggregator and the word-frequency analyzer.
"""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict


def _empty_star_counts() -> Dict[int, int]:
    return {star: 0 for star in range(1, 6)}


def round_half_up(value: float, places: int = 0) -> float:
    """Round with halves going away from zero (2.25 -> 2.3, 2.5 -> 3)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class StatsSummary:
    """
    Rating statistics for one set of reviews.
    Rebuilt from scratch on every pass.
    """
    count: int = 0
    average_rating: float = 0.0  # Rounded to 1 decimal place
    counts_by_star: Dict[int, int] = field(default_factory=_empty_star_counts)

    def __post_init__(self):
        if set(self.counts_by_star) != set(range(1, 6)):
            raise ValueError(
                f"Invalid star counts: {sorted(self.counts_by_star)}. Must cover 1-5"
            )

    @property
    def critical_count(self) -> int:
        """Number of one- and two-star reviews."""
        return self.counts_by_star[1] + self.counts_by_star[2]

    def star_percentage(self, star: int) -> int:
        """Whole-number share of reviews with the given star rating."""
        if not self.count:
            return 0
        return int(round_half_up(100 * self.counts_by_star[star] / self.count))

    @property
    def critical_percentage(self) -> int:
        if not self.count:
            return 0
        return int(round_half_up(100 * self.critical_count / self.count))

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "count": self.count,
            "average_rating": self.average_rating,
            "counts_by_star": {str(star): n for star, n in self.counts_by_star.items()},
            "critical_count": self.critical_count,
            "critical_percentage": self.critical_percentage,
        }


@dataclass(frozen=True)
class WordFrequencyEntry:
    """One ranked word and how many times it appeared."""
    word: str
    count: int

    def to_dict(self) -> dict:
        return {"word": self.word, "count": self.count}
