"""
Rating Stats Aggregator.

Counts reviews per star rating and computes the average rating.
"""

import logging
from collections import Counter
from typing import List

from src.models.review import Review
from src.models.summary import StatsSummary, round_half_up

logger = logging.getLogger(__name__)


class StatsAggregator:
    """
    Reduces a list of reviews to a StatsSummary.
    """

    def aggregate(self, reviews: List[Review]) -> StatsSummary:
        """
        Compute rating statistics.

        Args:
            reviews: Reviews to summarize (may be empty)

        Returns:
            StatsSummary with the average rounded half-up to 1 decimal;
            an empty input gives count 0 and average 0.0
        """
        total = len(reviews)
        star_counts = Counter(r.rating_value for r in reviews)
        counts_by_star = {star: star_counts.get(star, 0) for star in range(1, 6)}

        if total == 0:
            logger.debug("No reviews to aggregate")
            return StatsSummary(count=0, average_rating=0.0, counts_by_star=counts_by_star)

        mean = sum(r.rating_value for r in reviews) / total
        summary = StatsSummary(
            count=total,
            average_rating=round_half_up(mean, 1),
            counts_by_star=counts_by_star
        )

        logger.debug(f"Aggregated {total} reviews (average {summary.average_rating})")
        return summary
