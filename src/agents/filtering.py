"""
Review Filter.

Applies search, date range, rating and category predicates to a list
of reviews. Predicates combine with AND.
"""

import logging
from typing import Dict, List

from src.models.criteria import ALL, FilterCriteria
from src.models.review import Review
import config.settings as settings

logger = logging.getLogger(__name__)


class ReviewFilter:
    """
    Narrows a list of reviews to those matching FilterCriteria.

    Predicates run in a fixed order: search, date start, date end,
    rating, category. Each one only removes reviews; the result holds
    the same Review objects as the input, in input order.
    """

    def __init__(self, categories: Dict[str, List[str]] = None):
        """
        Args:
            categories: Category name -> lowercase keywords
                (defaults to settings.WORD_CATEGORIES)
        """
        self.categories = categories if categories is not None else settings.WORD_CATEGORIES

    def keywords_for(self, category: str) -> List[str]:
        """Keywords of a category; raises ValueError for unknown names."""
        if category not in self.categories:
            raise ValueError(
                f"Invalid category: {category}. Must be 'All' or one of {sorted(self.categories)}"
            )
        return self.categories[category]

    def apply(self, reviews: List[Review], criteria: FilterCriteria) -> List[Review]:
        """
        Filter reviews.

        Args:
            reviews: Reviews to filter (not modified)
            criteria: Active filter criteria

        Returns:
            New list of the reviews that satisfy every predicate
        """
        filtered = list(reviews)

        if criteria.search_term:
            term = criteria.search_term.lower()
            filtered = [r for r in filtered if _matches_search(r, term)]

        if criteria.date_range.start:
            start = criteria.date_range.start
            filtered = [r for r in filtered if r.date >= start]
        if criteria.date_range.end:
            end = criteria.date_range.end
            filtered = [r for r in filtered if r.date <= end]

        if criteria.rating_filter != ALL:
            filtered = [r for r in filtered if r.rating_value == criteria.rating_filter]

        if criteria.category != ALL:
            keywords = self.keywords_for(criteria.category)
            filtered = [r for r in filtered if _matches_keywords(r, keywords)]

        logger.debug(f"Filter kept {len(filtered)} of {len(reviews)} reviews")
        return filtered


def _matches_search(review: Review, term: str) -> bool:
    return bool(
        (review.text and term in review.text.lower())
        or (review.reviewer and term in review.reviewer.lower())
    )


def _matches_keywords(review: Review, keywords: List[str]) -> bool:
    if not review.text:
        return False
    text = review.text.lower()
    return any(keyword in text for keyword in keywords)
