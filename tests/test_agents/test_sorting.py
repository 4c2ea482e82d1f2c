"""
Unit tests for review sorting.
"""

import pytest
from collections import Counter
from src.models.criteria import SortSpec
from src.models.review import Review
from src.agents.sorting import reviewer_sort_key, sort_reviews
import config.settings as settings


@pytest.fixture
def reviews():
    return [
        Review(rating_value=3, date="2024-03-01", reviewer="bob"),
        Review(rating_value=5, date="2024-01-15", reviewer="Alice"),
        Review(rating_value=1, date="2024-06-30", reviewer=None),
        Review(rating_value=5, date="2023-12-31", reviewer="carl"),
    ]


def test_sort_by_date_descending(reviews):
    ordered = sort_reviews(reviews, SortSpec("Date", "desc"))
    assert [r.date for r in ordered] == ["2024-06-30", "2024-03-01", "2024-01-15", "2023-12-31"]


def test_sort_by_date_ascending(reviews):
    ordered = sort_reviews(reviews, SortSpec("Date", "asc"))
    assert [r.date for r in ordered] == ["2023-12-31", "2024-01-15", "2024-03-01", "2024-06-30"]


def test_invalid_dates_are_oldest(reviews):
    reviews.append(Review(rating_value=2, date=settings.INVALID_DATE, reviewer="zed"))

    ascending = sort_reviews(reviews, SortSpec("Date", "asc"))
    descending = sort_reviews(reviews, SortSpec("Date", "desc"))

    assert ascending[0].date == settings.INVALID_DATE
    assert descending[-1].date == settings.INVALID_DATE


def test_sort_by_rating(reviews):
    ascending = sort_reviews(reviews, SortSpec("Rating", "asc"))
    descending = sort_reviews(reviews, SortSpec("Rating", "desc"))

    assert [r.rating_value for r in ascending] == [1, 3, 5, 5]
    assert [r.rating_value for r in descending] == [5, 5, 3, 1]


def test_rating_ties_keep_input_order(reviews):
    """Test that the sort is stable in both directions."""
    ascending = sort_reviews(reviews, SortSpec("Rating", "asc"))
    descending = sort_reviews(reviews, SortSpec("Rating", "desc"))

    assert [r.reviewer for r in ascending if r.rating_value == 5] == ["Alice", "carl"]
    assert [r.reviewer for r in descending if r.rating_value == 5] == ["Alice", "carl"]


def test_sort_by_reviewer_ignores_case(reviews):
    ascending = sort_reviews(reviews, SortSpec("Reviewer", "asc"))
    descending = sort_reviews(reviews, SortSpec("Reviewer", "desc"))

    # Missing reviewer compares as ""
    assert [r.reviewer for r in ascending] == [None, "Alice", "bob", "carl"]
    assert [r.reviewer for r in descending] == ["carl", "bob", "Alice", None]


@pytest.mark.parametrize("field", ["Date", "Rating", "Reviewer"])
@pytest.mark.parametrize("direction", ["asc", "desc"])
def test_sort_keeps_same_elements(reviews, field, direction):
    ordered = sort_reviews(reviews, SortSpec(field, direction))

    assert len(ordered) == len(reviews)
    assert Counter(map(id, ordered)) == Counter(map(id, reviews))


def test_sort_does_not_modify_input(reviews):
    snapshot = list(reviews)
    sort_reviews(reviews, SortSpec("Rating", "asc"))
    assert reviews == snapshot


def test_sort_empty_list():
    assert sort_reviews([], SortSpec()) == []


def test_accented_reviewers_sort_with_base_letter():
    reviews = [
        Review(rating_value=5, date="2024-01-01", reviewer="Zoe"),
        Review(rating_value=5, date="2024-01-01", reviewer="Émile"),
        Review(rating_value=5, date="2024-01-01", reviewer="andré"),
    ]

    ascending = sort_reviews(reviews, SortSpec("Reviewer", "asc"))

    assert [r.reviewer for r in ascending] == ["andré", "Émile", "Zoe"]


def test_reviewer_sort_key():
    assert reviewer_sort_key("Émile") == ("EMILE", "ÉMILE")
    assert reviewer_sort_key(None) == ("", "")
    assert reviewer_sort_key("Emile") < reviewer_sort_key("Émile")
