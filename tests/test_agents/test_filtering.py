"""
Unit tests for the Review Filter.
"""

import pytest
from src.models.criteria import DateRange, FilterCriteria
from src.models.review import Review
from src.agents.filtering import ReviewFilter
import config.settings as settings


@pytest.fixture
def review_filter():
    return ReviewFilter()


@pytest.fixture
def reviews():
    return [
        Review(rating_value=1, date="2024-06-01", reviewer="Bo", text="Poor"),
        Review(rating_value=5, date="2024-01-01", reviewer="Ann",
               text="Great service and attic work"),
        Review(rating_value=4, date="2023-11-15", reviewer="Cara",
               text="Friendly crew, the house keeps a steady temperature"),
        Review(rating_value=5, date="2023-05-20", reviewer=None, text=None),
        Review(rating_value=3, date=settings.INVALID_DATE, reviewer="Dee Service Co",
               text="Okay"),
    ]


def test_noop_criteria_returns_everything(review_filter, reviews):
    """Test that default criteria keep every review, same objects, same order."""
    filtered = review_filter.apply(reviews, FilterCriteria())

    assert len(filtered) == len(reviews)
    assert all(a is b for a, b in zip(filtered, reviews))
    assert filtered is not reviews


def test_search_matches_text_case_insensitively(review_filter, reviews):
    filtered = review_filter.apply(reviews, FilterCriteria(search_term="ATTIC"))
    assert [r.reviewer for r in filtered] == ["Ann"]


def test_search_matches_reviewer(review_filter, reviews):
    filtered = review_filter.apply(reviews, FilterCriteria(search_term="service"))

    # Ann's text and Dee's reviewer name both contain "service"
    assert [r.reviewer for r in filtered] == ["Ann", "Dee Service Co"]


def test_search_excludes_reviews_without_text_or_reviewer(review_filter, reviews):
    filtered = review_filter.apply(reviews, FilterCriteria(search_term="o"))
    assert all(r.text or r.reviewer for r in filtered)
    assert reviews[3] not in filtered


def test_date_range_is_inclusive(review_filter, reviews):
    criteria = FilterCriteria(date_range=DateRange(start="2024-01-01", end="2024-06-01"))
    filtered = review_filter.apply(reviews, criteria)

    assert [r.date for r in filtered] == ["2024-06-01", "2024-01-01"]


def test_open_ended_date_range(review_filter, reviews):
    filtered = review_filter.apply(reviews, FilterCriteria(date_range=DateRange(end="2023-12-31")))
    assert [r.date for r in filtered] == ["2023-11-15", "2023-05-20"]


def test_invalid_dates_never_pass_an_end_bound(review_filter, reviews):
    filtered = review_filter.apply(reviews, FilterCriteria(date_range=DateRange(end="2099-12-31")))
    assert all(r.date != settings.INVALID_DATE for r in filtered)


def test_rating_filter(review_filter, reviews):
    filtered = review_filter.apply(reviews, FilterCriteria(rating_filter="5"))

    assert len(filtered) == 2
    assert all(r.rating_value == 5 for r in filtered)


def test_category_filter(review_filter, reviews):
    """Test that a category keeps reviews whose text has any of its keywords."""
    filtered = review_filter.apply(reviews, FilterCriteria(category="Service"))

    # "service" in Ann's text, "friendly" in Cara's
    assert [r.reviewer for r in filtered] == ["Ann", "Cara"]


def test_category_ignores_reviewer_and_missing_text(review_filter, reviews):
    filtered = review_filter.apply(reviews, FilterCriteria(category="Service"))

    assert reviews[3] not in filtered  # no text
    assert reviews[4] not in filtered  # keyword only in reviewer name


def test_category_uses_substring_match(review_filter):
    reviews = [Review(rating_value=5, date="2024-01-01", text="Top QUALITY installations")]

    assert review_filter.apply(reviews, FilterCriteria(category="Technical")) == reviews
    assert review_filter.apply(reviews, FilterCriteria(category="Quality")) == reviews


def test_unknown_category_raises(review_filter, reviews):
    with pytest.raises(ValueError):
        review_filter.apply(reviews, FilterCriteria(category="Pricing"))


def test_custom_categories():
    review_filter = ReviewFilter(categories={"Pricing": ["price", "cost"]})
    reviews = [
        Review(rating_value=2, date="2024-01-01", text="Cost was too high"),
        Review(rating_value=5, date="2024-01-01", text="Lovely"),
    ]

    filtered = review_filter.apply(reviews, FilterCriteria(category="Pricing"))
    assert filtered == [reviews[0]]


def test_predicates_combine_with_and(review_filter, reviews):
    criteria = FilterCriteria(
        search_term="a",
        date_range=DateRange(start="2023-01-01"),
        rating_filter=5,
        category="Quality"
    )

    filtered = review_filter.apply(reviews, criteria)
    assert [r.reviewer for r in filtered] == ["Ann"]


def test_filter_is_idempotent_subset(review_filter, reviews):
    criteria = FilterCriteria(search_term="e", rating_filter="All", category="Performance")

    once = review_filter.apply(reviews, criteria)
    twice = review_filter.apply(once, criteria)

    assert once == twice
    assert all(any(r is original for original in reviews) for r in once)


def test_input_not_modified(review_filter, reviews):
    snapshot = list(reviews)
    review_filter.apply(reviews, FilterCriteria(rating_filter=1))
    assert reviews == snapshot


def test_no_matches_returns_empty_list(review_filter, reviews):
    assert review_filter.apply(reviews, FilterCriteria(search_term="zzz")) == []
