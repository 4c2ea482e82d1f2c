"""
Unit tests for the Stats Aggregator.
"""

import pytest
from src.models.review import Review
from src.models.summary import StatsSummary
from src.agents.aggregation import StatsAggregator


def _reviews(*ratings):
    return [Review(rating_value=r, date="2024-01-01") for r in ratings]


@pytest.fixture
def aggregator():
    return StatsAggregator()


def test_empty_input(aggregator):
    """Test that no reviews gives zeros instead of a division error."""
    summary = aggregator.aggregate([])

    assert summary.count == 0
    assert summary.average_rating == 0
    assert summary.counts_by_star == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
    assert summary.critical_percentage == 0
    assert summary.star_percentage(5) == 0


def test_two_review_scenario(aggregator):
    summary = aggregator.aggregate(_reviews(5, 1))

    assert summary.count == 2
    assert summary.average_rating == 3.0
    assert summary.counts_by_star[5] == 1
    assert summary.counts_by_star[1] == 1


def test_single_review(aggregator):
    summary = aggregator.aggregate(_reviews(5))
    assert summary.count == 1
    assert summary.average_rating == 5.0


@pytest.mark.parametrize("ratings, expected", [
    ((5, 4, 4), 4.3),
    ((5, 4), 4.5),
    ((5, 5, 4, 3), 4.3),  # 4.25 rounds half up
    ((1, 1, 2, 2, 2, 2, 2, 2), 1.8),  # 1.75 rounds half up
    ((3, 3, 3), 3.0),
])
def test_average_is_rounded_to_one_decimal(aggregator, ratings, expected):
    assert aggregator.aggregate(_reviews(*ratings)).average_rating == expected


def test_counts_by_star(aggregator):
    summary = aggregator.aggregate(_reviews(1, 2, 2, 3, 5, 5, 5))
    assert summary.counts_by_star == {1: 1, 2: 2, 3: 1, 4: 0, 5: 3}


def test_critical_share(aggregator):
    summary = aggregator.aggregate(_reviews(1, 2, 5))

    assert summary.critical_count == 2
    assert summary.critical_percentage == 67
    assert summary.star_percentage(5) == 33


def test_summary_rejects_partial_star_counts():
    with pytest.raises(ValueError):
        StatsSummary(count=1, average_rating=5.0, counts_by_star={5: 1})


def test_to_dict(aggregator):
    data = aggregator.aggregate(_reviews(4, 5)).to_dict()

    assert data["count"] == 2
    assert data["average_rating"] == 4.5
    assert data["counts_by_star"] == {"1": 0, "2": 0, "3": 0, "4": 1, "5": 1}
