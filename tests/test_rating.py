import pytest
from pydantic import ValidationError

from app.domain.models.query import ReviewFilter
from app.domain.models.review import Review
from app.domain.services.rating_svc import (
    filter_reviews,
    rating_chart_series,
    rating_distribution,
)

from conftest import T0, make_review


def test_distribution_percentages():
    reviews = [make_review(i, r) for i, r in enumerate([5, 5, 3, 1], start=1)]
    assert rating_distribution(reviews) == {5: 50, 4: 0, 3: 25, 2: 0, 1: 25}


def test_distribution_keys_are_ordered_high_to_low():
    assert list(rating_distribution([make_review(1, 2)])) == [5, 4, 3, 2, 1]


def test_distribution_without_reviews_is_all_zero():
    assert rating_distribution([]) == {5: 0, 4: 0, 3: 0, 2: 0, 1: 0}


def test_chart_series_follows_star_order():
    reviews = [make_review(1, 4), make_review(2, 4), make_review(3, 1)]
    assert rating_chart_series(rating_distribution(reviews)) == [0, 66.67, 0, 0, 33.33]
    assert rating_chart_series({5: 100.0}) == [100.0, 0, 0, 0, 0]


def test_verified_filter():
    reviews = [make_review(1, 5, verified=True), make_review(2, 3), make_review(3, 4, verified=True)]
    assert [r.review_id for r in filter_reviews(reviews, ReviewFilter.VERIFIED)] == [1, 3]
    assert [r.review_id for r in filter_reviews(reviews, "verified-reviews")] == [1, 3]
    assert len(filter_reviews(reviews, ReviewFilter.ALL)) == 3
    assert len(filter_reviews(reviews, "something-else")) == 3
    assert len(filter_reviews(reviews, None)) == 3


@pytest.mark.parametrize("rating,text", [(0, "ok"), (6, "ok"), (3, "   ")])
def test_review_invariants(rating, text):
    with pytest.raises(ValidationError):
        Review(review_id=1, product_id=1, client_id=1, text=text, rating=rating, created_at=T0)
