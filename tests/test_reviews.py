import asyncio
from datetime import date

from app.domain.models.review import MonthlyReviewCount
from app.domain.services.reviews_svc import (
    get_product_reviews_svc,
    get_review_count_over_time_svc,
    list_reviews_svc,
    month_over_month,
)

from conftest import FakeProductRepo, FakeReviewRepo, make_product, make_review

DAY = 24 * 60


def run(coro):
    return asyncio.run(coro)


def months(*totals):
    return [MonthlyReviewCount(month=date(2024, i + 1, 1), total_reviews=n) for i, n in enumerate(totals)]


def test_month_over_month_percentages():
    rows = month_over_month(months(10, 15, 0, 5, 3, 4))
    assert [r.percentage_difference for r in rows] == [None, 50.0, -100.0, None, -40.0, 33.33]
    assert [r.total_reviews for r in rows] == [10, 15, 0, 5, 3, 4]


def test_month_over_month_empty():
    assert month_over_month([]) == []


def test_count_over_time_groups_by_month():
    # T0 is 2024-05-01
    reviews = [
        make_review(1, 5),
        make_review(2, 4, minutes=3 * DAY),
        make_review(3, 3, minutes=40 * DAY),
        make_review(4, 2, minutes=41 * DAY),
        make_review(5, 1, minutes=42 * DAY),
    ]
    rows = run(get_review_count_over_time_svc(FakeReviewRepo(reviews)))
    assert [(r.month, r.total_reviews, r.percentage_difference) for r in rows] == [
        (date(2024, 5, 1), 2, None),
        (date(2024, 6, 1), 3, 50.0),
    ]


def test_list_reviews_order_and_limit():
    reviews = [make_review(1, 5, minutes=5), make_review(2, 4, minutes=50), make_review(3, 3, minutes=20)]
    repo = FakeReviewRepo(reviews)
    assert [r.review_id for r in run(list_reviews_svc(repo))] == [1, 2, 3]
    assert [r.review_id for r in run(list_reviews_svc(repo, order_by="created_date"))] == [2, 3, 1]
    assert [r.review_id for r in run(list_reviews_svc(repo, order_by="created_date", limit=2))] == [2, 3]
    assert [r.review_id for r in run(list_reviews_svc(repo, order_by="rating"))] == [1, 2, 3]


def test_product_reviews_unknown_product():
    repo = FakeReviewRepo([make_review(1, 5, product_id=7)])
    assert run(get_product_reviews_svc(FakeProductRepo([]), repo, 7)) is None
    found = run(get_product_reviews_svc(FakeProductRepo([make_product(7, "Flat White")]), repo, 7))
    assert [r.review_id for r in found] == [1]
