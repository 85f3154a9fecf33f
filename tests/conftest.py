"""Shared factories and in-memory fakes for the shop tests (no Mongo/Redis needed)."""

from datetime import datetime, timedelta, timezone

import pytest

from app.domain.models.comment import Comment
from app.domain.models.product import CategorySales, Product
from app.domain.models.review import MonthlyReviewCount, Review

T0 = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


def make_product(product_id, name, category="Coffee", price=100.0, rating=0.0, days=0, calories=120):
    return Product(
        product_id=product_id,
        name=name,
        category=category,
        price=price,
        calories=calories,
        created_at=T0 + timedelta(days=days),
        average_rating=rating,
    )


def make_review(review_id, rating, product_id=1, verified=False, client_id=None, minutes=0):
    return Review(
        review_id=review_id,
        product_id=product_id,
        client_id=client_id if client_id is not None else review_id,
        text=f"review {review_id}",
        rating=rating,
        created_at=T0 + timedelta(minutes=minutes),
        verified=verified,
    )


def make_comment(comment_id, parent=None, review_id=1, minutes=None):
    return Comment.model_validate({
        "comment_id": comment_id,
        "user_id": 7,
        "review_id": review_id,
        "parent_comment_id": parent,
        "text": f"comment {comment_id}",
        "created_at": T0 + timedelta(minutes=comment_id if minutes is None else minutes),
    })


class FakeProductRepo:
    def __init__(self, products, sales=None):
        self.products = list(products)
        self.sales = sales or []
        self.get_all_calls = 0

    async def get_all(self):
        self.get_all_calls += 1
        return list(self.products)

    async def get_by_product_id(self, product_id):
        return next((p for p in self.products if p.product_id == product_id), None)

    async def get_categories(self):
        return sorted({p.category for p in self.products})

    async def get_sales_per_category(self):
        return [CategorySales(category=c, units_sold=n) for c, n in self.sales]


class FakeReviewRepo:
    def __init__(self, reviews):
        self.reviews = list(reviews)

    async def get_for_product(self, product_id):
        return [r for r in self.reviews if r.product_id == product_id]

    async def get_all(self, newest_first=False, limit=None):
        if newest_first:
            reviews = sorted(self.reviews, key=lambda r: r.created_at, reverse=True)
        else:
            reviews = sorted(self.reviews, key=lambda r: r.review_id)
        return reviews[:limit] if limit else reviews

    async def get_by_review_id(self, review_id):
        return next((r for r in self.reviews if r.review_id == review_id), None)

    async def get_count_per_month(self):
        counts = {}
        for r in self.reviews:
            month = r.created_at.date().replace(day=1)
            counts[month] = counts.get(month, 0) + 1
        return [MonthlyReviewCount(month=m, total_reviews=n) for m, n in sorted(counts.items())]


class FakeCommentRepo:
    def __init__(self, comments):
        self.comments = list(comments)
        self.requested = []

    async def get_for_reviews(self, review_ids):
        ids = list(review_ids)
        self.requested.append(ids)
        return [c for c in self.comments if c.review_id in ids]


class FakeRedis:
    """Just enough of redis.asyncio.Redis for the JSON cache helpers."""

    def __init__(self):
        self.store = {}
        self.set_calls = []

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        self.set_calls.append((key, ex))
        self.store[key] = value


class BrokenRedis:
    async def get(self, key):
        raise ConnectionError("redis down")

    async def set(self, key, value, ex=None):
        raise ConnectionError("redis down")


@pytest.fixture
def drinks():
    return [
        make_product(1, "Iced Mocha", "Coffee", price=120, rating=4.0, days=1),
        make_product(2, "Green Tea", "Tea", price=80, rating=3.5, days=3),
        make_product(3, "Caramel Latte", "Coffee", price=150, rating=4.5, days=2),
        make_product(4, "Chai Latte", "Tea", price=110, rating=4.5, days=0),
        make_product(5, "Blueberry Muffin", "Pastry", price=90, rating=2.0, days=5),
    ]
