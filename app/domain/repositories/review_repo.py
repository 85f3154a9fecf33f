# app/domain/repositories/review_repo.py

from __future__ import annotations
from datetime import date
from typing import Any, Dict, List, Optional, Set, Tuple
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.domain.models.review import MonthlyReviewCount, Review

class ReviewRepo:
    """
    Reviews of a product, with the `verified` flag derived from orders:
    a review is verified when its author ordered the reviewed product.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        self.col = db["reviews"]
        self.order_products = db["order_products"]
        self.orders = db["orders"]

    def _buyers_pipeline(self, match: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        pipeline: List[Dict[str, Any]] = [{"$match": match}] if match else []
        pipeline += [
            {"$lookup": {
                "from": self.orders.name,
                "localField": "order_id",
                "foreignField": "order_id",
                "as": "order",
            }},
            {"$unwind": "$order"},
        ]
        return pipeline

    async def get_buyer_ids(self, product_id: int) -> Set[int]:
        pipeline = self._buyers_pipeline({"product_id": product_id}) + [
            {"$group": {"_id": "$order.client_id"}},
        ]
        docs = await self.order_products.aggregate(pipeline).to_list(length=None)
        return {d["_id"] for d in docs if d.get("_id") is not None}

    async def get_purchases(self) -> Set[Tuple[int, int]]:
        """(client_id, product_id) pairs over every order."""
        pipeline = self._buyers_pipeline() + [
            {"$group": {"_id": {"client_id": "$order.client_id", "product_id": "$product_id"}}},
        ]
        docs = await self.order_products.aggregate(pipeline).to_list(length=None)
        return {(d["_id"].get("client_id"), d["_id"].get("product_id")) for d in docs}

    async def get_for_product(self, product_id: int) -> List[Review]:
        """Newest reviews first."""
        buyers = await self.get_buyer_ids(product_id)
        cursor = self.col.find({"product_id": product_id}, {"_id": 0}).sort("created_at", -1)
        return [
            Review.model_validate({**doc, "verified": doc.get("client_id") in buyers})
            async for doc in cursor
        ]

    async def get_all(self, newest_first: bool = False, limit: Optional[int] = None) -> List[Review]:
        """Every review, in `review_id` order unless `newest_first`; at most `limit` of them."""
        purchases = await self.get_purchases()
        cursor = self.col.find({}, {"_id": 0})
        cursor = cursor.sort("created_at", -1) if newest_first else cursor.sort("review_id", 1)
        if limit:
            cursor = cursor.limit(limit)
        return [
            Review.model_validate({
                **doc,
                "verified": (doc.get("client_id"), doc.get("product_id")) in purchases,
            })
            async for doc in cursor
        ]

    async def get_by_review_id(self, review_id: int) -> Optional[Review]:
        doc = await self.col.find_one({"review_id": review_id}, {"_id": 0})
        if doc is None:
            return None
        buyers = await self.get_buyer_ids(doc.get("product_id"))
        return Review.model_validate({**doc, "verified": doc.get("client_id") in buyers})

    async def get_count_per_month(self) -> List[MonthlyReviewCount]:
        """Review counts grouped by calendar month (UTC), oldest month first."""
        pipeline = [
            {"$group": {
                "_id": {"$dateToString": {"format": "%Y-%m-01", "date": "$created_at"}},
                "total_reviews": {"$sum": 1},
            }},
            {"$sort": {"_id": 1}},
        ]
        docs = await self.col.aggregate(pipeline).to_list(length=None)
        return [
            MonthlyReviewCount(month=date.fromisoformat(d["_id"]), total_reviews=d["total_reviews"])
            for d in docs
            if d.get("_id")
        ]
