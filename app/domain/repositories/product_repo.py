# app/domain/repositories/product_repo.py

from __future__ import annotations
from typing import Any, Dict, List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.domain.models.product import CategorySales, Product

PRODUCT_PROJECTION = {
    "_id": 0,
    "product_id": 1,
    "name": 1,
    "category": 1,
    "price": 1,
    "calories": 1,
    "created_at": 1,
    "description": 1,
    "img_url": 1,
    "img_alt_text": 1,
}

class ProductRepo:
    """
    Product repository backed by the 'products' collection.
    `average_rating` is not stored: it is derived from the 'reviews' collection.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "products"):
        self.col = db[collection_name]
        self.reviews = db["reviews"]
        self.order_products = db["order_products"]

    def _with_rating_pipeline(self, match: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        pipeline: List[Dict[str, Any]] = []
        if match:
            pipeline.append({"$match": match})
        pipeline += [
            # catalog-fetch order: stable sorts downstream rely on it
            {"$sort": {"product_id": 1}},
            {"$lookup": {
                "from": self.reviews.name,
                "localField": "product_id",
                "foreignField": "product_id",
                "as": "_reviews",
            }},
            {"$addFields": {"average_rating": {"$ifNull": [{"$avg": "$_reviews.rating"}, 0]}}},
            {"$project": {**PRODUCT_PROJECTION, "average_rating": 1}},
        ]
        return pipeline

    async def get_all(self) -> List[Product]:
        docs = await self.col.aggregate(self._with_rating_pipeline()).to_list(length=None)
        return [Product.model_validate(d) for d in docs]

    async def get_by_product_id(self, product_id: int) -> Optional[Product]:
        docs = await self.col.aggregate(self._with_rating_pipeline({"product_id": product_id})).to_list(length=1)
        return Product.model_validate(docs[0]) if docs else None

    async def get_categories(self) -> List[str]:
        categories = await self.col.distinct("category")
        return sorted(c for c in categories if c)

    async def get_sales_per_category(self) -> List[CategorySales]:
        """Units sold per product category (ordered lines joined on products)."""
        pipeline = [
            {"$lookup": {
                "from": self.col.name,
                "localField": "product_id",
                "foreignField": "product_id",
                "as": "prod",
            }},
            {"$unwind": {"path": "$prod", "preserveNullAndEmptyArrays": False}},
            {"$group": {"_id": "$prod.category", "units_sold": {"$sum": 1}}},
            {"$sort": {"_id": 1}},
            {"$project": {"_id": 0, "category": "$_id", "units_sold": 1}},
        ]
        docs = await self.order_products.aggregate(pipeline).to_list(length=None)
        return [CategorySales.model_validate(d) for d in docs]
