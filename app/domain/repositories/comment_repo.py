# app/domain/repositories/comment_repo.py

from __future__ import annotations
from typing import Iterable, List
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.domain.models.comment import Comment

class CommentRepo:
    """Flat comment records; threading is rebuilt by the comment tree service."""

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "comments"):
        self.col = db[collection_name]

    async def get_for_reviews(self, review_ids: Iterable[int]) -> List[Comment]:
        """Comments of the given reviews, oldest first."""
        ids = list(review_ids)
        if not ids:
            return []
        cursor = self.col.find({"review_id": {"$in": ids}}, {"_id": 0}).sort(
            [("created_at", 1), ("comment_id", 1)]
        )
        return [Comment.model_validate(doc) async for doc in cursor]
