# app/api/deps.py
from fastapi import Depends
from app.db.mongo import get_db
from app.db.redis import get_redis
from app.domain.repositories.comment_repo import CommentRepo
from app.domain.repositories.product_repo import ProductRepo
from app.domain.repositories.review_repo import ReviewRepo

# Dependency for injecting the MongoDB database into endpoints/services
async def mongo_db(db = Depends(get_db)):
    return db

# Dependency for injecting the Redis client (None when not configured)
def redis_dep():
    return get_redis()

# Repositories: overridden with in-memory fakes in tests
def product_repo_dep(db = Depends(mongo_db)) -> ProductRepo:
    return ProductRepo(db)

def review_repo_dep(db = Depends(mongo_db)) -> ReviewRepo:
    return ReviewRepo(db)

def comment_repo_dep(db = Depends(mongo_db)) -> CommentRepo:
    return CommentRepo(db)
