# app/api/v1/routers/reviews.py
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional
import time

from app.api.deps import product_repo_dep, review_repo_dep
from app.domain.services.reviews_svc import (
    get_product_reviews_svc,
    get_review_count_over_time_svc,
    list_reviews_svc,
)

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["reviews"])

@router.get("/reviews", summary="All reviews")
async def list_reviews(
    order_by: Optional[str] = Query(None, description="created_date: newest first"),
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of reviews"),
    review_repo = Depends(review_repo_dep),
):
    logger.info("Request: reviews order_by=%s limit=%s", order_by, limit)
    reviews = await list_reviews_svc(review_repo, order_by=order_by, limit=limit)
    return [r.model_dump(mode="json") for r in reviews]

@router.get("/reviews/stats/count-over-time", summary="Reviews per month with month-over-month change")
async def review_count_over_time(review_repo = Depends(review_repo_dep)):
    t0 = time.perf_counter()
    rows = await get_review_count_over_time_svc(review_repo)
    logger.info("Response: review_count_over_time returned %s months in %.4fs", len(rows), time.perf_counter() - t0)
    return [r.model_dump(mode="json") for r in rows]

@router.get("/reviews/{review_id:int}", summary="Review details")
async def get_review(review_id: int, review_repo = Depends(review_repo_dep)):
    review = await review_repo.get_by_review_id(review_id)
    if review is None:
        raise HTTPException(status_code=404, detail="Review not found")
    return review.model_dump(mode="json")

@router.get("/products/{product_id:int}/reviews", summary="Reviews of a product, newest first")
async def product_reviews(
    product_id: int,
    product_repo = Depends(product_repo_dep),
    review_repo = Depends(review_repo_dep),
):
    t0 = time.perf_counter()
    reviews = await get_product_reviews_svc(product_repo, review_repo, product_id)
    if reviews is None:
        raise HTTPException(status_code=404, detail="Product not found")
    logger.info(
        "Response: product_reviews product_id=%s reviews=%s elapsed_time=%.4fs",
        product_id, len(reviews), time.perf_counter() - t0,
    )
    return [r.model_dump(mode="json") for r in reviews]
