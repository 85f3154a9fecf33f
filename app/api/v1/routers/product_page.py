# app/api/v1/routers/product_page.py
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional
import time

from app.api.deps import comment_repo_dep, product_repo_dep, review_repo_dep
from app.domain.models.query import ReviewFilter, parse_page
from app.domain.services.product_page_svc import get_product_page_svc

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])

@router.get("/products", summary="All products, catalog order")
async def list_products(product_repo = Depends(product_repo_dep)):
    products = await product_repo.get_all()
    logger.info("Response: products returned %s items", len(products))
    return [p.model_dump(mode="json") for p in products]

@router.get("/products/{product_id:int}", summary="Product details")
async def get_product(
    product_id: int,
    product_repo = Depends(product_repo_dep),
):
    product = await product_repo.get_by_product_id(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product.model_dump(mode="json")

@router.get("/shop/products/{product_id:int}", summary="Product page: reviews, comment threads and rating distribution")
async def product_page(
    product_id: int,
    filter_review: Optional[str] = Query(None, alias="filter-review", description="all-reviews | verified-reviews"),
    page: Optional[str] = Query(None, description="Review page, 1-based"),
    product_repo = Depends(product_repo_dep),
    review_repo = Depends(review_repo_dep),
    comment_repo = Depends(comment_repo_dep),
):
    review_filter = ReviewFilter.parse(filter_review)
    logger.info(
        "Request: product_page product_id=%s filter=%s page=%s",
        product_id, review_filter.value, page,
    )

    start_time = time.perf_counter()
    res = await get_product_page_svc(
        product_repo,
        review_repo,
        comment_repo,
        product_id,
        review_filter=review_filter,
        page=parse_page(page),
    )
    if res is None:
        raise HTTPException(status_code=404, detail="Product does not exist.")

    logger.info(
        "Response: product_page product_id=%s reviews=%s page=%s/%s elapsed_time=%.4fs",
        product_id, len(res.reviews), res.page, res.total_pages, time.perf_counter() - start_time,
    )
    return res.model_dump(mode="json")
