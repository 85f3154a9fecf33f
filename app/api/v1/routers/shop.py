# app/api/v1/routers/shop.py
from fastapi import APIRouter, Depends, Query
from typing import List, Optional
import time

from app.api.deps import product_repo_dep, redis_dep
from app.domain.models.query import QueryParams
from app.domain.services.shop_svc import get_categories_svc, get_shop_page_svc

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["shop"])

@router.get("/shop/products", summary="Search, filter, sort and paginate the product catalog")
async def shop_products(
    keyword: Optional[str] = Query(None, description="Fuzzy-matched against product names"),
    categories: Optional[List[str]] = Query(None, description="Repeatable; empty means all categories"),
    sort: Optional[str] = Query(None, description="newest | priceAsc | priceDesc | ratingAsc | ratingDesc"),
    page: Optional[str] = Query(None, description="1-based page number, clamped to the available pages"),
    product_repo = Depends(product_repo_dep),
    redis = Depends(redis_dep),
):
    """
    Raw query strings are parsed leniently: unknown sort -> catalog order,
    invalid page -> first page.
    """
    params = QueryParams.from_raw(keyword=keyword, categories=categories, sort=sort, page=page)
    logger.info("Request: shop_products params=%s", params.cache_fingerprint())

    start_time = time.perf_counter()
    res = await get_shop_page_svc(product_repo, redis, params)
    logger.info(
        "Response: shop_products count=%s total=%s page=%s/%s elapsed_time=%.4fs",
        len(res.items), res.total_items, res.page, res.total_pages, time.perf_counter() - start_time,
    )
    return res.model_dump(mode="json")

@router.get("/products/categories", summary="Distinct product categories")
async def product_categories(
    product_repo = Depends(product_repo_dep),
    redis = Depends(redis_dep),
):
    categories = await get_categories_svc(product_repo, redis)
    logger.info("Response: product_categories count=%s", len(categories))
    return categories
