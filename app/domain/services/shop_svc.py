import time
import logging
from typing import List, Optional
from app.core.config import Settings, get_settings
from app.domain.models.pages import ShopPage
from app.domain.models.product import Product
from app.domain.models.query import QueryParams
from app.domain.services.catalog_query_svc import run_catalog_query
from app.domain.services.constants import CACHE_PREFIX_CATEGORIES, CACHE_PREFIX_SHOP
from app.domain.services.pagination import paginate_items, page_navigation
from app.utils.cache import cache_get, cache_key, cache_set

logger = logging.getLogger(__name__)

def build_shop_page(
    catalog: List[Product],
    params: QueryParams,
    *,
    page_size: int,
    threshold: int,
    categories: Optional[List[str]] = None,
) -> ShopPage:
    """Filter, sort and paginate a catalog snapshot (no I/O)."""
    ordered = run_catalog_query(catalog, params, threshold)
    result = paginate_items(ordered, page_size, params.page)
    return ShopPage(
        items=result.items,
        page=result.page,
        total_pages=result.total_pages,
        total_items=result.total_items,
        page_size=result.page_size,
        navigation=page_navigation(result.total_pages, result.page),
        query=params,
        categories=categories or [],
    )

async def get_categories_svc(product_repo, redis, settings: Optional[Settings] = None) -> List[str]:
    settings = settings or get_settings()
    key = f"{CACHE_PREFIX_CATEGORIES}:all"
    cached = await cache_get(redis, key)
    if isinstance(cached, list):
        logger.debug("categories cache_hit key=%s", key)
        return cached
    categories = await product_repo.get_categories()
    await cache_set(redis, key, categories, ex=settings.categories_cache_ttl)
    return categories

async def get_shop_page_svc(product_repo, redis, params: QueryParams, settings: Optional[Settings] = None) -> ShopPage:
    """
    Shop listing: catalog snapshot -> keyword/category filters -> sort -> page.
    Whole pages are cached in Redis per parsed query (when Redis is available).
    """
    t0 = time.perf_counter()
    settings = settings or get_settings()
    logger.info(
        "shop_page start keyword=%r categories=%s sort=%r page=%s",
        params.keyword, sorted(params.categories), params.sort.value, params.page,
    )

    key = cache_key(CACHE_PREFIX_SHOP, {
        **params.cache_fingerprint(),
        "size": settings.products_per_page,
        "threshold": settings.keyword_distance_threshold,
    })
    cached = await cache_get(redis, key)
    if cached:
        try:
            # the key ignores keyword case: echo this request, not the one that filled the cache
            page = ShopPage.model_validate(cached).model_copy(update={"query": params})
            logger.info("shop_page cache_hit key=%s items=%s", key, len(page.items))
            return page
        except ValueError as e:
            logger.warning("shop_page cache decode error key=%s err=%s", key, e)

    logger.info("shop_page cache_miss key=%s", key)

    db_t0 = time.perf_counter()
    catalog = await product_repo.get_all()
    logger.info("shop_page db_ok products=%s db_time=%.3fs", len(catalog), time.perf_counter() - db_t0)

    page = build_shop_page(
        catalog,
        params,
        page_size=settings.products_per_page,
        threshold=settings.keyword_distance_threshold,
        categories=await get_categories_svc(product_repo, redis, settings),
    )

    await cache_set(redis, key, page.model_dump(mode="json"), ex=settings.shop_cache_ttl)
    logger.info(
        "shop_page done items=%s total=%s page=%s/%s total_time=%.3fs",
        len(page.items), page.total_items, page.page, page.total_pages, time.perf_counter() - t0,
    )
    return page
