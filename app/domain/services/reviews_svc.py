import time
import logging
from typing import List, Optional, Sequence
from app.domain.models.review import MonthlyReviewCount, Review

logger = logging.getLogger(__name__)

ORDER_BY_CREATED = "created_date"

def month_over_month(rows: Sequence[MonthlyReviewCount]) -> List[MonthlyReviewCount]:
    """
    Fill `percentage_difference` of each month against the previous listed month,
    rounded to 2 decimals. The first month, and a month following a 0 count, get None.
    """
    out: List[MonthlyReviewCount] = []
    previous: Optional[int] = None
    for row in rows:
        diff = None
        if previous:
            diff = round((row.total_reviews - previous) * 100.0 / previous, 2)
        out.append(row.model_copy(update={"percentage_difference": diff}))
        previous = row.total_reviews
    return out

async def list_reviews_svc(review_repo, order_by: Optional[str] = None, limit: Optional[int] = None) -> List[Review]:
    """All reviews; `order_by=created_date` lists the newest first. Other values keep id order."""
    newest_first = order_by == ORDER_BY_CREATED
    if order_by and not newest_first:
        logger.debug("reviews ignoring order_by=%r", order_by)
    t0 = time.perf_counter()
    reviews = await review_repo.get_all(newest_first=newest_first, limit=limit)
    logger.info("reviews list done count=%s newest_first=%s limit=%s time=%.3fs",
                len(reviews), newest_first, limit, time.perf_counter() - t0)
    return reviews

async def get_product_reviews_svc(product_repo, review_repo, product_id: int) -> Optional[List[Review]]:
    """Reviews of a product, newest first. None if the product does not exist."""
    product = await product_repo.get_by_product_id(product_id)
    if product is None:
        logger.info("product_reviews not_found product_id=%s", product_id)
        return None
    return await review_repo.get_for_product(product_id)

async def get_review_count_over_time_svc(review_repo) -> List[MonthlyReviewCount]:
    t0 = time.perf_counter()
    rows = month_over_month(await review_repo.get_count_per_month())
    logger.info("review_count_over_time done months=%s time=%.3fs", len(rows), time.perf_counter() - t0)
    return rows
