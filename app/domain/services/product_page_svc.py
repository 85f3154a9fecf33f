import time
import logging
from typing import Dict, List, Optional, Sequence
from app.core.config import Settings, get_settings
from app.domain.models.comment import Comment
from app.domain.models.pages import ProductPage, ReviewThread
from app.domain.models.product import Product
from app.domain.models.query import ReviewFilter
from app.domain.models.review import Review
from app.domain.services.comment_tree import build_comment_thread
from app.domain.services.pagination import paginate_items, page_navigation
from app.domain.services.rating_svc import filter_reviews, rating_chart_series, rating_distribution

logger = logging.getLogger(__name__)

def build_product_page(
    product: Product,
    reviews: Sequence[Review],
    comments: Sequence[Comment],
    *,
    review_filter: ReviewFilter,
    page: int,
    page_size: int,
) -> ProductPage:
    """
    Assemble a product page from materialized records (no I/O).
    The rating distribution covers every review; the filter only affects the listing.
    """
    matching = filter_reviews(reviews, review_filter)
    result = paginate_items(matching, page_size, page)

    by_review: Dict[int, List[Comment]] = {}
    for c in comments:
        by_review.setdefault(c.review_id, []).append(c)

    threads = [
        ReviewThread(review=r, comments=build_comment_thread(by_review.get(r.review_id, []), r.review_id))
        for r in result.items
    ]
    distribution = rating_distribution(reviews)
    return ProductPage(
        product=product,
        reviews=threads,
        page=result.page,
        total_pages=result.total_pages,
        total_reviews=result.total_items,
        navigation=page_navigation(result.total_pages, result.page),
        current_review_filter=review_filter,
        rating_distribution=distribution,
        rating_chart=rating_chart_series(distribution),
    )

async def get_product_page_svc(
    product_repo,
    review_repo,
    comment_repo,
    product_id: int,
    *,
    review_filter: ReviewFilter = ReviewFilter.ALL,
    page: int = 1,
    settings: Optional[Settings] = None,
) -> Optional[ProductPage]:
    """Product page with paginated reviews and their comment threads. None if the product does not exist."""
    t0 = time.perf_counter()
    settings = settings or get_settings()
    logger.info("product_page start product_id=%s filter=%s page=%s", product_id, review_filter.value, page)

    product = await product_repo.get_by_product_id(product_id)
    if product is None:
        logger.info("product_page not_found product_id=%s", product_id)
        return None

    reviews = await review_repo.get_for_product(product_id)
    # only the comments of the reviews shown on this page are needed
    matching = filter_reviews(reviews, review_filter)
    shown = paginate_items(matching, settings.reviews_per_page, page)
    shown_ids = [r.review_id for r in shown.items]
    comments = await comment_repo.get_for_reviews(shown_ids)

    result = build_product_page(
        product,
        reviews,
        comments,
        review_filter=review_filter,
        page=page,
        page_size=settings.reviews_per_page,
    )
    logger.info(
        "product_page done product_id=%s reviews=%s comments=%s total_time=%.3fs",
        product_id, len(reviews), len(comments), time.perf_counter() - t0,
    )
    return result
