from typing import List, Sequence
from app.domain.models.product import Product
from app.domain.models.query import QueryParams
from app.domain.services.constants import KEYWORD_DISTANCE_THRESHOLD
from app.domain.services.filters import match_category, match_keyword
from app.domain.services.ranking import sort_products

import logging
logger = logging.getLogger(__name__)

def filter_catalog(
    catalog: Sequence[Product],
    params: QueryParams,
    threshold: int = KEYWORD_DISTANCE_THRESHOLD,
) -> List[Product]:
    """Keyword filter then category filter; catalog order is preserved."""
    matched = [p for p in catalog if match_keyword(p.name, params.keyword, threshold)]
    return [p for p in matched if match_category(p.category, params.categories)]

def run_catalog_query(
    catalog: Sequence[Product],
    params: QueryParams,
    threshold: int = KEYWORD_DISTANCE_THRESHOLD,
) -> List[Product]:
    """
    Turn a catalog snapshot and query parameters into the ordered candidate list.
    Pagination is applied separately by the caller.
    """
    filtered = filter_catalog(catalog, params, threshold)
    result = sort_products(filtered, params.sort)
    logger.debug(
        "catalog_query keyword=%r categories=%s sort=%r in=%d out=%d",
        params.keyword, sorted(params.categories), params.sort.value, len(catalog), len(result),
    )
    return result
