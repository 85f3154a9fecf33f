import time
import logging
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

async def get_sales_per_category_svc(product_repo) -> List[Dict[str, Any]]:
    """Units sold per category, shaped as [{category, units_sold}] for the dashboard chart."""
    t0 = time.perf_counter()
    rows = await product_repo.get_sales_per_category()
    logger.info("sales_per_category done categories=%s time=%.3fs", len(rows), time.perf_counter() - t0)
    return [r.model_dump() for r in rows]
