# app/api/v1/routers/stats.py
from fastapi import APIRouter, Depends
import time

from app.api.deps import product_repo_dep
from app.domain.services.stats_svc import get_sales_per_category_svc

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["stats"])

@router.get("/products/stats/sales-per-category")
async def sales_per_category(product_repo = Depends(product_repo_dep)):
    t0 = time.perf_counter()
    result = await get_sales_per_category_svc(product_repo)
    logger.info("Response: sales_per_category returned %s rows in %.4fs", len(result), time.perf_counter() - t0)
    return result
