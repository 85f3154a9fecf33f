from fastapi import FastAPI
from app.core.config import get_settings
from app.core.lifespan import lifespan
from app.api.v1.routers.health import router as health_router
from app.api.v1.routers.shop import router as shop_router
from app.api.v1.routers.stats import router as stats_router
from app.api.v1.routers.product_page import router as product_page_router
from app.api.v1.routers.reviews import router as reviews_router
from app.core.logging import configure_logging

from fastapi.middleware.cors import CORSMiddleware
import os

settings = get_settings()
configure_logging(settings)

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# ------- CORS -------
# ALLOWED_ORIGINS is a CSV list, e.g. "https://steamy.example,https://www.steamy.example"
allowed_origins_env = os.getenv("ALLOWED_ORIGINS", "")
allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
    max_age=86400,
)

# ------- Routes -------
# static /products/... paths are registered before /products/{product_id}
app.include_router(health_router)
app.include_router(shop_router)              # shop listing + categories
app.include_router(stats_router)             # dashboard stats
app.include_router(product_page_router)      # product details + review threads
app.include_router(reviews_router)           # review listings + monthly stats
