# app/core/lifespan.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.db import mongo, redis as r
from app.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    # Mongo is the catalog source: required when configured
    if settings.MONGO_URI:
        try:
            await mongo.connect()
        except Exception as e:
            logger.error("Mongo connection failed: %s", e)
            raise
    else:
        logger.warning("No MONGO_URI provided, skipping Mongo connection")

    # Redis is optional (cache only); connect() never raises
    await r.connect()

    yield

    # --- Shutdown ---
    await r.disconnect()
    if settings.MONGO_URI:
        await mongo.disconnect()
        logger.info("Mongo disconnected")
