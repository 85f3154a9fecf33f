# app/db/mongo.py
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from app.core.config import get_settings
import certifi
import logging

logger = logging.getLogger(__name__)

_client: AsyncIOMotorClient | None = None
_db: AsyncIOMotorDatabase | None = None


def get_db() -> AsyncIOMotorDatabase:
    assert _db is not None, "Mongo DB not initialized"
    return _db


def _new_client(uri: str) -> AsyncIOMotorClient:
    kwargs = dict(
        uuidRepresentation="standard",
        tz_aware=True,                      # created_at comparisons need aware datetimes
        serverSelectionTimeoutMS=6000,
        connectTimeoutMS=6000,
    )
    if uri.startswith("mongodb+srv://"):
        # Atlas: explicit CA bundle for slim containers
        kwargs.update(tls=True, tlsCAFile=certifi.where())
    return AsyncIOMotorClient(uri, **kwargs)


async def connect():
    """
    Create the Motor client and ping once.
    A failed ping keeps the lazy client: the first real query retries the connection.
    """
    global _client, _db
    settings = get_settings()
    _client = _new_client(settings.MONGO_URI)
    _db = _client[settings.MONGO_DB]
    try:
        await _client.admin.command("ping")
        logger.info("Mongo connected db=%s", settings.MONGO_DB)
    except Exception as e:
        logger.warning("Mongo ping at startup failed, will connect lazily: %s", e)


async def disconnect():
    global _client, _db
    if _client:
        _client.close()
    _client = None
    _db = None
