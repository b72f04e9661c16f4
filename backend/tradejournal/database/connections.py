"""
Process-wide MongoDB and Redis clients.

Both clients are created lazily on first use and shared by all requests.
``close_connections`` runs on application shutdown.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from redis.asyncio import Redis

from tradejournal.config import get_settings

logger = logging.getLogger(__name__)

_mongo_client: Optional[AsyncIOMotorClient] = None
_redis_client: Optional[Redis] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """Shared MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        )
        logger.info("MongoDB client created")
    return _mongo_client


async def get_database() -> AsyncIOMotorDatabase:
    """The journal database holding users, trades, collections and counters."""
    client = await get_mongo_client()
    return client[get_settings().mongo_db_name]


async def get_redis_client() -> Redis:
    """Shared Redis client used for sessions and rate limits."""
    global _redis_client
    if _redis_client is None:
        settings = get_settings()
        _redis_client = Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            db=settings.redis_db,
            decode_responses=True,
        )
        logger.info("Redis client created for %s:%d", settings.redis_host, settings.redis_port)
    return _redis_client


async def close_connections() -> None:
    global _mongo_client, _redis_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None

    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None
