"""
Storage and session dependencies for route handlers.
"""
from fastapi import Depends
from redis.asyncio import Redis

from tradejournal.config import get_settings
from tradejournal.core.sessions import SessionStore
from tradejournal.database.connections import get_database, get_redis_client
from tradejournal.storage import JournalStorage


async def get_storage() -> JournalStorage:
    """Dependency to get the record stores over the journal database."""
    db = await get_database()
    return JournalStorage(db)


async def get_redis() -> Redis:
    """Dependency to get the Redis client."""
    return await get_redis_client()


async def get_session_store(redis: Redis = Depends(get_redis)) -> SessionStore:
    """Dependency to get the Redis-backed session store."""
    ttl_seconds = get_settings().jwt_access_token_expire_minutes * 60
    return SessionStore(redis, ttl_seconds)
