"""
Server-side sessions kept in Redis.

A session maps a random session ID to the account ID that logged in.
Tokens handed to clients carry the session ID, so logging out (deleting the
key) invalidates the token before it expires.
"""
import logging
import secrets
from typing import Optional

from redis.asyncio import Redis

logger = logging.getLogger(__name__)

SESSION_KEY_PREFIX = "session"


class SessionStore:
    """Create, resolve and revoke sessions."""

    def __init__(self, redis: Redis, ttl_seconds: int):
        self.redis = redis
        self.ttl_seconds = ttl_seconds

    @staticmethod
    def _key(session_id: str) -> str:
        return f"{SESSION_KEY_PREFIX}:{session_id}"

    async def create(self, user_id: int) -> str:
        """Start a session for ``user_id`` and return its ID."""
        session_id = secrets.token_urlsafe(32)
        await self.redis.setex(self._key(session_id), self.ttl_seconds, str(user_id))
        logger.info("Session started for user %d", user_id)
        return session_id

    async def get_user_id(self, session_id: str) -> Optional[int]:
        """Account ID of a live session, or None if expired or revoked."""
        value = await self.redis.get(self._key(session_id))
        if value is None:
            return None
        return int(value)

    async def revoke(self, session_id: str) -> bool:
        deleted = await self.redis.delete(self._key(session_id))
        return deleted > 0
