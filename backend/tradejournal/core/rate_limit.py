"""
Fixed-window rate limiting backed by Redis.
"""
import logging

from redis.asyncio import Redis

logger = logging.getLogger(__name__)


async def check_rate_limit(
    redis: Redis,
    ip: str,
    endpoint: str,
    limit: int,
    window_seconds: int,
) -> bool:
    """
    Count a request and check it against the limit.

    Key pattern: "ratelimit:{endpoint}:{ip}", INCR with EXPIRE on the first
    hit of each window.

    Args:
        redis: Redis client
        ip: Client IP address
        endpoint: Endpoint identifier (e.g., "/api/auth/login")
        limit: Max requests allowed per window
        window_seconds: Window length in seconds

    Returns:
        True if request is allowed, False if rate limited
    """
    key = f"ratelimit:{endpoint}:{ip}"
    current = await redis.incr(key)
    if current == 1:
        await redis.expire(key, window_seconds)

    if current > limit:
        logger.warning("Rate limit exceeded on %s for %s", endpoint, ip)
        return False
    return True


async def reset_rate_limit(redis: Redis, ip: str, endpoint: str) -> None:
    """Clear the counter, e.g. after a successful login."""
    await redis.delete(f"ratelimit:{endpoint}:{ip}")
