"""
Health check router for liveness and readiness probes.
"""
import logging

from fastapi import APIRouter, status

from tradejournal.database.connections import get_database, get_redis_client
from tradejournal.database.databases.journal_db import COUNTERS_DOC_ID, Collections

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Liveness check",
)
async def health_check():
    """Returns 200 while the API process is up."""
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check():
    """
    Readiness check covering the journal database, the identifier
    counters and Redis. Always answers 200; ``status`` is "degraded" when
    any check fails.
    """
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
        "counters": "unknown",
        "redis": "unknown",
    }

    try:
        db = await get_database()
        await db.command("ping")
        checks["mongodb"] = "healthy"

        counters = await db[Collections.SYSTEM].find_one({"_id": COUNTERS_DOC_ID})
        checks["counters"] = "healthy" if counters else "unhealthy: not initialized"
    except Exception as e:
        logger.warning("MongoDB readiness check failed: %s", e)
        checks["mongodb"] = f"unhealthy: {e}"
        checks["counters"] = "unhealthy: database unreachable"

    try:
        redis = await get_redis_client()
        await redis.ping()
        checks["redis"] = "healthy"
    except Exception as e:
        logger.warning("Redis readiness check failed: %s", e)
        checks["redis"] = f"unhealthy: {e}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
