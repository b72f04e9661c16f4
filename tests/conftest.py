"""
Global test fixtures for the trade journal backend.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Mock Redis (fakeredis)
- Request payload factories
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_journal_db(mock_async_mongo_client):
    """Provide mock journal_db database with the real indexes."""
    from tradejournal.database.registry import create_indexes

    db = mock_async_mongo_client["journal_db"]
    await create_indexes(db)
    yield db


@pytest_asyncio.fixture
async def storage(mock_journal_db):
    """Record stores over the mock journal database."""
    from tradejournal.storage import JournalStorage
    return JournalStorage(mock_journal_db)


# =============================================================================
# Redis Fixtures (fakeredis)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_redis():
    """
    Create an async mock Redis client using fakeredis.
    """
    import fakeredis.aioredis
    redis_client = fakeredis.aioredis.FakeRedis(decode_responses=True)
    yield redis_client
    await redis_client.flushall()
    await redis_client.aclose()


@pytest_asyncio.fixture
async def session_store(mock_async_redis):
    from tradejournal.core.sessions import SessionStore
    return SessionStore(mock_async_redis, ttl_seconds=3600)


# =============================================================================
# Payload Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "username": "alice",
        "email": "a@x.com",
        "password": "SecurePassword123!",
    }


@pytest.fixture
def make_user_create():
    """Factory for UserCreate payloads with an already-hashed password."""
    from tradejournal.schemas.user import UserCreate

    def _make(username: str = "alice", email: str = "a@x.com", **kwargs):
        return UserCreate(
            username=username,
            email=email,
            password=kwargs.pop("password", "$2b$12$notarealhashnotarealhashnotarealhashnotarealhash"),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_trade_create():
    """Factory for TradeCreate payloads."""
    from tradejournal.schemas.trade import TradeCreate

    def _make(**overrides):
        data = {
            "instrument": "AAPL",
            "direction": "long",
            "entry_price": 185.5,
            "entry_date": datetime(2024, 3, 1, 14, 30, tzinfo=timezone.utc),
        }
        data.update(overrides)
        return TradeCreate(**data)

    return _make
