"""
Tests for authentication: password hashing, session tokens, the Redis
session store, rate limiting and AuthService.
"""

from datetime import timedelta

import pytest


# =============================================================================
# Password Hashing Tests (tradejournal.core.security)
# =============================================================================

class TestPasswordHashing:
    """Tests for password hashing functions."""

    def test_hash_password_returns_bcrypt_hash(self):
        from tradejournal.core.security import hash_password

        hashed = hash_password("TestPassword123!")

        assert hashed.startswith("$2b$")
        assert hashed != "TestPassword123!"

    def test_verify_password(self):
        from tradejournal.core.security import hash_password, verify_password

        hashed = hash_password("TestPassword123!")

        assert verify_password("TestPassword123!", hashed) is True
        assert verify_password("WrongPassword123!", hashed) is False

    def test_hash_password_different_each_time(self):
        from tradejournal.core.security import hash_password

        assert hash_password("TestPassword123!") != hash_password("TestPassword123!")


# =============================================================================
# Token Tests
# =============================================================================

class TestAccessToken:
    """Tests for session-bound JWTs."""

    def test_token_carries_user_and_session(self):
        from tradejournal.core.security import create_access_token, decode_token

        token = create_access_token(user_id=7, session_id="abc")
        payload = decode_token(token)

        assert payload["sub"] == "7"
        assert payload["sid"] == "abc"
        assert "exp" in payload

    def test_expired_token_rejected(self):
        from jose import JWTError

        from tradejournal.core.security import create_access_token, decode_token

        token = create_access_token(7, "abc", expires_delta=timedelta(seconds=-10))

        with pytest.raises(JWTError):
            decode_token(token)

    def test_tampered_token_rejected(self):
        from jose import JWTError

        from tradejournal.core.security import create_access_token, decode_token

        token = create_access_token(7, "abc")

        with pytest.raises(JWTError):
            decode_token(token[:-4] + "AAAA")


# =============================================================================
# Session Store Tests
# =============================================================================

class TestSessionStore:
    """Tests for Redis-backed sessions."""

    @pytest.mark.asyncio
    async def test_create_and_resolve(self, session_store):
        session_id = await session_store.create(42)

        assert await session_store.get_user_id(session_id) == 42

    @pytest.mark.asyncio
    async def test_session_has_ttl(self, session_store, mock_async_redis):
        session_id = await session_store.create(42)

        ttl = await mock_async_redis.ttl(f"session:{session_id}")
        assert 0 < ttl <= 3600

    @pytest.mark.asyncio
    async def test_sessions_are_unique(self, session_store):
        first = await session_store.create(1)
        second = await session_store.create(1)

        assert first != second

    @pytest.mark.asyncio
    async def test_revoke(self, session_store):
        session_id = await session_store.create(42)

        assert await session_store.revoke(session_id) is True
        assert await session_store.get_user_id(session_id) is None
        assert await session_store.revoke(session_id) is False

    @pytest.mark.asyncio
    async def test_unknown_session(self, session_store):
        assert await session_store.get_user_id("nope") is None


# =============================================================================
# Rate Limit Tests
# =============================================================================

class TestRateLimit:
    """Tests for fixed-window rate limiting."""

    @pytest.mark.asyncio
    async def test_allows_up_to_limit(self, mock_async_redis):
        from tradejournal.core.rate_limit import check_rate_limit

        results = [
            await check_rate_limit(mock_async_redis, "1.2.3.4", "/login", limit=3, window_seconds=60)
            for _ in range(4)
        ]

        assert results == [True, True, True, False]

    @pytest.mark.asyncio
    async def test_window_expiry_is_set(self, mock_async_redis):
        from tradejournal.core.rate_limit import check_rate_limit

        await check_rate_limit(mock_async_redis, "1.2.3.4", "/login", limit=3, window_seconds=60)

        ttl = await mock_async_redis.ttl("ratelimit:/login:1.2.3.4")
        assert 0 < ttl <= 60

    @pytest.mark.asyncio
    async def test_limits_are_per_ip(self, mock_async_redis):
        from tradejournal.core.rate_limit import check_rate_limit

        await check_rate_limit(mock_async_redis, "1.1.1.1", "/login", limit=1, window_seconds=60)

        assert await check_rate_limit(
            mock_async_redis, "2.2.2.2", "/login", limit=1, window_seconds=60
        ) is True

    @pytest.mark.asyncio
    async def test_reset(self, mock_async_redis):
        from tradejournal.core.rate_limit import check_rate_limit, reset_rate_limit

        await check_rate_limit(mock_async_redis, "1.1.1.1", "/login", limit=1, window_seconds=60)
        await reset_rate_limit(mock_async_redis, "1.1.1.1", "/login")

        assert await check_rate_limit(
            mock_async_redis, "1.1.1.1", "/login", limit=1, window_seconds=60
        ) is True


# =============================================================================
# AuthService Tests
# =============================================================================

@pytest.fixture
def auth_service(storage, session_store):
    from tradejournal.services.auth_service import AuthService
    return AuthService(storage, session_store)


@pytest.fixture
def register_request(test_user_data):
    from tradejournal.schemas.auth import RegisterRequest
    return RegisterRequest(**test_user_data)


class TestAuthService:
    """Tests for registration, login and session resolution."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, auth_service, register_request, test_user_data):
        user = await auth_service.register_user(register_request)

        assert user.id == 1
        assert user.plan_type == "free"
        assert user.password != test_user_data["password"]
        assert user.password.startswith("$2b$")

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, auth_service, register_request):
        from tradejournal.schemas.auth import RegisterRequest

        await auth_service.register_user(register_request)

        with pytest.raises(ValueError, match="Email already registered"):
            await auth_service.register_user(RegisterRequest(
                username="other", email=register_request.email, password="secret123"
            ))

    @pytest.mark.asyncio
    async def test_register_duplicate_username(self, auth_service, register_request):
        from tradejournal.schemas.auth import RegisterRequest

        await auth_service.register_user(register_request)

        with pytest.raises(ValueError, match="Username already taken"):
            await auth_service.register_user(RegisterRequest(
                username=register_request.username, email="other@x.com", password="secret123"
            ))

    @pytest.mark.asyncio
    async def test_login_returns_session_token(self, auth_service, register_request, test_user_data):
        from tradejournal.core.security import decode_token
        from tradejournal.schemas.auth import LoginRequest

        user = await auth_service.register_user(register_request)

        response = await auth_service.login(LoginRequest(
            email=test_user_data["email"], password=test_user_data["password"]
        ))

        payload = decode_token(response.access_token)
        assert payload["sub"] == str(user.id)
        assert response.user.id == user.id
        assert response.expires_in > 0
        assert await auth_service.sessions.get_user_id(payload["sid"]) == user.id

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, auth_service, register_request, test_user_data):
        from tradejournal.schemas.auth import LoginRequest

        await auth_service.register_user(register_request)

        with pytest.raises(ValueError, match="Invalid email or password"):
            await auth_service.login(LoginRequest(
                email=test_user_data["email"], password="not-the-password"
            ))

    @pytest.mark.asyncio
    async def test_login_unknown_email(self, auth_service):
        from tradejournal.schemas.auth import LoginRequest

        with pytest.raises(ValueError, match="Invalid email or password"):
            await auth_service.login(LoginRequest(email="ghost@x.com", password="whatever"))

    @pytest.mark.asyncio
    async def test_get_session_user(self, auth_service, register_request, session_store):
        user = await auth_service.register_user(register_request)
        session_id = await session_store.create(user.id)

        assert (await auth_service.get_session_user(user.id, session_id)).id == user.id

    @pytest.mark.asyncio
    async def test_session_of_other_user_rejected(self, auth_service, register_request, session_store):
        user = await auth_service.register_user(register_request)
        session_id = await session_store.create(user.id + 1)

        assert await auth_service.get_session_user(user.id, session_id) is None

    @pytest.mark.asyncio
    async def test_logout_ends_session(self, auth_service, register_request, session_store):
        user = await auth_service.register_user(register_request)
        session_id = await session_store.create(user.id)

        await auth_service.logout(session_id)

        assert await auth_service.get_session_user(user.id, session_id) is None

    def test_user_response_excludes_password(self):
        from datetime import datetime, timezone

        from tradejournal.models.user import User
        from tradejournal.services.auth_service import to_user_response

        user = User(
            id=1,
            username="alice",
            email="a@x.com",
            password="$2b$hash",
            created_at=datetime.now(timezone.utc),
        )

        response = to_user_response(user)

        assert "password" not in response.model_dump()
        assert response.plan_type == "free"
