"""
Authentication router for registration, login, logout and the current user.
"""
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from redis.asyncio import Redis

from tradejournal.config import get_settings
from tradejournal.core.rate_limit import check_rate_limit, reset_rate_limit
from tradejournal.dependencies.auth import (
    get_auth_service,
    get_current_user,
    get_token_payload,
)
from tradejournal.dependencies.database import get_redis
from tradejournal.models.user import User
from tradejournal.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
)
from tradejournal.schemas.user import UserResponse
from tradejournal.services.auth_service import AuthService, to_user_response

router = APIRouter(prefix="/auth", tags=["Authentication"])


def get_client_ip(request: Request) -> str:
    """Extract client IP from request."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    request: Request,
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
    redis: Redis = Depends(get_redis),
):
    """
    Register a new user account.

    - **username**: Unique username
    - **email**: Valid email address (must be unique)
    - **password**: Password (6-72 characters)
    - **avatar**: Optional avatar URL
    """
    settings = get_settings()
    client_ip = get_client_ip(request)
    if not await check_rate_limit(
        redis,
        client_ip,
        "/api/auth/register",
        limit=settings.register_rate_limit_attempts,
        window_seconds=settings.login_rate_limit_window_seconds,
    ):
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many registration attempts. Please try again later.",
        )

    try:
        user = await auth_service.register_user(body)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return to_user_response(user)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get a session token",
)
async def login(
    request: Request,
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
    redis: Redis = Depends(get_redis),
):
    """
    Authenticate with email and password to start a session.

    The returned token should be passed as a query parameter `token` to
    protected endpoints.

    **Rate limited** per client IP.
    """
    settings = get_settings()
    client_ip = get_client_ip(request)
    if not await check_rate_limit(
        redis,
        client_ip,
        "/api/auth/login",
        limit=settings.login_rate_limit_attempts,
        window_seconds=settings.login_rate_limit_window_seconds,
    ):
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many login attempts. Please try again later.",
        )

    try:
        response = await auth_service.login(body)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )

    await reset_rate_limit(redis, client_ip, "/api/auth/login")
    return response


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="End the current session",
)
async def logout(
    payload: Annotated[dict[str, Any], Depends(get_token_payload)],
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Revoke the session behind the token. The token stops working immediately.

    Requires valid token as query parameter: `?token=xxx`
    """
    await auth_service.logout(payload["sid"])
    return {"message": "Logged out successfully"}


@router.get(
    "/current-user",
    response_model=UserResponse,
    summary="Get current user info",
)
async def get_current_user_info(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """
    Get information about the currently authenticated user.

    Requires valid token as query parameter: `?token=xxx`
    """
    return to_user_response(current_user)
