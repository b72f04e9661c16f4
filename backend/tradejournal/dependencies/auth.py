"""
Authentication dependencies for route protection.
"""
from typing import Annotated, Any

from fastapi import Depends, HTTPException, Query, status
from jose import JWTError

from tradejournal.core.security import decode_token
from tradejournal.core.sessions import SessionStore
from tradejournal.dependencies.database import get_session_store, get_storage
from tradejournal.models.user import User
from tradejournal.services.auth_service import AuthService
from tradejournal.storage import JournalStorage


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_auth_service(
    storage: JournalStorage = Depends(get_storage),
    sessions: SessionStore = Depends(get_session_store),
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(storage, sessions)


async def get_token_payload(
    token: Annotated[str, Query(description="Session token")]
) -> dict[str, Any]:
    """
    Decode the session token passed as query parameter: ?token=xxx

    Raises:
        HTTPException 401: If token is invalid, expired or malformed
    """
    try:
        payload = decode_token(token)
    except JWTError:
        raise _credentials_exception()

    if not payload.get("sub") or not payload.get("sid"):
        raise _credentials_exception()
    return payload


async def get_current_user(
    payload: Annotated[dict[str, Any], Depends(get_token_payload)],
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """
    Dependency to get the current authenticated user.

    The token must reference a live session that belongs to the token's
    subject, and the account must still exist.

    Raises:
        HTTPException 401: If any of the above does not hold
    """
    try:
        user_id = int(payload["sub"])
    except ValueError:
        raise _credentials_exception()

    user = await auth_service.get_session_user(user_id, payload["sid"])
    if user is None:
        raise _credentials_exception()

    return user


# Type alias for cleaner route signatures
CurrentUser = Annotated[User, Depends(get_current_user)]
