"""
Authentication service for account registration, login and sessions.
"""
import logging
from typing import Optional

from pymongo.errors import DuplicateKeyError

from tradejournal.config import get_settings
from tradejournal.core.security import create_access_token, hash_password, verify_password
from tradejournal.core.sessions import SessionStore
from tradejournal.models.user import User
from tradejournal.schemas.auth import LoginRequest, LoginResponse, RegisterRequest
from tradejournal.schemas.user import UserCreate, UserResponse
from tradejournal.storage import JournalStorage

logger = logging.getLogger(__name__)


def to_user_response(user: User) -> UserResponse:
    """Public view of an account, without the password hash."""
    return UserResponse.model_validate(user.model_dump(exclude={"password"}))


class AuthService:
    """Service for authentication operations."""

    def __init__(self, storage: JournalStorage, sessions: SessionStore):
        self.users = storage.users
        self.sessions = sessions
        self.settings = get_settings()

    async def register_user(self, request: RegisterRequest) -> User:
        """
        Register a new account.

        Raises:
            ValueError: If the email or username is already in use
        """
        if await self.users.get_by_email(request.email):
            raise ValueError("Email already registered")

        if await self.users.get_by_username(request.username):
            raise ValueError("Username already taken")

        try:
            user = await self.users.create(UserCreate(
                username=request.username,
                email=request.email,
                password=hash_password(request.password),
                avatar=request.avatar,
            ))
        except DuplicateKeyError:
            # Lost a race against a concurrent registration
            raise ValueError("Email or username already registered")

        logger.info("Registered user %d (%s)", user.id, user.username)
        return user

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Authenticate with email and password and start a session.

        Raises:
            ValueError: If credentials are invalid
        """
        user = await self.users.get_by_email(request.email)

        if user is None or not verify_password(request.password, user.password):
            raise ValueError("Invalid email or password")

        session_id = await self.sessions.create(user.id)
        access_token = create_access_token(user_id=user.id, session_id=session_id)

        return LoginResponse(
            access_token=access_token,
            token_type="bearer",
            expires_in=self.settings.jwt_access_token_expire_minutes * 60,
            user=to_user_response(user),
        )

    async def logout(self, session_id: str) -> None:
        await self.sessions.revoke(session_id)

    async def get_session_user(self, user_id: int, session_id: str) -> Optional[User]:
        """
        Resolve the account behind a session.

        Returns:
            The user, or None if the session is gone, belongs to someone
            else, or the account no longer exists
        """
        session_user_id = await self.sessions.get_user_id(session_id)
        if session_user_id is None or session_user_id != user_id:
            return None
        return await self.users.get(user_id)
