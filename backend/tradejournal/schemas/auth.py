"""
Authentication request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from tradejournal.schemas.user import UserResponse


class LoginRequest(BaseModel):
    """Login request body."""
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class LoginResponse(BaseModel):
    """Login response with session token."""
    access_token: str = Field(..., description="JWT session token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token expiration time in seconds")
    user: UserResponse = Field(..., description="Authenticated user")


class RegisterRequest(BaseModel):
    """Registration request body."""
    username: str = Field(
        ...,
        min_length=3,
        max_length=50,
        pattern=r"^[A-Za-z0-9_.-]+$",
        description="Unique username"
    )
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(
        ...,
        min_length=6,
        max_length=72,
        description="User password (6-72 characters)"
    )
    avatar: Optional[str] = Field(None, description="Avatar URL")


class MessageResponse(BaseModel):
    """Simple message response."""
    message: str
