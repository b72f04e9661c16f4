"""
User request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class UserCreate(BaseModel):
    """Fields needed to store a new account (password already hashed)."""
    username: str = Field(..., description="Unique username")
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(..., description="Bcrypt hashed password")
    avatar: Optional[str] = Field(None, description="Avatar URL")


class UserResponse(BaseModel):
    """User information response (excludes the password hash)."""
    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    email: EmailStr = Field(..., description="User email")
    avatar: Optional[str] = Field(None, description="Avatar URL")
    created_at: datetime = Field(..., description="Account creation date")
    stripe_customer_id: Optional[str] = Field(None, description="Stripe customer ID")
    stripe_subscription_id: Optional[str] = Field(None, description="Stripe subscription ID")
    plan_type: str = Field(..., description="Subscription plan tier")
