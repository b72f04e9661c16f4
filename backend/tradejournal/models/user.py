"""
User (account) model for the journal database.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class PlanType(str, Enum):
    """Subscription plan tiers."""
    FREE = "free"
    BASIC = "basic"
    PRO = "pro"


class User(BaseModel):
    """
    User document model for the journal_db.users collection.

    The document key is the string form of ``id``.
    """
    model_config = ConfigDict(use_enum_values=True)

    id: int = Field(..., description="Sequential account identifier")
    username: str = Field(..., description="Unique username")
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(..., description="Bcrypt hashed password")
    avatar: Optional[str] = Field(None, description="Avatar URL")
    created_at: datetime = Field(..., description="Account creation timestamp")
    stripe_customer_id: Optional[str] = Field(
        None,
        description="Stripe customer reference, stored verbatim"
    )
    stripe_subscription_id: Optional[str] = Field(
        None,
        description="Stripe subscription reference, stored verbatim"
    )
    plan_type: PlanType = Field(
        default=PlanType.FREE,
        description="Subscription plan tier"
    )
