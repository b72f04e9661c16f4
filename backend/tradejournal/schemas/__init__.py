"""
Request and response schemas for API endpoints.
"""
from tradejournal.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    MessageResponse,
)
from tradejournal.schemas.user import UserCreate, UserResponse
from tradejournal.schemas.trade import TradeCreate, TradeUpdate
from tradejournal.schemas.collection import CollectionCreate, CollectionUpdate
from tradejournal.schemas.billing import (
    PaymentIntentRequest,
    PaymentIntentResponse,
    SubscriptionRequest,
    SubscriptionResponse,
)

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "MessageResponse",
    # User
    "UserCreate",
    "UserResponse",
    # Trade
    "TradeCreate",
    "TradeUpdate",
    # Collection
    "CollectionCreate",
    "CollectionUpdate",
    # Billing
    "PaymentIntentRequest",
    "PaymentIntentResponse",
    "SubscriptionRequest",
    "SubscriptionResponse",
]
