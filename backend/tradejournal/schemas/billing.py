"""
Billing request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field


class PaymentIntentRequest(BaseModel):
    """One-off payment request, amount in dollars."""
    amount: float = Field(..., gt=0, description="Amount in USD")


class PaymentIntentResponse(BaseModel):
    client_secret: Optional[str] = Field(None, description="Stripe client secret")


class SubscriptionRequest(BaseModel):
    """Subscription request with the Stripe price ID of the plan."""
    plan_id: Optional[str] = Field(None, description="Stripe price ID")


class SubscriptionResponse(BaseModel):
    subscription_id: str = Field(..., description="Stripe subscription ID")
    client_secret: Optional[str] = Field(None, description="Client secret to confirm the first payment")
    plan_type: str = Field(..., description="Plan tier now assigned to the account")
