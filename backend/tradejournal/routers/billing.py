"""
Billing router for Stripe payments and subscriptions.
"""
import logging

import stripe
from fastapi import APIRouter, Depends, HTTPException, status

from tradejournal.config import get_settings
from tradejournal.dependencies.auth import CurrentUser
from tradejournal.dependencies.database import get_storage
from tradejournal.schemas.billing import (
    PaymentIntentRequest,
    PaymentIntentResponse,
    SubscriptionRequest,
    SubscriptionResponse,
)
from tradejournal.services.billing_service import BillingService
from tradejournal.storage import JournalStorage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Billing"])


async def get_billing_service(
    storage: JournalStorage = Depends(get_storage),
) -> BillingService:
    """
    Dependency to get BillingService instance.

    Raises:
        HTTPException 503: If Stripe is not configured
    """
    settings = get_settings()
    if not settings.stripe_secret_key:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Payment processing is disabled",
        )
    return BillingService(settings.stripe_secret_key, storage.users)


@router.post(
    "/create-payment-intent",
    response_model=PaymentIntentResponse,
    summary="Create a one-off payment",
)
async def create_payment_intent(
    body: PaymentIntentRequest,
    current_user: CurrentUser,
    billing: BillingService = Depends(get_billing_service),
):
    """
    Create a Stripe PaymentIntent for **amount** USD.

    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        return await billing.create_payment_intent(body.amount)
    except stripe.StripeError as e:
        logger.error("Payment intent for user %d failed: %s", current_user.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error creating payment intent: {e.user_message or e}",
        )


@router.post(
    "/create-subscription",
    response_model=SubscriptionResponse,
    summary="Subscribe to a plan",
)
async def create_subscription(
    body: SubscriptionRequest,
    current_user: CurrentUser,
    billing: BillingService = Depends(get_billing_service),
):
    """
    Subscribe the current user to a plan.

    - **plan_id**: Stripe price ID of the plan (required)

    Requires valid token as query parameter: `?token=xxx`
    """
    if not body.plan_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Plan ID is required",
        )

    try:
        return await billing.create_subscription(current_user, body.plan_id)
    except stripe.StripeError as e:
        logger.error("Subscription for user %d failed: %s", current_user.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error creating subscription: {e.user_message or e}",
        )
