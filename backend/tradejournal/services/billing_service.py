"""
Billing service for Stripe payments and subscriptions.

All payment logic lives at Stripe; this service only creates the Stripe
objects and stores the returned references on the account.
"""
import logging
from typing import Any, Optional

import stripe
from starlette.concurrency import run_in_threadpool

from tradejournal.models.user import PlanType, User
from tradejournal.schemas.billing import PaymentIntentResponse, SubscriptionResponse
from tradejournal.storage.user_store import UserStore

logger = logging.getLogger(__name__)


def plan_type_for(plan_id: str) -> PlanType:
    """Plan tier granted by a Stripe price ID."""
    return PlanType.PRO if "pro" in plan_id.lower() else PlanType.BASIC


def _client_secret(subscription: Any) -> Optional[str]:
    # Secret for confirming the first invoice payment, None for free plans
    invoice = getattr(subscription, "latest_invoice", None)
    secret = getattr(invoice, "confirmation_secret", None) if invoice else None
    return getattr(secret, "client_secret", None) if secret else None


class BillingService:
    """Service for Stripe operations."""

    def __init__(self, api_key: str, users: UserStore):
        self.api_key = api_key
        self.users = users

    async def create_payment_intent(self, amount: float) -> PaymentIntentResponse:
        """
        Create a one-off USD payment.

        Args:
            amount: Amount in dollars (converted to cents)
        """
        payment_intent = await run_in_threadpool(
            stripe.PaymentIntent.create,
            api_key=self.api_key,
            amount=round(amount * 100),
            currency="usd",
        )
        return PaymentIntentResponse(client_secret=payment_intent.client_secret)

    async def create_subscription(self, user: User, plan_id: str) -> SubscriptionResponse:
        """
        Subscribe a user to a plan.

        Creates the Stripe customer on first use and stores it right away,
        so a failed subscription does not leave an orphan customer behind.
        """
        customer_id = user.stripe_customer_id

        if not customer_id:
            customer = await run_in_threadpool(
                stripe.Customer.create,
                api_key=self.api_key,
                email=user.email,
                name=user.username,
            )
            customer_id = customer.id
            await self.users.update_stripe_info(
                user.id, customer_id, user.stripe_subscription_id
            )
            logger.info("Created Stripe customer %s for user %d", customer_id, user.id)

        subscription = await run_in_threadpool(
            stripe.Subscription.create,
            api_key=self.api_key,
            customer=customer_id,
            items=[{"price": plan_id}],
            payment_behavior="default_incomplete",
            expand=["latest_invoice.confirmation_secret"],
        )

        await self.users.update_stripe_info(user.id, customer_id, subscription.id)

        plan_type = plan_type_for(plan_id)
        await self.users.update_plan(user.id, plan_type)
        logger.info(
            "User %d subscribed to %s (%s)", user.id, plan_id, subscription.id
        )

        return SubscriptionResponse(
            subscription_id=subscription.id,
            client_secret=_client_secret(subscription),
            plan_type=plan_type.value,
        )
