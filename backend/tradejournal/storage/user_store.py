"""
Account records.
"""
from typing import Optional

from tradejournal.database.databases.journal_db import EntityKind
from tradejournal.models.user import PlanType, User
from tradejournal.schemas.user import UserCreate
from tradejournal.storage.base import RecordStore
from tradejournal.storage.normalizer import normalize


class UserStore(RecordStore[User]):
    kind = EntityKind.USER
    model = User

    async def create(self, request: UserCreate) -> User:
        """Create an account on the free plan with no Stripe references."""
        return await self._create({
            "username": request.username,
            "email": request.email,
            "password": request.password,
            "avatar": request.avatar or None,
            "stripe_customer_id": None,
            "stripe_subscription_id": None,
            "plan_type": PlanType.FREE.value,
        })

    async def _find_first(self, field: str, value: str) -> Optional[User]:
        # Unique indexes make more than one match impossible
        raw = await self.collection.find_one({field: value})
        return self._to_record(normalize(raw))

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self._find_first("username", username)

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self._find_first("email", email)

    async def update_stripe_info(
        self,
        user_id: int,
        customer_id: str,
        subscription_id: Optional[str],
    ) -> User:
        """Store the Stripe customer and subscription references."""
        return await self._update(user_id, {
            "stripe_customer_id": customer_id,
            "stripe_subscription_id": subscription_id,
        })

    async def update_plan(self, user_id: int, plan_type: PlanType | str) -> User:
        return await self._update(user_id, {"plan_type": PlanType(plan_type).value})
