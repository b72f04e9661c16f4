"""
Journal service for trades and collections.

Enforces what the record stores do not: a caller only sees and changes its
own records, and a trade only references a collection the caller owns.
"""
import logging
from typing import Optional

from tradejournal.core.exceptions import OwnershipError, RecordNotFoundError
from tradejournal.models.collection import Collection
from tradejournal.models.trade import Trade
from tradejournal.schemas.collection import CollectionCreate, CollectionUpdate
from tradejournal.schemas.trade import TradeCreate, TradeUpdate
from tradejournal.storage import JournalStorage
from tradejournal.storage.normalizer import merge_fields, partial_fields, to_datetime

logger = logging.getLogger(__name__)


class JournalService:
    """Service for trade and collection operations on behalf of one user."""

    def __init__(self, storage: JournalStorage):
        self.trades = storage.trades
        self.collections = storage.collections

    # ==================== Collections ====================

    async def list_collections(self, user_id: int) -> list[Collection]:
        return await self.collections.list_by_user(user_id)

    async def create_collection(self, user_id: int, request: CollectionCreate) -> Collection:
        return await self.collections.create(user_id, request)

    async def get_collection(self, collection_id: int, user_id: int) -> Collection:
        """
        Get a collection owned by ``user_id``.

        Raises:
            RecordNotFoundError: If the collection does not exist
            OwnershipError: If it belongs to another user
        """
        collection = await self.collections.get(collection_id)
        if collection is None:
            raise RecordNotFoundError("collection", collection_id)
        if collection.user_id != user_id:
            logger.warning("User %d denied access to collection %d", user_id, collection_id)
            raise OwnershipError("Forbidden")
        return collection

    async def list_collection_trades(self, collection_id: int, user_id: int) -> list[Trade]:
        await self.get_collection(collection_id, user_id)
        return await self.trades.list_by_collection(collection_id)

    async def update_collection(
        self, collection_id: int, user_id: int, request: CollectionUpdate
    ) -> Collection:
        await self.get_collection(collection_id, user_id)
        return await self.collections.update(collection_id, request)

    async def delete_collection(self, collection_id: int, user_id: int) -> bool:
        """Delete an owned collection. Trades filed under it are left as is."""
        await self.get_collection(collection_id, user_id)
        return await self.collections.delete(collection_id)

    # ==================== Trades ====================

    async def _check_collection_reference(
        self, collection_id: Optional[int], user_id: int
    ) -> None:
        if collection_id is None:
            return
        collection = await self.collections.get(collection_id)
        if collection is None or collection.user_id != user_id:
            raise ValueError("Collection not found")

    async def list_trades(self, user_id: int) -> list[Trade]:
        return await self.trades.list_by_user(user_id)

    async def create_trade(self, user_id: int, request: TradeCreate) -> Trade:
        """
        Record a trade for ``user_id``.

        Raises:
            ValueError: If the referenced collection is missing or not owned
        """
        await self._check_collection_reference(request.collection_id, user_id)
        _check_dates(request.model_dump())
        return await self.trades.create(user_id, request)

    async def get_trade(self, trade_id: int, user_id: int) -> Trade:
        """
        Get a trade owned by ``user_id``.

        Raises:
            RecordNotFoundError: If the trade does not exist
            OwnershipError: If it belongs to another user
        """
        trade = await self.trades.get(trade_id)
        if trade is None:
            raise RecordNotFoundError("trade", trade_id)
        if trade.user_id != user_id:
            logger.warning("User %d denied access to trade %d", user_id, trade_id)
            raise OwnershipError("Forbidden")
        return trade

    async def update_trade(self, trade_id: int, user_id: int, request: TradeUpdate) -> Trade:
        trade = await self.get_trade(trade_id, user_id)
        changes = partial_fields(request)

        if "collection_id" in changes:
            await self._check_collection_reference(changes["collection_id"], user_id)

        _check_dates(merge_fields(trade.model_dump(), changes))
        return await self.trades.update(trade_id, request)

    async def delete_trade(self, trade_id: int, user_id: int) -> bool:
        await self.get_trade(trade_id, user_id)
        return await self.trades.delete(trade_id)


def _check_dates(fields: dict) -> None:
    entry_date, exit_date = fields.get("entry_date"), fields.get("exit_date")
    if entry_date is None or exit_date is None:
        return
    # Request bodies may carry naive datetimes, stored ones are UTC-aware
    if to_datetime(exit_date) < to_datetime(entry_date):
        raise ValueError("Exit date cannot be before entry date")
