"""
Trade records.
"""
from tradejournal.database.databases.journal_db import EntityKind
from tradejournal.models.trade import Trade
from tradejournal.schemas.trade import TradeCreate, TradeUpdate
from tradejournal.storage.base import RecordStore
from tradejournal.storage.normalizer import partial_fields


class TradeStore(RecordStore[Trade]):
    kind = EntityKind.TRADE
    model = Trade

    async def create(self, user_id: int, request: TradeCreate) -> Trade:
        fields = request.model_dump()
        fields["user_id"] = user_id
        fields["notes"] = request.notes or None
        fields["collection_id"] = request.collection_id or None
        return await self._create(fields)

    async def list_by_user(self, user_id: int) -> list[Trade]:
        return await self._find({"user_id": user_id})

    async def list_by_collection(self, collection_id: int) -> list[Trade]:
        return await self._find({"collection_id": collection_id})

    async def update(self, trade_id: int, request: TradeUpdate) -> Trade:
        return await self._update(trade_id, partial_fields(request))
