"""
Data access layer: identifier allocation, document normalization and
per-kind record stores over the journal database.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

from tradejournal.storage.collection_store import CollectionStore
from tradejournal.storage.ids import IdentifierAllocator
from tradejournal.storage.trade_store import TradeStore
from tradejournal.storage.user_store import UserStore


class JournalStorage:
    """All record stores over one database, sharing one allocator."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.allocator = IdentifierAllocator(db)
        self.users = UserStore(db, self.allocator)
        self.trades = TradeStore(db, self.allocator)
        self.collections = CollectionStore(db, self.allocator)


__all__ = [
    "JournalStorage",
    "IdentifierAllocator",
    "UserStore",
    "TradeStore",
    "CollectionStore",
]
