"""
Journal database configuration.
Stores accounts, trades, collections and the identifier counters.
"""
from enum import Enum


class Collections:
    """Collection names in the journal database."""
    USERS = "users"
    TRADES = "trades"
    COLLECTIONS = "collections"
    SYSTEM = "system"

    # Index definitions for each collection
    INDEXES = {
        "users": [
            {"keys": [("username", 1)], "unique": True},
            {"keys": [("email", 1)], "unique": True},
        ],
        "trades": [
            {"keys": [("user_id", 1)]},
            {"keys": [("collection_id", 1)]},
        ],
        "collections": [
            {"keys": [("user_id", 1)]},
        ],
    }


# Singleton document in the system collection holding one counter per kind
COUNTERS_DOC_ID = "counters"


class EntityKind(str, Enum):
    """Entity kinds with their own identifier sequence."""
    USER = "user"
    TRADE = "trade"
    COLLECTION = "collection"

    @property
    def collection_name(self) -> str:
        return {
            EntityKind.USER: Collections.USERS,
            EntityKind.TRADE: Collections.TRADES,
            EntityKind.COLLECTION: Collections.COLLECTIONS,
        }[self]
