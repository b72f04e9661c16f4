"""
Startup database setup.
Creates indexes and makes sure the identifier counters exist.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from tradejournal.database.databases import journal_db
from tradejournal.storage.ids import IdentifierAllocator

logger = logging.getLogger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for all journal collections."""
    for collection_name, indexes in journal_db.Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            await collection.create_index(keys, **kwargs)
            logger.debug("Index %s ensured on %s", keys, collection_name)


async def initialize_database(db: AsyncIOMotorDatabase) -> None:
    """Create indexes and the counters document."""
    await create_indexes(db)
    await IdentifierAllocator(db).ensure_counters()
