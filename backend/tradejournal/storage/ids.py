"""
Sequential integer identifiers on top of MongoDB string keys.

One document (``system/counters``) holds a field per entity kind with the
next identifier to hand out. Allocation is a single ``find_one_and_update``
with ``$inc``, which MongoDB applies atomically to one document, so
concurrent creators never receive the same identifier.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from tradejournal.database.databases.journal_db import (
    COUNTERS_DOC_ID,
    Collections,
    EntityKind,
)

logger = logging.getLogger(__name__)

FIRST_ID = 1


class IdentifierAllocator:
    """Hands out strictly increasing identifiers per entity kind."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.counters = db[Collections.SYSTEM]

    async def ensure_counters(self) -> None:
        """Create missing counters at FIRST_ID, leaving existing ones alone."""
        await self.counters.update_one(
            {"_id": COUNTERS_DOC_ID},
            {"$max": {kind.value: FIRST_ID for kind in EntityKind}},
            upsert=True,
        )

    async def next_id(self, kind: EntityKind) -> int:
        """
        Allocate the next identifier for ``kind``.

        Returns:
            The counter value before the increment
        """
        field = EntityKind(kind).value

        # A missing field starts at FIRST_ID; $max never lowers a counter
        await self.counters.update_one(
            {"_id": COUNTERS_DOC_ID},
            {"$max": {field: FIRST_ID}},
            upsert=True,
        )
        before = await self.counters.find_one_and_update(
            {"_id": COUNTERS_DOC_ID},
            {"$inc": {field: 1}},
            return_document=ReturnDocument.BEFORE,
        )
        current = int(before[field])
        logger.debug("Allocated %s id %d", field, current)
        return current
