"""
Shared CRUD plumbing for the per-kind record stores.
"""
import logging
from datetime import datetime, timezone
from typing import Any, ClassVar, Generic, Optional, TypeVar

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import BaseModel, ValidationError

from tradejournal.core.exceptions import NormalizationError, RecordNotFoundError
from tradejournal.database.databases.journal_db import EntityKind
from tradejournal.storage.ids import IdentifierAllocator
from tradejournal.storage.normalizer import merge_fields, normalize, normalize_all

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def doc_key(record_id: int) -> str:
    """Document key for an identifier."""
    return str(record_id)


class RecordStore(Generic[RecordT]):
    """
    CRUD over one entity kind.

    Records are stored under ``str(id)`` without the identifier in the
    payload; reads go through the normalizer and the kind's model.
    """

    kind: ClassVar[EntityKind]
    model: ClassVar[type[BaseModel]]

    def __init__(self, db: AsyncIOMotorDatabase, allocator: IdentifierAllocator):
        self.db = db
        self.collection = db[self.kind.collection_name]
        self.allocator = allocator

    def _to_record(self, data: Optional[dict[str, Any]]) -> Optional[RecordT]:
        if data is None:
            return None
        return self.model.model_validate(data)

    async def _create(self, fields: dict[str, Any]) -> RecordT:
        """Allocate an id, stamp created_at and write the full record."""
        record_id = await self.allocator.next_id(self.kind)
        record = self.model.model_validate({
            **fields,
            "id": record_id,
            "created_at": datetime.now(timezone.utc),
        })

        doc = record.model_dump(exclude={"id"})
        await self.collection.insert_one({"_id": doc_key(record_id), **doc})

        logger.info("Created %s %d", self.kind.value, record_id)
        return record

    async def get(self, record_id: int) -> Optional[RecordT]:
        """Get a record by identifier, or None."""
        raw = await self.collection.find_one({"_id": doc_key(record_id)})
        return self._to_record(normalize(raw))

    async def _find(self, query: dict[str, Any]) -> list[RecordT]:
        cursor = self.collection.find(query).sort("created_at", 1)
        docs = await cursor.to_list(length=None)
        return [self._to_record(data) for data in normalize_all(docs)]

    async def _update(self, record_id: int, changes: dict[str, Any]) -> RecordT:
        """
        Apply a partial update and return the post-update record.

        Raises:
            RecordNotFoundError: If the record does not exist
            ValueError: If the changes would produce an invalid record
            NormalizationError: If the record vanished right after the write
        """
        key = doc_key(record_id)
        existing = normalize(await self.collection.find_one({"_id": key}))
        if existing is None:
            raise RecordNotFoundError(self.kind.value, record_id)

        changes = {k: v for k, v in changes.items() if k not in ("id", "_id")}
        if changes:
            # Nothing is written unless the merged record is still valid
            try:
                self.model.model_validate(merge_fields(existing, changes))
            except ValidationError as e:
                fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
                raise ValueError(
                    f"Invalid {self.kind.value} update: {', '.join(fields)}"
                ) from e
            await self.collection.update_one({"_id": key}, {"$set": changes})

        updated = self._to_record(normalize(await self.collection.find_one({"_id": key})))
        if updated is None:
            logger.error(
                "%s %d missing after update; store and read path disagree",
                self.kind.value, record_id,
            )
            raise NormalizationError(self.kind.value, record_id)
        return updated

    async def delete(self, record_id: int) -> bool:
        """Delete a record. Returns False when it does not exist."""
        result = await self.collection.delete_one({"_id": doc_key(record_id)})
        if result.deleted_count == 0:
            return False
        logger.info("Deleted %s %d", self.kind.value, record_id)
        return True
