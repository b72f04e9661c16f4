"""
Collection records.
"""
from tradejournal.database.databases.journal_db import EntityKind
from tradejournal.models.collection import Collection
from tradejournal.schemas.collection import CollectionCreate, CollectionUpdate
from tradejournal.storage.base import RecordStore
from tradejournal.storage.normalizer import partial_fields


class CollectionStore(RecordStore[Collection]):
    kind = EntityKind.COLLECTION
    model = Collection

    async def create(self, user_id: int, request: CollectionCreate) -> Collection:
        return await self._create({
            "user_id": user_id,
            "name": request.name,
            "description": request.description or None,
        })

    async def list_by_user(self, user_id: int) -> list[Collection]:
        return await self._find({"user_id": user_id})

    async def update(self, collection_id: int, request: CollectionUpdate) -> Collection:
        return await self._update(collection_id, partial_fields(request))
