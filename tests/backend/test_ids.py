"""
Tests for the identifier allocator.

These tests cover:
- Counter document initialization
- Sequential allocation starting at 1 per kind
- Distinct identifiers under concurrent allocation
"""

import asyncio

import pytest


class TestEnsureCounters:
    """Tests for counter document initialization."""

    @pytest.mark.asyncio
    async def test_creates_counters_at_one(self, mock_journal_db):
        from tradejournal.storage.ids import IdentifierAllocator

        await IdentifierAllocator(mock_journal_db).ensure_counters()

        doc = await mock_journal_db.system.find_one({"_id": "counters"})
        assert doc == {"_id": "counters", "user": 1, "trade": 1, "collection": 1}

    @pytest.mark.asyncio
    async def test_leaves_existing_counters_alone(self, mock_journal_db):
        from tradejournal.storage.ids import IdentifierAllocator

        await mock_journal_db.system.insert_one({"_id": "counters", "trade": 17})

        await IdentifierAllocator(mock_journal_db).ensure_counters()

        doc = await mock_journal_db.system.find_one({"_id": "counters"})
        assert doc["trade"] == 17
        assert doc["user"] == 1
        assert doc["collection"] == 1


class TestNextId:
    """Tests for identifier allocation."""

    @pytest.mark.asyncio
    async def test_first_id_is_one_without_counter_document(self, mock_journal_db):
        from tradejournal.database.databases.journal_db import EntityKind
        from tradejournal.storage.ids import IdentifierAllocator

        allocator = IdentifierAllocator(mock_journal_db)

        assert await allocator.next_id(EntityKind.TRADE) == 1

    @pytest.mark.asyncio
    async def test_sequential_ids_strictly_increase(self, mock_journal_db):
        from tradejournal.database.databases.journal_db import EntityKind
        from tradejournal.storage.ids import IdentifierAllocator

        allocator = IdentifierAllocator(mock_journal_db)
        ids = [await allocator.next_id(EntityKind.USER) for _ in range(10)]

        assert ids == list(range(1, 11))

    @pytest.mark.asyncio
    async def test_counter_stores_next_id(self, mock_journal_db):
        from tradejournal.database.databases.journal_db import EntityKind
        from tradejournal.storage.ids import IdentifierAllocator

        allocator = IdentifierAllocator(mock_journal_db)
        await allocator.next_id(EntityKind.COLLECTION)
        await allocator.next_id(EntityKind.COLLECTION)

        doc = await mock_journal_db.system.find_one({"_id": "counters"})
        assert doc["collection"] == 3

    @pytest.mark.asyncio
    async def test_kinds_have_independent_sequences(self, mock_journal_db):
        from tradejournal.database.databases.journal_db import EntityKind
        from tradejournal.storage.ids import IdentifierAllocator

        allocator = IdentifierAllocator(mock_journal_db)

        assert await allocator.next_id(EntityKind.USER) == 1
        assert await allocator.next_id(EntityKind.USER) == 2
        assert await allocator.next_id(EntityKind.TRADE) == 1
        assert await allocator.next_id(EntityKind.COLLECTION) == 1

    @pytest.mark.asyncio
    async def test_accepts_kind_name(self, mock_journal_db):
        from tradejournal.storage.ids import IdentifierAllocator

        allocator = IdentifierAllocator(mock_journal_db)

        assert await allocator.next_id("trade") == 1

    @pytest.mark.asyncio
    async def test_concurrent_allocations_are_distinct(self, mock_journal_db):
        from tradejournal.database.databases.journal_db import EntityKind
        from tradejournal.storage.ids import IdentifierAllocator

        allocator = IdentifierAllocator(mock_journal_db)
        ids = await asyncio.gather(
            *(allocator.next_id(EntityKind.TRADE) for _ in range(25))
        )

        assert sorted(ids) == list(range(1, 26))
