"""
Database module - MongoDB and Redis connections and database definitions.
"""
from tradejournal.database.connections import (
    get_mongo_client,
    get_redis_client,
    close_connections,
    get_database,
)
from tradejournal.database.databases import journal_db

__all__ = [
    "get_mongo_client",
    "get_redis_client",
    "close_connections",
    "get_database",
    "journal_db",
]
