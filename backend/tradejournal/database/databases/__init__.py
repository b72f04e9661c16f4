"""
Database definitions and collection constants.
"""
from tradejournal.database.databases import journal_db

__all__ = ["journal_db"]
