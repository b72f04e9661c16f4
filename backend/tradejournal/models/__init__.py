"""
Pydantic models for database documents.
"""
from tradejournal.models.user import User, PlanType
from tradejournal.models.trade import Trade, TradeDirection
from tradejournal.models.collection import Collection

__all__ = [
    "User",
    "PlanType",
    "Trade",
    "TradeDirection",
    "Collection",
]
