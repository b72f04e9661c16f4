"""
API routers.
"""
from tradejournal.routers import auth, billing, collections, health, trades

__all__ = ["auth", "billing", "collections", "health", "trades"]
