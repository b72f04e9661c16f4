"""
Dependencies for dependency injection in routes.
"""
from tradejournal.dependencies.auth import (
    CurrentUser,
    get_auth_service,
    get_current_user,
    get_token_payload,
)
from tradejournal.dependencies.database import get_redis, get_session_store, get_storage

__all__ = [
    "CurrentUser",
    "get_auth_service",
    "get_current_user",
    "get_token_payload",
    "get_redis",
    "get_session_store",
    "get_storage",
]
