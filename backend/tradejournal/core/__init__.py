"""
Core module - Security, sessions, rate limiting and exceptions.
"""
from tradejournal.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
)
from tradejournal.core.rate_limit import check_rate_limit, reset_rate_limit
from tradejournal.core.sessions import SessionStore
from tradejournal.core.exceptions import (
    NormalizationError,
    OwnershipError,
    RecordNotFoundError,
)

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "check_rate_limit",
    "reset_rate_limit",
    "SessionStore",
    "NormalizationError",
    "OwnershipError",
    "RecordNotFoundError",
]
