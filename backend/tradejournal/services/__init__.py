"""
Service layer for business logic.
"""
from tradejournal.services.auth_service import AuthService
from tradejournal.services.journal_service import JournalService
from tradejournal.services.billing_service import BillingService

__all__ = [
    "AuthService",
    "JournalService",
    "BillingService",
]
