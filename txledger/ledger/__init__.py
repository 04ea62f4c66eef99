"""Mini README: Ledger core for recording and analysing transactions.

This package groups the in-memory transaction store, the analytics
aggregator and the filter/search helper. None of them perform I/O; callers
drive them directly or through ``txledger.gateway.RequestGateway``.
"""

from .analytics import AnalyticsEngine, LedgerAnalytics, format_amount
from .errors import LedgerError, NotFoundError, ValidationError
from .models import Transaction, TransactionType
from .query import filter_and_search
from .store import TransactionStore, demo_transactions

__all__ = [
    "AnalyticsEngine",
    "LedgerAnalytics",
    "LedgerError",
    "NotFoundError",
    "Transaction",
    "TransactionStore",
    "TransactionType",
    "ValidationError",
    "demo_transactions",
    "filter_and_search",
    "format_amount",
]
