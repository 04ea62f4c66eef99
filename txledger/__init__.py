"""Mini README: Core package initializer for the transaction ledger.

This module exposes convenience imports so callers can reach the ledger
services and the request gateway without needing to know the exact module
structure. Importing the package stays cheap: only the in-memory store,
analytics helpers, and the gateway facade are pulled in.
"""

from .gateway import RequestGateway, ResponseEnvelope
from .ledger import (
    AnalyticsEngine,
    NotFoundError,
    Transaction,
    TransactionStore,
    TransactionType,
    ValidationError,
    filter_and_search,
)
from .logging_utils import get_logger

__all__ = [
    "AnalyticsEngine",
    "NotFoundError",
    "RequestGateway",
    "ResponseEnvelope",
    "Transaction",
    "TransactionStore",
    "TransactionType",
    "ValidationError",
    "filter_and_search",
    "get_logger",
]
