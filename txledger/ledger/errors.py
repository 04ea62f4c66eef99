"""Mini README: Error taxonomy raised by the ledger core.

Structure:
    * LedgerError - common base so callers can catch every ledger failure.
    * ValidationError - malformed transaction payloads or filters.
    * NotFoundError - lookups against identifiers absent from the ledger.

Both concrete errors also derive from the builtin exception a plain Python
caller would expect (``ValueError`` and ``KeyError``).
"""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for failures raised by the ledger core."""


class ValidationError(LedgerError, ValueError):
    """Raised when a payload or filter cannot be accepted."""


class NotFoundError(LedgerError, KeyError):
    """Raised when no transaction carries the requested identifier."""

    def __init__(self, transaction_id: object) -> None:
        super().__init__(f"Transaction {transaction_id} not found")
        self.transaction_id = transaction_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])
