"""Mini README: In-memory transaction store with CRUD behaviour.

Structure:
    * demo_transactions - deterministic records used to seed new ledgers.
    * TransactionStore - owns the ordered ledger and assigns identifiers.

The store keeps transactions in insertion order inside a plain list, which
is the single source of truth for every derived view. Identifiers follow a
running maximum: each create takes ``max(existing ids) + 1`` (or ``1`` for an
empty ledger), so deleting the newest record frees its number for the next
create. The store takes no locks; concurrent hosts must serialise access,
which ``RequestGateway`` does.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Iterable, List, Mapping, Optional

from ..logging_utils import get_logger
from .errors import NotFoundError, ValidationError
from .models import Transaction, TransactionType, coerce_payload

LOGGER = get_logger(__name__)


def demo_transactions() -> List[Transaction]:
    """Create the deterministic demo ledger used for previews and the console."""

    return [
        Transaction(
            transaction_id=1,
            transaction_type=TransactionType.INCOME,
            amount=1250.0,
            category="Salary",
            description="Monthly salary",
            occurred_on=date(2026, 1, 15),
            tags=("work", "regular"),
        ),
        Transaction(
            transaction_id=2,
            transaction_type=TransactionType.EXPENSE,
            amount=45.5,
            category="Food",
            description="Grocery shopping",
            occurred_on=date(2026, 1, 14),
            tags=("groceries",),
        ),
        Transaction(
            transaction_id=3,
            transaction_type=TransactionType.EXPENSE,
            amount=120.0,
            category="Transport",
            description="Gas station",
            occurred_on=date(2026, 1, 13),
            tags=("car", "fuel"),
        ),
    ]


class TransactionStore:
    """Manage the ordered collection of transactions."""

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        *,
        seed_demo: bool = False,
    ) -> None:
        self._transactions: List[Transaction] = []
        if transactions is None and seed_demo:
            transactions = demo_transactions()
        for transaction in transactions or ():
            self._register(transaction)
        LOGGER.debug("Transaction store initialised with %s transactions", len(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    def _register(self, transaction: Transaction) -> None:
        """Append a pre-built transaction, keeping identifiers unique."""

        if transaction.transaction_id < 1:
            raise ValidationError(f"Transaction ids must be positive, got {transaction.transaction_id}.")
        if any(existing.transaction_id == transaction.transaction_id for existing in self._transactions):
            raise ValidationError(f"Transaction {transaction.transaction_id} already exists.")
        self._transactions.append(transaction)

    def _next_id(self) -> int:
        return max((transaction.transaction_id for transaction in self._transactions), default=0) + 1

    def _index_of(self, transaction_id: int) -> int:
        for index, transaction in enumerate(self._transactions):
            if transaction.transaction_id == transaction_id:
                return index
        raise NotFoundError(transaction_id)

    def create(self, payload: Mapping[str, Any]) -> Transaction:
        """Validate ``payload`` and append it under a freshly assigned id."""

        fields = coerce_payload(payload)
        transaction = Transaction(transaction_id=self._next_id(), **fields)
        self._transactions.append(transaction)
        LOGGER.info(
            "Created transaction %s (%s %.2f in %s)",
            transaction.transaction_id,
            transaction.transaction_type.value,
            transaction.amount,
            transaction.category,
        )
        return transaction

    def get_all(self) -> List[Transaction]:
        """Return a snapshot of the ledger in insertion order."""

        return list(self._transactions)

    def get_by_id(self, transaction_id: int) -> Transaction:
        """Retrieve a transaction, raising ``NotFoundError`` when missing."""

        transaction = self._transactions[self._index_of(transaction_id)]
        LOGGER.debug("Fetched transaction %s", transaction_id)
        return transaction

    def update(self, transaction_id: int, payload: Mapping[str, Any]) -> Transaction:
        """Replace every field of a transaction except its identifier."""

        index = self._index_of(transaction_id)
        fields = coerce_payload(payload)
        updated = replace(self._transactions[index], **fields)
        self._transactions[index] = updated
        LOGGER.info("Updated transaction %s", transaction_id)
        return updated

    def delete(self, transaction_id: int) -> Transaction:
        """Remove a transaction and return the record that was dropped."""

        removed = self._transactions.pop(self._index_of(transaction_id))
        LOGGER.info("Deleted transaction %s", transaction_id)
        return removed
