"""Mini README: Type filter and free-text search over a ledger snapshot.

``filter_and_search`` keeps records whose type matches the filter (``all``
admits everything) and whose description or category contains the search
term, ignoring case. Both predicates must hold. The output keeps the
snapshot's relative order.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .errors import ValidationError
from .models import Transaction, TransactionType

TYPE_FILTER_ALL = "all"


def _normalise_type_filter(type_filter: Optional[str]) -> Optional[TransactionType]:
    """Return ``None`` for ``all`` or the matching transaction type."""

    normalised = str(type_filter or TYPE_FILTER_ALL).strip().lower()
    if normalised == TYPE_FILTER_ALL:
        return None
    try:
        return TransactionType(normalised)
    except ValueError as error:
        raise ValidationError(
            f"Unsupported type filter {type_filter!r}; expected all, income or expense."
        ) from error


def filter_and_search(
    transactions: Iterable[Transaction],
    type_filter: Optional[str] = TYPE_FILTER_ALL,
    search_term: Optional[str] = "",
) -> List[Transaction]:
    """Return the transactions matching both the type filter and the search term."""

    wanted_type = _normalise_type_filter(type_filter)
    needle = str(search_term or "").lower()
    return [
        transaction
        for transaction in transactions
        if (wanted_type is None or transaction.transaction_type is wanted_type)
        and (needle in transaction.description.lower() or needle in transaction.category.lower())
    ]
