"""Mini README: Transaction records and payload coercion.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * Transaction - frozen, slotted dataclass holding one ledger entry.
    * coerce_payload - validates a wire payload into constructor arguments.

Payloads use the wire keys ``amount``, ``type``, ``category``,
``description``, ``date`` and ``tags``. Any ``id`` key is ignored because
identifiers belong to the store. Amounts may arrive as numeric strings and
tags as a comma separated string, mirroring what a form submits.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import ValidationError

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class TransactionType(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: object) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        if isinstance(value, cls):
            return value
        try:
            normalised = str(value).strip().lower()
            return cls(normalised)
        except ValueError as error:
            raise ValidationError(f"Unsupported transaction type: {value!r}") from error


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a ledger entry."""

    transaction_id: int
    transaction_type: TransactionType
    amount: float
    category: str
    description: str
    occurred_on: date
    tags: Tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, transaction_id: int, payload: Mapping[str, Any]) -> "Transaction":
        """Build a transaction from a wire payload, validating every field."""

        return cls(transaction_id=transaction_id, **coerce_payload(payload))

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable wire values."""

        return {
            "id": self.transaction_id,
            "amount": self.amount,
            "type": self.transaction_type.value,
            "category": self.category,
            "description": self.description,
            "date": self.occurred_on.isoformat(),
            "tags": list(self.tags),
        }


def coerce_payload(payload: Optional[Mapping[str, Any]]) -> Dict[str, object]:
    """Validate a create/update payload and return dataclass keyword arguments."""

    if payload is None:
        raise ValidationError("A transaction payload is required.")
    if not isinstance(payload, Mapping):
        raise ValidationError("Transaction payloads must be mappings of field names to values.")

    return {
        "transaction_type": TransactionType.from_str(payload.get("type")),
        "amount": _parse_amount(payload.get("amount")),
        "category": _require_text(payload.get("category"), "category"),
        "description": _require_text(payload.get("description"), "description"),
        "occurred_on": _parse_date(payload.get("date")),
        "tags": _parse_tags(payload.get("tags")),
    }


def _parse_amount(value: object) -> float:
    """Return a finite, non-negative float or raise ``ValidationError``."""

    if isinstance(value, bool) or value is None:
        raise ValidationError(f"Amount must be a number, got {value!r}.")
    if isinstance(value, str):
        try:
            amount = float(value.strip())
        except ValueError as error:
            raise ValidationError(f"Amount must be a number, got {value!r}.") from error
    elif isinstance(value, (int, float)):
        try:
            amount = float(value)
        except OverflowError as error:
            raise ValidationError("Amount must be a finite number.") from error
    else:
        raise ValidationError(f"Amount must be a number, got {value!r}.")
    if not math.isfinite(amount):
        raise ValidationError("Amount must be a finite number.")
    if amount < 0:
        raise ValidationError(f"Amount must not be negative, got {amount}.")
    return amount


def _require_text(value: object, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Field '{field_name}' must be a non-empty string.")
    return value


def _parse_date(value: object) -> date:
    """Parse ``YYYY-MM-DD`` strings or date objects; default to today."""

    if value is None or value == "":
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        if not _ISO_DATE.fullmatch(value):
            raise ValidationError(f"Dates must use the YYYY-MM-DD form, got {value!r}.")
        try:
            return date.fromisoformat(value)
        except ValueError as error:
            raise ValidationError(f"Dates must use the YYYY-MM-DD form, got {value!r}.") from error
    raise ValidationError("Dates must be provided as ISO strings or date/datetime instances.")


def _parse_tags(value: object) -> Tuple[str, ...]:
    """Accept a list of non-empty strings or a comma separated string.

    Only the comma separated form is trimmed and stripped of blank tokens;
    list entries are kept exactly as given.
    """

    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(token.strip() for token in value.split(",") if token.strip())
    if not isinstance(value, (list, tuple)):
        raise ValidationError("Tags must be a list of strings or a comma separated string.")

    for tag in value:
        if not isinstance(tag, str):
            raise ValidationError(f"Tags must be strings, got {tag!r}.")
        if not tag.strip():
            raise ValidationError("Tags must not be empty.")
    return tuple(value)
