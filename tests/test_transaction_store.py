"""Mini README: Tests covering the in-memory transaction store.

Structure:
    * creation - id assignment, validation, payload coercion.
    * lookup/update/delete - NotFoundError handling and field replacement.
    * identifier reuse - running maximum after deleting the newest record.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from txledger.ledger import (
    NotFoundError,
    Transaction,
    TransactionStore,
    TransactionType,
    ValidationError,
)


def _payload(**overrides: object) -> dict:
    payload = {
        "amount": 100,
        "type": "expense",
        "category": "Food",
        "description": "Coffee",
        "date": "2026-01-16",
        "tags": [],
    }
    payload.update(overrides)
    return payload


def test_create_assigns_next_id_after_seed() -> None:
    """New records take max id + 1 and land at the end of the ledger."""

    store = TransactionStore(seed_demo=True)

    created = store.create(_payload())

    assert created.transaction_id == 4
    assert store.get_all()[-1] is created
    assert len(store) == 4


def test_create_on_empty_store_starts_at_one() -> None:
    store = TransactionStore()

    assert store.create(_payload()).transaction_id == 1
    assert store.create(_payload()).transaction_id == 2


def test_get_by_id_round_trips_created_fields() -> None:
    """The stored record matches the payload apart from the assigned id."""

    store = TransactionStore()
    payload = _payload(tags=["cafe", "cafe", "morning"])

    created = store.create(payload)
    fetched = store.get_by_id(created.transaction_id).as_dict()

    assert fetched.pop("id") == created.transaction_id
    assert fetched == {**payload, "amount": 100.0}


def test_create_ignores_caller_supplied_id() -> None:
    store = TransactionStore(seed_demo=True)

    created = store.create(_payload(id=99))

    assert created.transaction_id == 4


@pytest.mark.parametrize(
    "overrides",
    [
        {"amount": -5},
        {"amount": float("nan")},
        {"amount": float("inf")},
        {"amount": "abc"},
        {"amount": True},
        {"amount": None},
        {"category": ""},
        {"category": "   "},
        {"description": ""},
        {"type": "transfer"},
        {"date": "16/01/2026"},
        {"tags": 5},
        {"tags": ["cafe", ""]},
        {"tags": ["cafe", "   "]},
        {"amount": 10**400},
        {"amount": -(10**400)},
        {"date": "2026-1-5"},
        {"date": "20260105"},
        {"date": "2026-W03-5"},
        {"date": "2026-02-30"},
    ],
)
def test_create_rejects_invalid_payloads(overrides: dict) -> None:
    """Invalid payloads raise ValidationError and leave the ledger unchanged."""

    store = TransactionStore(seed_demo=True)
    before = [transaction.as_dict() for transaction in store.get_all()]

    with pytest.raises(ValidationError):
        store.create(_payload(**overrides))

    assert [transaction.as_dict() for transaction in store.get_all()] == before


def test_validation_error_is_a_value_error() -> None:
    store = TransactionStore()

    with pytest.raises(ValueError):
        store.create(_payload(amount=-1))


def test_create_coerces_form_style_values() -> None:
    """Numeric strings, mixed-case types and comma separated tags are accepted."""

    store = TransactionStore()

    created = store.create(
        _payload(amount=" 12.75 ", type=" Income ", tags="work, , bonus,work")
    )

    assert created.amount == pytest.approx(12.75)
    assert created.transaction_type is TransactionType.INCOME
    assert created.tags == ("work", "bonus", "work")


def test_create_defaults_missing_date_to_today() -> None:
    store = TransactionStore()
    payload = _payload()
    del payload["date"]

    assert store.create(payload).occurred_on == date.today()


def test_get_all_returns_snapshot() -> None:
    """Mutating the returned list must not affect the store."""

    store = TransactionStore(seed_demo=True)

    snapshot = store.get_all()
    snapshot.clear()

    assert len(store.get_all()) == 3


def test_get_by_id_missing_raises_not_found() -> None:
    store = TransactionStore(seed_demo=True)

    with pytest.raises(NotFoundError) as excinfo:
        store.get_by_id(42)

    assert str(excinfo.value) == "Transaction 42 not found"
    assert isinstance(excinfo.value, KeyError)


def test_update_preserves_id_and_position() -> None:
    """Updates overwrite every field except the identifier."""

    store = TransactionStore(seed_demo=True)

    updated = store.update(
        1,
        {
            "amount": 1300,
            "type": "income",
            "category": "Salary",
            "description": "Monthly salary",
            "date": "2026-01-15",
            "tags": ["work"],
        },
    )

    assert updated.transaction_id == 1
    assert store.get_all()[0] is updated
    assert updated.as_dict() == {
        "id": 1,
        "amount": 1300.0,
        "type": "income",
        "category": "Salary",
        "description": "Monthly salary",
        "date": "2026-01-15",
        "tags": ["work"],
    }


def test_update_can_change_type() -> None:
    store = TransactionStore(seed_demo=True)

    updated = store.update(2, _payload(type="income", description="Refund"))

    assert updated.transaction_type is TransactionType.INCOME
    assert updated.description == "Refund"


def test_update_with_invalid_payload_keeps_record() -> None:
    store = TransactionStore(seed_demo=True)
    original = store.get_by_id(3)

    with pytest.raises(ValidationError):
        store.update(3, _payload(description=""))

    assert store.get_by_id(3) is original


def test_delete_then_lookup_and_update_fail() -> None:
    """Deleted identifiers are gone for lookups, updates and repeat deletes."""

    store = TransactionStore(seed_demo=True)

    removed = store.delete(2)

    assert removed.description == "Grocery shopping"
    assert len(store.get_all()) == 2
    with pytest.raises(NotFoundError):
        store.get_by_id(2)
    with pytest.raises(NotFoundError):
        store.update(2, _payload())
    with pytest.raises(NotFoundError):
        store.delete(2)


def test_deleting_highest_id_allows_reuse() -> None:
    """The running maximum hands the freed number to the next create."""

    store = TransactionStore(seed_demo=True)

    store.delete(3)
    created = store.create(_payload())

    assert created.transaction_id == 3


def test_deleting_middle_id_does_not_fill_gap() -> None:
    store = TransactionStore(seed_demo=True)

    store.delete(2)

    assert store.create(_payload()).transaction_id == 4


def test_constructor_rejects_duplicate_ids() -> None:
    record = Transaction(
        transaction_id=1,
        transaction_type=TransactionType.EXPENSE,
        amount=1.0,
        category="Misc",
        description="Duplicate",
        occurred_on=date(2026, 1, 1),
    )

    with pytest.raises(ValidationError):
        TransactionStore(transactions=[record, record])


def test_explicit_transactions_skip_demo_seed() -> None:
    store = TransactionStore(transactions=[], seed_demo=True)

    assert store.get_all() == []


def test_text_and_list_tags_are_stored_as_given() -> None:
    """Padded text and list tags read back unchanged."""

    store = TransactionStore()
    payload = _payload(description="  Coffee ", category="Food ", tags=[" cafe", "cafe", "late "])

    created = store.create(payload)
    fetched = store.get_by_id(created.transaction_id).as_dict()

    assert fetched.pop("id") == created.transaction_id
    assert fetched == {**payload, "amount": 100.0}


def test_unpadded_date_is_rejected_with_message() -> None:
    store = TransactionStore()

    with pytest.raises(ValidationError, match="YYYY-MM-DD"):
        store.create(_payload(date="2026-1-5"))


def test_returned_records_cannot_be_mutated() -> None:
    """Records handed out are frozen so callers cannot bypass validation."""

    store = TransactionStore(seed_demo=True)
    record = store.get_by_id(1)

    with pytest.raises(FrozenInstanceError):
        record.amount = -10.0
    with pytest.raises(AttributeError):
        record.tags.append("hacked")

    assert store.get_by_id(1).amount == pytest.approx(1250.0)
    assert store.get_by_id(1).tags == ("work", "regular")
