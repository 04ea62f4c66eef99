"""Mini README: Aggregate statistics computed from a ledger snapshot.

Structure:
    * LedgerAnalytics - immutable result with totals and category sums.
    * AnalyticsEngine - stateless aggregator recomputed on every call.
    * format_amount - two decimal rendering used by the console.

Category sums add income and expense amounts together rather than netting
them, and only categories present in the snapshot appear.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable

from .models import Transaction, TransactionType


@dataclass(frozen=True, slots=True)
class LedgerAnalytics:
    """Derived figures for one ledger snapshot."""

    total_income: float
    total_expense: float
    balance: float
    transaction_count: int
    category_breakdown: Dict[str, float] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, object]:
        """Export the figures using the gateway's wire keys."""

        return {
            "totalIncome": self.total_income,
            "totalExpense": self.total_expense,
            "balance": self.balance,
            "transactionCount": self.transaction_count,
            "categoryBreakdown": dict(self.category_breakdown),
        }


class AnalyticsEngine:
    """Compute totals, balance and per-category sums."""

    def compute(self, transactions: Iterable[Transaction]) -> LedgerAnalytics:
        total_income = 0.0
        total_expense = 0.0
        count = 0
        breakdown: Dict[str, float] = {}
        for transaction in transactions:
            count += 1
            if transaction.transaction_type is TransactionType.INCOME:
                total_income += transaction.amount
            else:
                total_expense += transaction.amount
            breakdown[transaction.category] = breakdown.get(transaction.category, 0.0) + transaction.amount
        return LedgerAnalytics(
            total_income=total_income,
            total_expense=total_expense,
            balance=total_income - total_expense,
            transaction_count=count,
            category_breakdown=breakdown,
        )


def format_amount(value: float) -> str:
    """Render an amount with two decimals, e.g. ``1084.50``."""

    return f"{value:.2f}"
