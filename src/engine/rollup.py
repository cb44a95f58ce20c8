"""
Category Rollup

Sums transaction amounts by category for one type and period. The result
is sparse: a category with no matching transaction has no key at all.
Callers that need zero-filled rows cross-reference the category list
themselves (see budgets.budget_utilization).
"""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Optional

from src.models.ledger import Transaction, TransactionType


ZERO = Decimal("0.00")


def rollup_by_category(
    transactions: Iterable[Transaction],
    txn_type: TransactionType,
    period: Optional[str] = None,
) -> dict[str, Decimal]:
    """
    Map category name -> summed amount for `txn_type` within `period`.
    
    `period` is a date prefix ("2026-03", "2026"); None means all dates.
    Order of the input does not matter.
    """
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    
    for txn in transactions:
        if txn.type != txn_type or not txn.matches_period(period):
            continue
        totals[txn.category] += txn.amount
    
    return dict(totals)


def totals_by_type(
    transactions: Iterable[Transaction],
    period: Optional[str] = None,
) -> tuple[Decimal, Decimal]:
    """Return (income, expenses) within `period`."""
    income = ZERO
    expenses = ZERO
    
    for txn in transactions:
        if not txn.matches_period(period):
            continue
        if txn.type == TransactionType.INCOME:
            income += txn.amount
        else:
            expenses += txn.amount
    
    return income, expenses


def annual_income(transactions: Iterable[Transaction], year: int) -> Decimal:
    """Total income recorded in calendar `year`."""
    income, _ = totals_by_type(transactions, period=f"{year:04d}")
    return income
