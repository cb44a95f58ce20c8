"""
Ledger Balance Calculator

DESIGN DECISION: Single pass, no sorting.
The caller owns ordering (normally by date). Re-sorting here would hide
ordering bugs upstream and make intermediate balances disagree with the
table the user is looking at.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from src.core.money import CENT
from src.engine.rollup import ZERO, rollup_by_category, totals_by_type
from src.models.ledger import Transaction, TransactionType
from src.models.results import BalanceEntry, PeriodSummary, RunningBalance


def running_balance(
    transactions: Iterable[Transaction],
    period: Optional[str] = None,
) -> RunningBalance:
    """
    Balance after each transaction, in the order given.
    
    entries[i].balance is the net effect of transactions[0..i]. An empty
    input gives no entries and a final balance of 0.
    """
    balance = ZERO
    entries = []
    
    for txn in transactions:
        if not txn.matches_period(period):
            continue
        balance += txn.signed_amount
        entries.append(BalanceEntry(transaction_id=txn.id, balance=balance))
    
    return RunningBalance(period=period, entries=entries, final_balance=balance)


def period_summary(
    transactions: Iterable[Transaction],
    period: str,
) -> PeriodSummary:
    """Headline income/expense figures for one period."""
    in_period = [txn for txn in transactions if txn.matches_period(period)]
    income, expenses = totals_by_type(in_period)
    net = income - expenses
    
    average = ZERO
    if in_period:
        total = sum((txn.amount for txn in in_period), ZERO)
        average = (total / len(in_period)).quantize(CENT, rounding=ROUND_HALF_UP)
    
    savings_rate = float(net / income * 100) if income > 0 else 0.0
    
    return PeriodSummary(
        period=period,
        total_income=income,
        total_expenses=expenses,
        net=net,
        transaction_count=len(in_period),
        average_transaction=average,
        savings_rate=savings_rate,
        expense_breakdown=rollup_by_category(in_period, TransactionType.EXPENSE),
    )
