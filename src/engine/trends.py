"""
Trend Aggregator

Per-month income/expense/net over a trailing window of calendar months.

DESIGN DECISION: The window comes from the calendar, not from the data.
Months without transactions still appear with zeros so a chart shows
the gap instead of silently joining neighbouring months.
"""

from datetime import date
from typing import Iterable

from src.core.periods import month_label, shift_month
from src.engine.rollup import totals_by_type
from src.models.ledger import Transaction
from src.models.results import TrendPoint


DEFAULT_WINDOW = 6


def month_window(today: date, months: int = DEFAULT_WINDOW) -> list[str]:
    """
    The last `months` calendar months ending with today's month,
    oldest first.
    """
    if months < 1:
        raise ValueError("Trend window must cover at least one month")
    return [shift_month(today, -offset) for offset in range(months - 1, -1, -1)]


def monthly_trend(
    transactions: Iterable[Transaction],
    today: date,
    months: int = DEFAULT_WINDOW,
) -> list[TrendPoint]:
    """Exactly `months` points, oldest first."""
    transactions = list(transactions)
    points = []
    
    for month in month_window(today, months):
        income, expenses = totals_by_type(transactions, period=month)
        points.append(TrendPoint(
            month=month,
            label=month_label(month),
            income=income,
            expenses=expenses,
            net=income - expenses,
        ))
    
    return points
