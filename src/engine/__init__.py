"""
Aggregation engine package.

Every function here is pure: same inputs, same result, no I/O and no
wall clock. `today` is always an argument.
"""

from src.engine.balance import period_summary, running_balance
from src.engine.budgets import budget_utilization, classify_utilization, utilization_line
from src.engine.goals import add_to_goal, goal_progress, progress_percentage, time_remaining
from src.engine.rollup import annual_income, rollup_by_category, totals_by_type
from src.engine.tax import estimate_tax, social_security_contribution
from src.engine.trends import month_window, monthly_trend

__all__ = [
    # Ledger balance
    "period_summary",
    "running_balance",
    # Rollup
    "annual_income",
    "rollup_by_category",
    "totals_by_type",
    # Budgets
    "budget_utilization",
    "classify_utilization",
    "utilization_line",
    # Trends
    "month_window",
    "monthly_trend",
    # Goals
    "add_to_goal",
    "goal_progress",
    "progress_percentage",
    "time_remaining",
    # Tax
    "estimate_tax",
    "social_security_contribution",
]
