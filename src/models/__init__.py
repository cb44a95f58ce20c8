"""
Data Models Package

This package contains all Pydantic models used by the Personal Ledger engine:
input records, derived values and record issues.
"""

from src.models.ledger import (
    Budget,
    Category,
    Goal,
    Transaction,
    TransactionType,
)
from src.models.issues import (
    IssueBuilder,
    IssueSeverity,
    IssueType,
    RecordIssue,
)
from src.models.results import (
    BalanceEntry,
    BracketTax,
    BudgetLine,
    BudgetReport,
    BudgetStatus,
    DeadlineStatus,
    GoalProgress,
    MonthlyAverage,
    PeriodSummary,
    RunningBalance,
    TaxBracket,
    TaxDeductions,
    TaxParameters,
    TaxSummary,
    TrendPoint,
)

__all__ = [
    # Records
    "Budget",
    "Category",
    "Goal",
    "Transaction",
    "TransactionType",
    # Issues
    "IssueBuilder",
    "IssueSeverity",
    "IssueType",
    "RecordIssue",
    # Results
    "BalanceEntry",
    "BracketTax",
    "BudgetLine",
    "BudgetReport",
    "BudgetStatus",
    "DeadlineStatus",
    "GoalProgress",
    "MonthlyAverage",
    "PeriodSummary",
    "RunningBalance",
    "TaxBracket",
    "TaxDeductions",
    "TaxParameters",
    "TaxSummary",
    "TrendPoint",
]
