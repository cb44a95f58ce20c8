"""
Dashboard Facade for Personal Ledger

This module ties the engine components together for one dataset snapshot:
1. Validate raw records (skip bad rows, collect issues)
2. Derive every view for the selected month
3. Return one value object for the presentation layer

DESIGN DECISION: The facade is the only place that reads settings.
Engine functions get plain arguments, so they stay reusable and tests
never need environment variables.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Optional, Sequence

from pydantic import BaseModel, Field

from src.audit import IssueLogger, get_logger
from src.config import EngineSettings, TaxSettings, get_settings
from src.core.money import format_amount
from src.core.periods import month_key, validate_period
from src.engine import (
    annual_income,
    budget_utilization,
    estimate_tax,
    goal_progress,
    monthly_trend,
    period_summary,
    rollup_by_category,
    running_balance,
)
from src.models.issues import RecordIssue
from src.models.ledger import Transaction, TransactionType
from src.models.results import (
    BudgetReport,
    GoalProgress,
    PeriodSummary,
    RunningBalance,
    TaxSummary,
    TrendPoint,
)
from src.validation import RecordValidator


class LedgerSnapshot(BaseModel):
    """Raw record collections as fetched by the transport layer."""

    transactions: list[Any] = Field(default_factory=list)
    categories: list[Any] = Field(default_factory=list)
    budgets: list[Any] = Field(default_factory=list)
    goals: list[Any] = Field(default_factory=list)


class DashboardView(BaseModel):
    """Every derived figure for one period of one snapshot."""

    period: str
    today: date
    summary: PeriodSummary
    balance: RunningBalance
    expense_rollup: dict[str, Decimal]
    income_rollup: dict[str, Decimal]
    budgets: BudgetReport
    trend: list[TrendPoint]
    goals: list[GoalProgress]
    tax: Optional[TaxSummary] = None
    issues: list[RecordIssue] = Field(default_factory=list)


class Dashboard:
    """
    Builds DashboardView objects.

    Usage:
        view = Dashboard().build(snapshot, period="2026-03", today=date.today())
    """

    def __init__(
        self,
        engine_settings: Optional[EngineSettings] = None,
        tax_settings: Optional[TaxSettings] = None,
    ):
        settings = get_settings()
        self._engine_settings = engine_settings or settings.engine
        self._tax_settings = tax_settings or settings.tax
        self._logger = get_logger(__name__)

    def build(
        self,
        snapshot: LedgerSnapshot,
        today: date,
        period: Optional[str] = None,
        include_tax: bool = True,
    ) -> DashboardView:
        """
        Derive every view for `period` (defaults to today's month).

        Raises:
            InvalidDate: if `period` is not a YYYY-MM key
        """
        period = validate_period(period) if period else month_key(today)

        issue_logger = IssueLogger()
        validator = RecordValidator(issue_logger)

        transactions = validator.transactions(snapshot.transactions)
        categories = validator.categories(snapshot.categories)
        budgets = validator.budgets(snapshot.budgets)
        goals = validator.goals(snapshot.goals)
        validator.reconcile_categories(transactions, categories)

        expense_rollup = rollup_by_category(transactions, TransactionType.EXPENSE, period)

        view = DashboardView(
            period=period,
            today=today,
            summary=period_summary(transactions, period),
            balance=running_balance(transactions, period),
            expense_rollup=expense_rollup,
            income_rollup=rollup_by_category(transactions, TransactionType.INCOME, period),
            budgets=budget_utilization(
                categories,
                budgets,
                expense_rollup,
                period=period,
                issue_logger=issue_logger,
                flag_spending=False,
            ),
            trend=monthly_trend(
                transactions,
                today,
                months=self._engine_settings.trend_window_months,
            ),
            goals=[goal_progress(goal, today) for goal in goals],
            tax=self.tax_for_year(transactions, int(period[:4])) if include_tax else None,
            issues=issue_logger.issues,
        )

        self._logger.info(
            "dashboard_built",
            period=period,
            transaction_count=len(transactions),
            issue_count=len(view.issues),
        )
        return view

    def tax_for_year(
        self,
        transactions: Sequence[Transaction],
        year: int,
    ) -> TaxSummary:
        """Tax estimate on the income recorded in `year`."""
        income = annual_income(transactions, year)
        return estimate_tax(self._tax_settings.to_parameters(income, year))

    def format(self, amount: Any, signed: bool = False) -> str:
        """Format an amount with the configured locale and symbol."""
        return format_amount(
            amount,
            locale=self._engine_settings.default_locale,
            symbol=self._engine_settings.currency_symbol,
            signed=signed,
        )
