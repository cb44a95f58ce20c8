"""
Budget Utilization Engine

Combines the expense rollup for a month with that month's budget caps.

Status tiers are fixed, strict comparisons, first match wins:
    percentage > 100  -> over
    percentage > 80   -> warning
    otherwise         -> good
"""

from decimal import Decimal
from typing import Iterable, Mapping, Optional

from src.audit import IssueLogger
from src.engine.rollup import ZERO
from src.models.ledger import Budget, Category, TransactionType
from src.models.results import BudgetLine, BudgetReport, BudgetStatus


OVER_THRESHOLD = Decimal("100")
WARNING_THRESHOLD = Decimal("80")


def classify_utilization(percentage: Decimal) -> BudgetStatus:
    if percentage > OVER_THRESHOLD:
        return BudgetStatus.OVER
    if percentage > WARNING_THRESHOLD:
        return BudgetStatus.WARNING
    return BudgetStatus.GOOD


def _first_budget_by_category(budgets: Iterable[Budget]) -> dict[str, Budget]:
    # Duplicates per (category, month) are a storage problem; first one wins.
    matched: dict[str, Budget] = {}
    for budget in budgets:
        matched.setdefault(budget.category, budget)
    return matched


def utilization_line(
    category: str,
    spent: Decimal,
    budget: Optional[Budget],
) -> BudgetLine:
    """Utilization of a single category."""
    budget_amount = budget.amount if budget is not None else ZERO
    
    if budget_amount > 0:
        percentage = spent / budget_amount * 100
    else:
        percentage = Decimal("0")
    
    return BudgetLine(
        category=category,
        budget=budget_amount,
        spent=spent,
        remaining=max(ZERO, budget_amount - spent),
        percentage=float(percentage),
        display_percentage=float(min(OVER_THRESHOLD, percentage)),
        status=classify_utilization(percentage),
        has_budget=budget is not None,
    )


def budget_utilization(
    categories: Iterable[Category],
    budgets: Iterable[Budget],
    rollup: Mapping[str, Decimal],
    period: Optional[str] = None,
    issue_logger: Optional[IssueLogger] = None,
    flag_spending: bool = True,
) -> BudgetReport:
    """
    One line per expense category, in category-list order.
    
    Args:
        categories: the full category list (income categories are ignored)
        budgets: budget rows; when `period` is given, rows for other
            months are ignored
        rollup: expense rollup for the same period
        period: YYYY-MM of the report
        issue_logger: receives MissingCategory issues for budgets and
            spending that reference categories outside the expense list
        flag_spending: set to False when the transactions were already
            reconciled against the category list, so rollup keys are not
            reported a second time
    """
    issues = issue_logger or IssueLogger()
    first_issue = len(issues.issues)
    
    expense_names = [c.name for c in categories if c.type == TransactionType.EXPENSE]
    official = set(expense_names)
    
    in_period = [b for b in budgets if period is None or b.month == period]
    by_category = _first_budget_by_category(in_period)
    
    lines = [
        utilization_line(name, rollup.get(name, ZERO), by_category.get(name))
        for name in dict.fromkeys(expense_names)
    ]
    
    for budget in in_period:
        if budget.category not in official:
            issues.log_missing_category("budget", budget.id, budget.category)
    if flag_spending:
        for name in rollup:
            if name not in official:
                issues.log_missing_category("rollup", None, name)
    
    return BudgetReport(
        period=period or "",
        lines=lines,
        total_budget=sum((line.budget for line in lines), ZERO),
        total_spent=sum((line.spent for line in lines), ZERO),
        issues=issues.issues[first_issue:],
    )
