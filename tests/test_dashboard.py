"""Tests for the dashboard facade."""

import pytest
from datetime import date
from decimal import Decimal

from src.config.settings import EngineSettings, TaxSettings
from src.core.errors import InvalidAmount, InvalidDate
from src.dashboard import Dashboard, LedgerSnapshot
from src.models.issues import IssueType
from src.models.results import BudgetStatus


TODAY = date(2026, 3, 20)


@pytest.fixture
def dashboard() -> Dashboard:
    return Dashboard(
        engine_settings=EngineSettings(_env_file=None, currency_symbol="฿", default_locale="th-TH"),
        tax_settings=TaxSettings(_env_file=None),
    )


@pytest.fixture
def snapshot() -> LedgerSnapshot:
    return LedgerSnapshot(
        transactions=[
            {"id": "t1", "date": "2026-03-01", "description": "Salary",
             "category": "Salary", "type": "income", "amount": "1000.00"},
            {"id": "t2", "date": "2026-03-02", "description": "Groceries",
             "category": "Food", "type": "expense", "amount": "85.00"},
            {"id": "t3", "date": "2026-03-03", "description": "Bus",
             "category": "Transport", "type": "expense", "amount": "60.00"},
            {"id": "t4", "date": "2026-02-11", "description": "Dinner",
             "category": "Food", "type": "expense", "amount": "30.00"},
            {"id": "t5", "date": "2026-03-04", "description": "Broken",
             "category": "Food", "type": "expense", "amount": "n/a"},
        ],
        categories=[
            {"id": "c1", "name": "Food", "type": "expense", "icon": "fas fa-utensils", "color": "#FF6347"},
            {"id": "c2", "name": "Salary", "type": "income", "icon": "fas fa-money-bill-wave", "color": "#3CB371"},
            {"id": "c3", "name": "Transport", "type": "expense", "icon": "fas fa-bus", "color": "#4682B4"},
        ],
        budgets=[
            {"id": "b1", "category": "Food", "amount": "100.00", "month": "2026-03", "spent": "0"},
            {"id": "b2", "category": "Transport", "amount": "50.00", "month": "2026-03", "spent": "0"},
        ],
        goals=[
            {"id": "g1", "title": "Trip", "targetAmount": "1000.00", "currentAmount": "250.00",
             "deadline": "2026-06-18", "icon": "fas fa-plane"},
        ],
    )


class TestDashboard:
    """End-to-end tests over one snapshot."""
    
    def test_build_current_month(self, dashboard, snapshot):
        """Test every view is derived for today's month."""
        view = dashboard.build(snapshot, today=TODAY)
        
        assert view.period == "2026-03"
        assert view.balance.balances == [Decimal("1000"), Decimal("915"), Decimal("855")]
        assert view.summary.total_expenses == Decimal("145")
        assert view.expense_rollup == {"Food": Decimal("85"), "Transport": Decimal("60")}
        assert view.income_rollup == {"Salary": Decimal("1000")}
        
        food = view.budgets.line_for("Food")
        transport = view.budgets.line_for("Transport")
        assert food.status == BudgetStatus.WARNING
        assert food.remaining == Decimal("15")
        assert transport.status == BudgetStatus.OVER
        assert transport.percentage_text == "120.0%"
        
        assert len(view.trend) == 6
        assert view.trend[-1].month == "2026-03"
        assert view.trend[-2].expenses == Decimal("30")
        
        assert view.goals[0].percentage == 25.0
        assert view.goals[0].time_remaining == "3 months remaining"
    
    def test_bad_row_reported_not_fatal(self, dashboard, snapshot):
        """Test the malformed row is skipped and reported."""
        view = dashboard.build(snapshot, today=TODAY)
        assert [issue.issue_type for issue in view.issues] == [IssueType.INVALID_AMOUNT]
        assert view.issues[0].record_id == "t5"
    
    def test_malformed_rows_never_abort(self, dashboard, snapshot):
        """Test oversized amounts, long categories and non-mapping rows are reported."""
        snapshot.transactions.extend([
            {"id": "t6", "date": "2026-03-05", "category": "Food", "type": "expense", "amount": "1" * 40},
            {"id": "t7", "date": "2026-03-06", "category": "Food", "type": "expense", "amount": "x" * 600},
            {"id": "t8", "date": "2026-03-07", "category": "G" * 600, "type": "expense", "amount": "7.00"},
            None,
        ])
        view = dashboard.build(snapshot, today=TODAY)

        by_record = {issue.record_id: issue.issue_type for issue in view.issues}
        assert by_record["t6"] == IssueType.INVALID_AMOUNT
        assert by_record["t7"] == IssueType.INVALID_AMOUNT
        assert by_record["t8"] == IssueType.MISSING_CATEGORY
        assert by_record[None] == IssueType.INVALID_RECORD
        assert view.expense_rollup["G" * 600] == Decimal("7.00")

    def test_unknown_category_flagged_once(self, dashboard, snapshot):
        """Test spending under an unknown category yields a single warning."""
        snapshot.transactions.append(
            {"id": "t9", "date": "2026-03-08", "category": "Gifts", "type": "expense", "amount": "12.00"}
        )
        view = dashboard.build(snapshot, today=TODAY)

        missing = [issue for issue in view.issues if issue.issue_type == IssueType.MISSING_CATEGORY]
        assert len(missing) == 1
        assert missing[0].record_id == "t9"

    def test_same_snapshot_same_view(self, dashboard, snapshot):
        """Test building twice gives equal views, issues included."""
        first = dashboard.build(snapshot, today=TODAY)
        second = dashboard.build(snapshot, today=TODAY)
        assert first.issues
        assert first == second

    def test_selected_period(self, dashboard, snapshot):
        """Test an explicit period overrides today's month."""
        view = dashboard.build(snapshot, today=TODAY, period="2026-02")
        assert view.balance.final_balance == Decimal("-30")
        assert view.budgets.line_for("Food").has_budget is False
    
    def test_invalid_period(self, dashboard, snapshot):
        """Test a malformed period raises InvalidDate."""
        with pytest.raises(InvalidDate):
            dashboard.build(snapshot, today=TODAY, period="2026/03")
    
    def test_tax_on_recorded_income(self, dashboard, snapshot):
        """Test the tax estimate uses income recorded in the period's year."""
        view = dashboard.build(snapshot, today=TODAY)
        assert view.tax.year == 2026
        assert view.tax.annual_income == Decimal("1000")
        assert view.tax.tax_amount == Decimal("0")
        
        assert dashboard.build(snapshot, today=TODAY, include_tax=False).tax is None
    
    def test_empty_snapshot(self, dashboard):
        """Test an empty snapshot still renders."""
        view = dashboard.build(LedgerSnapshot(), today=TODAY)
        assert view.balance.final_balance == Decimal("0")
        assert view.budgets.lines == []
        assert len(view.trend) == 6
        assert view.issues == []
    
    def test_format(self, dashboard):
        """Test amounts are formatted with the configured symbol."""
        assert dashboard.format(Decimal("1234.5")) == "฿1,234.50"
        assert dashboard.format(Decimal("855"), signed=True) == "+฿855.00"

    def test_format_rejects_non_numeric(self, dashboard):
        """Test formatting garbage raises InvalidAmount."""
        with pytest.raises(InvalidAmount):
            dashboard.format("n/a")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
