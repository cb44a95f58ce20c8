"""
Tests for Personal Ledger models

Test strategy:
1. Unit tests for records, derived values and issues
2. No environment or wall clock needed (today is always passed in)
"""

import pytest
from datetime import date
from decimal import Decimal

from pydantic import ValidationError

from src.models.issues import IssueBuilder, IssueSeverity, IssueType, RecordIssue
from src.models.ledger import Budget, Category, Goal, Transaction, TransactionType
from src.models.results import BudgetLine, BudgetStatus, TaxBracket


class TestLedgerModels:
    """Tests for ledger record models."""
    
    def test_transaction_parses_amount_text(self):
        """Test amount text becomes Decimal cents."""
        txn = Transaction(
            id="t1",
            date="2026-03-01",
            category="Food",
            type="expense",
            amount="85.5",
        )
        assert txn.amount == Decimal("85.50")
        assert txn.type == TransactionType.EXPENSE
        assert txn.date == date(2026, 3, 1)
    
    def test_transaction_rejects_negative_amount(self):
        """Test that negative amounts are rejected."""
        with pytest.raises(ValidationError):
            Transaction(
                id="t1",
                date="2026-03-01",
                category="Food",
                type="expense",
                amount="-10",
            )
    
    def test_transaction_rejects_unknown_type(self):
        """Test there is no third transaction type."""
        with pytest.raises(ValidationError):
            Transaction(
                id="t1",
                date="2026-03-01",
                category="Food",
                type="transfer",
                amount="10",
            )
    
    def test_transaction_is_immutable(self):
        """Test transactions cannot be changed after creation."""
        txn = Transaction(id="t1", date="2026-03-01", category="Food", type="income", amount="1")
        with pytest.raises(ValidationError):
            txn.amount = Decimal("2")
    
    def test_transaction_period_and_prefix_match(self):
        """Test month key and prefix matching."""
        txn = Transaction(id="t1", date="2026-03-09", category="Food", type="income", amount="1")
        assert txn.period == "2026-03"
        assert txn.matches_period("2026-03")
        assert txn.matches_period("2026")
        assert txn.matches_period(None)
        assert not txn.matches_period("2026-04")
    
    def test_signed_amount(self):
        """Test sign follows the transaction type."""
        income = Transaction(id="t1", date="2026-03-09", category="Salary", type="income", amount="10")
        expense = Transaction(id="t2", date="2026-03-09", category="Food", type="expense", amount="4")
        assert income.signed_amount == Decimal("10.00")
        assert expense.signed_amount == Decimal("-4.00")
    
    def test_budget_month_format(self):
        """Test budget month must be YYYY-MM."""
        budget = Budget(id="b1", category="Food", amount="100", month="2026-03")
        assert budget.spent is None
        with pytest.raises(ValidationError):
            Budget(id="b1", category="Food", amount="100", month="2026-3")
    
    def test_goal_defaults(self):
        """Test goal current amount defaults to zero and deadline is optional."""
        goal = Goal(id="g1", title="Trip", target_amount="1000")
        assert goal.current_amount == Decimal("0.00")
        assert goal.deadline is None
    
    def test_category_strips_whitespace(self):
        """Test that whitespace is stripped from category names."""
        category = Category(id="c1", name="  Food  ", type="expense")
        assert category.name == "Food"


class TestResultModels:
    """Tests for derived value models."""
    
    def test_budget_line_percentage_text(self):
        """Test raw percentage is shown even above 100."""
        line = BudgetLine(
            category="Food",
            budget=Decimal("100"),
            spent=Decimal("120"),
            remaining=Decimal("0"),
            percentage=120.0,
            display_percentage=100.0,
            status=BudgetStatus.OVER,
        )
        assert line.percentage_text == "120.0%"
    
    def test_tax_bracket_bounds(self):
        """Test bracket upper bound must exceed lower bound."""
        with pytest.raises(ValueError, match="upper bound"):
            TaxBracket(lower=Decimal("100"), upper=Decimal("50"), rate=Decimal("0.1"))
    
    def test_tax_bracket_range_label(self):
        """Test bracket range labels."""
        bounded = TaxBracket(lower=Decimal("150000"), upper=Decimal("300000"), rate=Decimal("0.05"))
        open_ended = TaxBracket(lower=Decimal("5000000"), rate=Decimal("0.35"))
        assert bounded.range_label == "150,000 - 300,000"
        assert open_ended.range_label == "5,000,000+"


class TestIssueModels:
    """Tests for record issue models."""
    
    def test_invalid_amount_issue(self):
        """Test IssueBuilder.invalid_amount."""
        issue = IssueBuilder.invalid_amount("transaction", "t1", "abc")
        assert issue.issue_type == IssueType.INVALID_AMOUNT
        assert issue.severity == IssueSeverity.ERROR
        assert issue.field == "amount"
        assert issue.record_id == "t1"
    
    def test_missing_category_is_warning(self):
        """Test unknown categories are warnings, not errors."""
        issue = IssueBuilder.missing_category("budget", "b1", "Pets")
        assert issue.issue_type == IssueType.MISSING_CATEGORY
        assert issue.severity == IssueSeverity.WARNING
        assert issue.details["category"] == "Pets"

    def test_long_values_shortened_in_message(self):
        """Test oversized offending values still produce a valid issue."""
        long_category = "C" * 600
        long_amount = "x" * 600
        date_issue = IssueBuilder.invalid_date("transaction", "t1", "9" * 600)
        category_issue = IssueBuilder.missing_category("transaction", "t1", long_category)
        amount_issue = IssueBuilder.invalid_amount("transaction", "t1", long_amount)

        for issue in (date_issue, category_issue, amount_issue):
            assert len(issue.message) <= 500
            assert "..." in issue.message
        assert category_issue.details["category"] == long_category
        assert amount_issue.details["value"] == long_amount

    def test_issue_to_log_dict(self):
        """Test conversion to log dictionary."""
        issue = RecordIssue(
            issue_type=IssueType.INVALID_DATE,
            record_type="transaction",
            message="bad date",
        )
        log_dict = issue.to_log_dict()
        assert log_dict["issue_type"] == "invalid_date"
        assert log_dict["severity"] == "warning"
        # Same input, same issue: no clock is read
        assert issue == RecordIssue(
            issue_type=IssueType.INVALID_DATE,
            record_type="transaction",
            message="bad date",
        )


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
