"""Shared fixtures for Personal Ledger tests."""

from datetime import date
from itertools import count

import pytest

from src.models.ledger import Budget, Category, Transaction, TransactionType


@pytest.fixture
def make_transaction():
    """Factory for transactions with sequential ids."""
    ids = count(1)
    
    def _make(
        txn_type: str,
        amount: str,
        day: str = "2026-03-10",
        category: str = "Food",
        description: str = "",
    ) -> Transaction:
        return Transaction(
            id=f"t-{next(ids)}",
            date=date.fromisoformat(day),
            description=description,
            category=category,
            type=TransactionType(txn_type),
            amount=amount,
        )
    
    return _make


@pytest.fixture
def categories() -> list[Category]:
    return [
        Category(id="c1", name="Food", type=TransactionType.EXPENSE),
        Category(id="c2", name="Salary", type=TransactionType.INCOME),
        Category(id="c3", name="Transport", type=TransactionType.EXPENSE),
        Category(id="c4", name="Rent", type=TransactionType.EXPENSE),
    ]


@pytest.fixture
def march_budgets() -> list[Budget]:
    return [
        Budget(id="b1", category="Food", amount="100", month="2026-03"),
        Budget(id="b2", category="Transport", amount="50", month="2026-03"),
    ]
