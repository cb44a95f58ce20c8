"""
Ledger Record Models

These models describe the records the storage layer hands to the engine.
They are designed to:
1. Carry amounts as Decimal cents, never floats
2. Be immutable once the engine starts computing over them
3. Keep the category an opaque string key

DESIGN DECISION: Amount fields run through parse_amount, so the same
rules apply to form text, storage decimals and test fixtures.
"""

import datetime
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.core.money import parse_amount


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionType(str, Enum):
    """Direction of a transaction. The amount itself is always positive."""
    INCOME = "income"
    EXPENSE = "expense"


# =============================================================================
# RECORDS
# =============================================================================

class Transaction(BaseModel):
    """
    A single income or expense entry.

    The sign is implied by `type`; `amount` is a non-negative magnitude.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Opaque identifier from storage"
    )
    date: datetime.date = Field(
        ...,
        description="Calendar day of the transaction"
    )
    description: str = Field(
        default="",
        max_length=500
    )
    category: str = Field(
        ...,
        description="Category name (matched against Category.name)"
    )
    type: TransactionType
    amount: Decimal = Field(
        ...,
        ge=0,
        description="Non-negative amount in cents precision"
    )

    @field_validator('amount', mode='before')
    @classmethod
    def parse_amount_field(cls, v: Any) -> Decimal:
        return parse_amount(v)

    @property
    def period(self) -> str:
        """YYYY-MM key of the month this transaction belongs to."""
        return self.date.isoformat()[:7]

    @property
    def signed_amount(self) -> Decimal:
        """Amount with sign applied (+ income, - expense)."""
        return self.amount if self.type == TransactionType.INCOME else -self.amount

    def matches_period(self, prefix: Optional[str]) -> bool:
        """
        Prefix match against the ISO date.

        "2026-03" selects a month, "2026" a year, None everything.
        """
        if not prefix:
            return True
        return self.date.isoformat().startswith(prefix)


class Category(BaseModel):
    """A category used to label transactions and budgets."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str
    name: str = Field(..., min_length=1, max_length=100)
    type: TransactionType
    icon: str = "fas fa-circle"
    color: str = "#808080"


class Budget(BaseModel):
    """
    A monthly spending cap for one category.

    `spent` is the cached value storage keeps. The engine never trusts it;
    spending is always recomputed from transactions.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str
    category: str
    amount: Decimal = Field(..., ge=0)
    month: str = Field(
        ...,
        pattern=r"^\d{4}-(0[1-9]|1[0-2])$",
        description="YYYY-MM"
    )
    spent: Optional[Decimal] = None

    @field_validator('amount', mode='before')
    @classmethod
    def parse_amount_field(cls, v: Any) -> Decimal:
        return parse_amount(v)

    @field_validator('spent', mode='before')
    @classmethod
    def parse_spent_field(cls, v: Any) -> Optional[Decimal]:
        if v is None:
            return None
        return parse_amount(v)


class Goal(BaseModel):
    """
    A savings goal.

    `current_amount` only changes through explicit "add amount" actions.
    Over-funding is valid.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str
    title: str = Field(..., min_length=1, max_length=200)
    target_amount: Decimal = Field(..., ge=0)
    current_amount: Decimal = Field(default=Decimal("0.00"), ge=0)
    deadline: Optional[date] = None
    icon: str = "fas fa-piggy-bank"

    @field_validator('target_amount', 'current_amount', mode='before')
    @classmethod
    def parse_amount_field(cls, v: Any) -> Decimal:
        return parse_amount(v)
