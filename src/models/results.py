"""
Derived Value Models

Everything the engine returns to the presentation layer. Money fields are
Decimal; ratios (percentages) are floats since they are display values and
never summed again.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from src.core.money import percent_text
from src.models.issues import RecordIssue


# =============================================================================
# LEDGER BALANCE
# =============================================================================

class BalanceEntry(BaseModel):
    """Balance after applying one transaction."""

    transaction_id: str
    balance: Decimal


class RunningBalance(BaseModel):
    """Running-balance sequence plus the final balance."""

    period: Optional[str] = None
    entries: list[BalanceEntry] = Field(default_factory=list)
    final_balance: Decimal = Decimal("0.00")

    @property
    def balances(self) -> list[Decimal]:
        return [entry.balance for entry in self.entries]


class PeriodSummary(BaseModel):
    """Headline figures for one period (month or year prefix)."""

    period: str
    total_income: Decimal = Decimal("0.00")
    total_expenses: Decimal = Decimal("0.00")
    net: Decimal = Decimal("0.00")
    transaction_count: int = Field(default=0, ge=0)
    average_transaction: Decimal = Decimal("0.00")
    savings_rate: float = Field(
        default=0.0,
        description="Net as a percentage of income (0 when there is no income)"
    )
    expense_breakdown: dict[str, Decimal] = Field(default_factory=dict)


# =============================================================================
# BUDGET UTILIZATION
# =============================================================================

class BudgetStatus(str, Enum):
    """Utilization tier of a budget line."""
    GOOD = "good"
    WARNING = "warning"
    OVER = "over"


class BudgetLine(BaseModel):
    """Utilization of one expense category against its cap."""

    category: str
    budget: Decimal
    spent: Decimal
    remaining: Decimal
    percentage: float = Field(
        ...,
        ge=0,
        description="Raw utilization, may exceed 100"
    )
    display_percentage: float = Field(
        ...,
        ge=0,
        le=100,
        description="Utilization clamped for progress bars"
    )
    status: BudgetStatus
    has_budget: bool = True

    @property
    def percentage_text(self) -> str:
        return percent_text(self.percentage)


class BudgetReport(BaseModel):
    """All budget lines for one month."""

    period: str
    lines: list[BudgetLine] = Field(default_factory=list)
    total_budget: Decimal = Decimal("0.00")
    total_spent: Decimal = Decimal("0.00")
    issues: list[RecordIssue] = Field(default_factory=list)

    @property
    def over_budget(self) -> list[str]:
        return [line.category for line in self.lines if line.status == BudgetStatus.OVER]

    def line_for(self, category: str) -> Optional[BudgetLine]:
        for line in self.lines:
            if line.category == category:
                return line
        return None


# =============================================================================
# TRENDS
# =============================================================================

class TrendPoint(BaseModel):
    """Income/expense totals for one calendar month."""

    month: str = Field(..., pattern=r"^\d{4}-\d{2}$")
    label: str = Field(..., description="Short label, e.g. 'Jan 2026'")
    income: Decimal = Decimal("0.00")
    expenses: Decimal = Decimal("0.00")
    net: Decimal = Decimal("0.00")


# =============================================================================
# GOALS
# =============================================================================

class DeadlineStatus(str, Enum):
    NO_DEADLINE = "no_deadline"
    ACTIVE = "active"
    PASSED = "passed"


class GoalProgress(BaseModel):
    """Progress readout for one savings goal."""

    goal_id: str
    title: str
    current_amount: Decimal
    target_amount: Decimal
    percentage: float = Field(..., ge=0, description="Uncapped progress")
    display_percentage: float = Field(..., ge=0, le=100)
    months_remaining: Optional[int] = None
    deadline_status: DeadlineStatus
    time_remaining: str


# =============================================================================
# TAX
# =============================================================================

class TaxBracket(BaseModel):
    """A contiguous income range taxed at one marginal rate."""

    lower: Decimal = Field(..., ge=0)
    upper: Optional[Decimal] = Field(
        default=None,
        description="Exclusive upper bound; None means unbounded"
    )
    rate: Decimal = Field(..., ge=0, le=1, description="Marginal rate as a fraction")

    @model_validator(mode='after')
    def validate_bounds(self) -> 'TaxBracket':
        if self.upper is not None and self.upper <= self.lower:
            raise ValueError("Bracket upper bound must be above its lower bound")
        return self

    @property
    def range_label(self) -> str:
        if self.upper is None:
            return f"{self.lower:,.0f}+"
        return f"{self.lower:,.0f} - {self.upper:,.0f}"


class TaxParameters(BaseModel):
    """Annual income plus the bracket table and deduction constants."""

    annual_income: Decimal = Field(..., ge=0)
    year: Optional[int] = None
    brackets: list[TaxBracket] = Field(..., min_length=1)
    personal_allowance: Decimal = Field(default=Decimal("0"), ge=0)
    social_security_rate: Decimal = Field(default=Decimal("0"), ge=0, le=1)
    social_security_cap: Optional[Decimal] = Field(
        default=None,
        ge=0,
        description="Annual cap on contributions; None means uncapped"
    )
    provident_fund_allowance: Decimal = Field(default=Decimal("0"), ge=0)


class BracketTax(BaseModel):
    """Tax charged on the slice of income falling into one bracket."""

    range: str
    rate: float = Field(..., description="Marginal rate in percent")
    taxable_amount: Decimal
    amount: Decimal


class TaxDeductions(BaseModel):
    personal: Decimal = Decimal("0.00")
    social_security: Decimal = Decimal("0.00")
    provident_fund: Decimal = Decimal("0.00")

    @property
    def total(self) -> Decimal:
        return self.personal + self.social_security + self.provident_fund


class MonthlyAverage(BaseModel):
    gross_income: Decimal
    net_income: Decimal
    tax: Decimal
    social_security: Decimal


class TaxSummary(BaseModel):
    """Result of a progressive tax estimate."""

    year: Optional[int] = None
    annual_income: Decimal
    deductions: TaxDeductions
    taxable_income: Decimal
    tax_amount: Decimal
    social_security: Decimal
    net_income: Decimal
    effective_rate: float = Field(
        default=0.0,
        description="Tax as a percentage of annual income"
    )
    monthly_average: MonthlyAverage
    brackets: list[BracketTax] = Field(default_factory=list)
