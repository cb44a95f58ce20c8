"""
Tax Estimator

Progressive bracket tax on income after deductions. Illustrative only:
the bracket table and deduction constants are inputs, nothing here is
tied to one jurisdiction.

    social_security = min(annual_income * rate, cap)
    taxable_income  = max(0, annual_income - personal - social_security - provident_fund)
    tax             = sum over brackets of (min(upper, taxable) - lower) * rate
    net_income      = annual_income - tax - social_security
"""

from decimal import ROUND_HALF_UP, Decimal

from src.audit import get_logger
from src.core.money import CENT
from src.engine.rollup import ZERO
from src.models.results import (
    BracketTax,
    MonthlyAverage,
    TaxDeductions,
    TaxParameters,
    TaxSummary,
)


logger = get_logger(__name__)

MONTHS_PER_YEAR = 12


def _cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def social_security_contribution(parameters: TaxParameters) -> Decimal:
    contribution = parameters.annual_income * parameters.social_security_rate
    if parameters.social_security_cap is not None:
        contribution = min(contribution, parameters.social_security_cap)
    return _cents(contribution)


def estimate_tax(parameters: TaxParameters) -> TaxSummary:
    """Apply the bracket table to `parameters.annual_income`."""
    income = parameters.annual_income
    social_security = social_security_contribution(parameters)
    
    deductions = TaxDeductions(
        personal=parameters.personal_allowance,
        social_security=social_security,
        provident_fund=parameters.provident_fund_allowance,
    )
    taxable = max(ZERO, income - deductions.total)
    
    breakdown = []
    tax = ZERO
    for bracket in sorted(parameters.brackets, key=lambda b: b.lower):
        if taxable <= bracket.lower:
            break
        top = taxable if bracket.upper is None else min(bracket.upper, taxable)
        slice_amount = top - bracket.lower
        slice_tax = _cents(slice_amount * bracket.rate)
        tax += slice_tax
        breakdown.append(BracketTax(
            range=bracket.range_label,
            rate=float(bracket.rate * 100),
            taxable_amount=_cents(slice_amount),
            amount=slice_tax,
        ))
    
    net_income = income - tax - social_security
    effective_rate = float(tax / income * 100) if income > 0 else 0.0
    
    logger.debug(
        "tax_estimated",
        year=parameters.year,
        taxable_income=str(taxable),
        tax_amount=str(tax),
        bracket_count=len(breakdown),
    )
    
    return TaxSummary(
        year=parameters.year,
        annual_income=income,
        deductions=deductions,
        taxable_income=_cents(taxable),
        tax_amount=tax,
        social_security=social_security,
        net_income=_cents(net_income),
        effective_rate=effective_rate,
        monthly_average=MonthlyAverage(
            gross_income=_cents(income / MONTHS_PER_YEAR),
            net_income=_cents(net_income / MONTHS_PER_YEAR),
            tax=_cents(tax / MONTHS_PER_YEAR),
            social_security=_cents(social_security / MONTHS_PER_YEAR),
        ),
        brackets=breakdown,
    )
