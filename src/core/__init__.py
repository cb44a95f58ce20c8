"""Money handling, period keys and engine error types."""

from src.core.errors import EngineError, InvalidAmount, InvalidDate, MissingCategory
from src.core.money import (
    CENT,
    format_amount,
    from_cents,
    parse_amount,
    percent_text,
    to_cents,
)
from src.core.periods import month_key, month_label, shift_month, validate_period

__all__ = [
    # Errors
    "EngineError",
    "InvalidAmount",
    "InvalidDate",
    "MissingCategory",
    # Money
    "CENT",
    "format_amount",
    "from_cents",
    "parse_amount",
    "percent_text",
    "to_cents",
    # Periods
    "month_key",
    "month_label",
    "shift_month",
    "validate_period",
]
