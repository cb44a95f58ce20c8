"""Period keys (YYYY-MM) and calendar month arithmetic."""

import re
from datetime import date

from src.core.errors import InvalidDate


_PERIOD_PATTERN = re.compile(r"^\d{4}(-(0[1-9]|1[0-2]))?$")


def validate_period(period: str, allow_year: bool = False) -> str:
    """
    Check a period key and return it stripped.
    
    Raises:
        InvalidDate: if the key is not YYYY-MM (or YYYY when allow_year)
    """
    if not isinstance(period, str):
        raise InvalidDate(period)
    key = period.strip()
    if not _PERIOD_PATTERN.match(key):
        raise InvalidDate(period, f"Invalid period: {period!r}")
    if len(key) == 4 and not allow_year:
        raise InvalidDate(period, f"Expected a YYYY-MM month, got {period!r}")
    return key


def month_key(day: date) -> str:
    return day.strftime("%Y-%m")


def shift_month(day: date, months: int) -> str:
    """
    Calendar month arithmetic: the YYYY-MM key `months` months away
    from the month containing `day` (negative goes back).
    """
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    return f"{year:04d}-{month + 1:02d}"


def month_label(period: str) -> str:
    """'2026-01' -> 'Jan 2026'."""
    year, month = validate_period(period).split("-")
    return date(int(year), int(month), 1).strftime("%b %Y")
