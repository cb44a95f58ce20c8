"""
Money Parsing & Formatting

DESIGN DECISION: Amounts are Decimal values quantized to cents.
Binary floats drift when hundreds of rows are summed; Decimal cents do not,
and the 2-decimal display contract falls out naturally.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from src.core.errors import InvalidAmount


CENT = Decimal("0.01")

_AMOUNT_PATTERN = re.compile(r"^(\d+(\.\d*)?|\.\d+)$")

# locale -> (group separator, decimal separator)
_SEPARATORS = {
    "en-US": (",", "."),
    "en-GB": (",", "."),
    "th-TH": (",", "."),
    "de-DE": (".", ","),
    "id-ID": (".", ","),
    "fr-FR": ("\u202f", ","),
}

AmountLike = Union[str, int, float, Decimal]


def parse_amount(value: AmountLike) -> Decimal:
    """
    Parse a non-negative decimal amount into Decimal cents.
    
    Accepts strings such as "1000", "85.5", ".25" (whitespace is stripped),
    as well as int, float and Decimal values. Fractional digits beyond cents
    are rounded half-up.
    
    Raises:
        InvalidAmount: for malformed text, negatives, NaN/Infinity or booleans
    """
    if isinstance(value, bool):
        raise InvalidAmount(value, "Amount must be numeric, not a boolean")
    
    if isinstance(value, str):
        text = value.strip()
        if not _AMOUNT_PATTERN.match(text):
            raise InvalidAmount(value)
        amount = Decimal(text)
    elif isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        try:
            amount = Decimal(repr(value))
        except InvalidOperation:
            raise InvalidAmount(value)
    else:
        raise InvalidAmount(value, f"Unsupported amount type: {type(value).__name__}")
    
    if not amount.is_finite():
        raise InvalidAmount(value, f"Amount must be finite: {value!r:.80}")
    if amount < 0:
        raise InvalidAmount(value, f"Amount cannot be negative: {value!r:.80}")

    try:
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # More digits than the decimal context holds at cent precision
        raise InvalidAmount(value, "Amount is too large")


def to_cents(amount: Decimal) -> int:
    """Convert a Decimal amount to integer cents."""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> Decimal:
    """Convert integer cents back to a Decimal amount."""
    return (Decimal(cents) / 100).quantize(CENT)


def format_amount(
    amount: Union[Decimal, int, float],
    locale: str = "th-TH",
    symbol: str = "",
    signed: bool = False,
) -> str:
    """
    Render an amount with thousands separators and exactly 2 decimals.
    
    Examples (th-TH):
        format_amount(Decimal("1234.5"))                -> "1,234.50"
        format_amount(Decimal("-80"), symbol="฿")       -> "-฿80.00"
        format_amount(Decimal("500"), symbol="฿", signed=True) -> "+฿500.00"

    Raises:
        InvalidAmount: for non-numeric, non-finite or oversized values
    """
    if isinstance(amount, bool):
        raise InvalidAmount(amount, "Amount must be numeric, not a boolean")
    try:
        value = Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidAmount(amount, f"Cannot format amount: {amount!r:.80}")
    if not value.is_finite():
        raise InvalidAmount(amount, f"Amount must be finite: {amount!r:.80}")
    group, point = _SEPARATORS.get(locale, (",", "."))
    
    body = f"{abs(value):,.2f}"
    body = body.replace(",", "\x00").replace(".", point).replace("\x00", group)
    
    if value < 0:
        sign = "-"
    elif signed:
        sign = "+"
    else:
        sign = ""
    return f"{sign}{symbol}{body}"


def percent_text(value: Union[float, Decimal]) -> str:
    """Render a percentage with one decimal, e.g. 120.0%."""
    return f"{float(value):.1f}%"
