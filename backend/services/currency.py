"""
Rupee display formatting.

Mirrors the storefront's formatINR helper: en-IN grouping, ₹ symbol, no
fractional digits, and anything non-numeric shown as ₹0.
"""
import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Any

RUPEE = "₹"


# String forms JavaScript's Number() accepts; anything else is NaN
_DECIMAL_LITERAL = re.compile(r"^[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)$")
_PREFIXED_LITERAL = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")


def _parse_text(text: str) -> float:
    text = text.strip()
    if not text:
        return 0.0
    if _PREFIXED_LITERAL.match(text):
        try:
            return float(int(text, 0))
        except OverflowError:
            return math.inf
    if not _DECIMAL_LITERAL.match(text):
        return math.nan
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def _coerce(amount: Any) -> float:
    """Numeric coercion in the manner of JS `Number(x) || 0`; never raises."""
    if amount is None:
        return 0.0
    if isinstance(amount, bool):
        return 1.0 if amount else 0.0
    if isinstance(amount, Decimal):
        if amount.is_nan():
            return 0.0
        value = float(amount)
    elif isinstance(amount, int):
        try:
            value = float(amount)
        except OverflowError:
            value = math.inf if amount > 0 else -math.inf
    elif isinstance(amount, float):
        value = amount
    elif isinstance(amount, str):
        value = _parse_text(amount)
    else:
        return 0.0
    return 0.0 if math.isnan(value) else value


def _group_indian(digits: str) -> str:
    """1234567 -> 12,34,567 (last three digits, then pairs)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_inr(amount: Any) -> str:
    """
    Format an amount as a whole-rupee display string.

    >>> format_inr(1234567.8)
    '₹12,34,568'
    >>> format_inr("abc")
    '₹0'
    """
    value = _coerce(amount)
    sign = "-" if value < 0 else ""

    if math.isinf(value):
        return f"{sign}{RUPEE}∞"

    rounded = Decimal(str(abs(value))).to_integral_value(rounding=ROUND_HALF_UP)

    return f"{sign}{RUPEE}{_group_indian(str(int(rounded)))}"
