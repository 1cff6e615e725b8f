"""Canonical number formatting for attribute values and path operands."""

import math
from decimal import Decimal
from typing import Optional, Union

Numeric = Union[int, float]


def format_number(
    value: Numeric,
    precision: Optional[int] = None,
    trim: bool = True
) -> str:
    """Render a number as plain decimal text.

    Without ``precision`` the shortest text that round-trips back to the same
    float is produced, always in positional notation (``1e-05`` becomes
    ``0.00001``). With ``precision`` the value is rounded to that many places.

    Args:
        value: Number to format
        precision: Optional fixed number of decimal places
        trim: Strip trailing zeros and a dangling decimal point

    Returns:
        Decimal text with no exponent and no surrounding whitespace

    Examples:
        >>> format_number(10.0)
        '10'
        >>> format_number(3, precision=2, trim=False)
        '3.00'
    """
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Cannot format non-finite number: {value!r}")
    if precision is not None and precision < 0:
        raise ValueError("precision must be >= 0 or None")

    if precision is None:
        text = format(Decimal(repr(number)), "f")
    else:
        text = f"{number:.{precision}f}"

    if trim and "." in text:
        text = text.rstrip("0").rstrip(".")

    # -0, -0.00 and friends
    if text.startswith("-") and not text.strip("-0."):
        text = text[1:]

    return text
