"""
Module: core.utils.formatting

Purpose:
    Locale-independent number formatting for feedback texts: at most three
    fractional digits, half-even rounding, no trailing zeros, no grouping.

Key Functions:
    - format_number(): 1.5 -> "1.5", 2.0 -> "2", 0.12345 -> "0.123"
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

_QUANTUM = Decimal("0.001")


def format_number(value: float) -> str:
    """
    Format a score or penalty for display.

    Infinite values (unbounded range ends) render as "∞" / "-∞".

    Args:
        value: Number to format

    Returns:
        Decimal string with "." as separator

    Example:
        >>> format_number(-0.5)
        '-0.5'
        >>> format_number(float("-inf"))
        '-∞'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    exact = Decimal(value)
    with localcontext() as ctx:
        # integer digits plus three fractional digits must fit
        ctx.prec = max(64, exact.adjusted() + 5)
        rounded = exact.quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)

    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text
