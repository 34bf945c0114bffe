"""Numeric value handling shared across the domain.

Amounts are Decimals so that the arithmetic matches what a person would
do on paper.  User input arrives loosely typed (a number once committed,
a string while still being typed, ``""`` when not entered yet), so every
numeric field passes through ``to_decimal`` before any arithmetic.
"""

from __future__ import annotations

import re
from decimal import (
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)
from typing import Union

NumericInput = Union[Decimal, float, int, str, None]

ZERO = Decimal("0")
CENT = Decimal("0.01")
HUNDRED = Decimal("100")

# Arithmetic never traps: overflow and invalid results become non-finite
# values, which ``round2`` then degrades to zero.
ARITHMETIC = Context(prec=34, traps=[])

# Leading float literal, the way a browser's parseFloat reads "12.5kg".
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def to_decimal(value: NumericInput) -> Decimal:
    """Coerce loosely typed input to a finite Decimal, falling back to zero."""
    if value is None:
        return ZERO

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        result = Decimal(int(value))
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        # repr gives the shortest text that round-trips, so 10.005 stays 10.005
        result = Decimal(repr(value))
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if match is None:
            return ZERO
        try:
            result = Decimal(match.group(1))
        except InvalidOperation:
            return ZERO
    else:
        return ZERO

    if not result.is_finite():
        return ZERO
    return result


def round2(value: Decimal) -> Decimal:
    """Round to cents, half away from zero."""
    with localcontext(ARITHMETIC):
        rounded = value.quantize(CENT, rounding=ROUND_HALF_UP)
    if not rounded.is_finite():
        return ZERO
    if rounded.is_zero():
        return abs(rounded)
    return rounded


def is_blank(text: str | None) -> bool:
    return not text or not text.strip()


def format_amount(amount: Decimal, symbol: str = "") -> str:
    """Render an amount with thousands separators and two decimals."""
    return f"{symbol}{round2(amount):,.2f}"


DEFAULT_TAX_RATE = Decimal("18")
