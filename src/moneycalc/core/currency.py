#!/usr/bin/env python3
"""
Currency Arithmetic Utilities

Integer and decimal helpers behind the Money value type.

Currency Units:
- Amounts are carried as major units (rubles) and minor units (kopeks)
- Internal calculations use a signed total of minor units: 100 kopeks = 1 ruble
- Display uses "<rubles> руб. <kopeks> коп. (<currency>)"

Key Principles:
- Never compute amounts with binary floating point
- Scalars enter through their shortest decimal form and are rounded once,
  half away from zero, back to whole minor units
"""

import math
from decimal import ROUND_HALF_UP, Decimal

MINOR_UNITS_PER_MAJOR = 100
MAJOR_UNIT_LABEL = "руб."
MINOR_UNIT_LABEL = "коп."
DEFAULT_CURRENCY_CODE = "RUB"


def to_minor_units(major: int, minor: int) -> int:
    """
    Collapse a raw (major, minor) pair into a signed minor-unit total.

    The pair does not need to be canonical: minor may be negative or above 99.

    Example:
        to_minor_units(5, 50) -> 550
        to_minor_units(0, -30) -> -30
    """
    return major * MINOR_UNITS_PER_MAJOR + minor


def split_minor_units(total: int) -> tuple[int, int, bool]:
    """
    Split a signed minor-unit total into (major, minor, negative).

    The magnitude is divided, then the sign is reapplied to the major part only,
    so minor is always in [0, 99]. The negative flag keeps the sign of amounts
    smaller than one major unit, where the major part is zero.

    Examples:
        split_minor_units(925) -> (9, 25, False)
        split_minor_units(-170) -> (-1, 70, True)
        split_minor_units(-30) -> (0, 30, True)
    """
    abs_total = abs(total)
    major, minor = divmod(abs_total, MINOR_UNITS_PER_MAJOR)
    negative = total < 0
    return (-major if negative else major), minor, negative


def scalar_to_decimal(scalar: float) -> Decimal:
    """
    Convert a numeric scalar to Decimal.

    Integers (bool included) convert exactly. Anything else goes through the
    shortest repr of its float value: Decimal(repr(1.005)) is exactly 1.005,
    while Decimal(1.005) would expose the binary approximation 1.00499999999999989...
    """
    if isinstance(scalar, int):
        return Decimal(int(scalar))
    return Decimal(repr(float(scalar)))


def is_finite_scalar(scalar: float) -> bool:
    return math.isfinite(scalar)


def round_half_away_from_zero(value: Decimal) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Decimal's ROUND_HALF_UP rounds ties away from zero for both signs.

    Examples:
        round_half_away_from_zero(Decimal("0.5")) -> 1
        round_half_away_from_zero(Decimal("-0.5")) -> -1
        round_half_away_from_zero(Decimal("2.5")) -> 3
    """
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_minor_units(total: int, currency_code: str) -> str:
    """
    Format a signed minor-unit total for display.

    Example:
        format_minor_units(-507, "RUB") -> "-5 руб. 07 коп. (RUB)"
    """
    major, minor, negative = split_minor_units(total)
    sign = "-" if negative else ""
    return f"{sign}{abs(major)} {MAJOR_UNIT_LABEL} {minor:02d} {MINOR_UNIT_LABEL} ({currency_code})"
