#!/usr/bin/env python3
"""
Money Value Type

Immutable amount of rubles and kopeks tagged with a currency code, plus the
arithmetic the calculator exposes: add, subtract, multiply, divide and the
transfer cost with a percentage commission.

Every operation collapses its operands to a signed total of minor units,
computes on integers or decimals, and normalizes the result back into
(major, minor) form. Results keep the left operand's currency code,
transaction id and description.
"""

import logging
from dataclasses import dataclass, field, replace
from decimal import Decimal, InvalidOperation

from .config import get_default_currency
from .currency import (
    format_minor_units,
    is_finite_scalar,
    round_half_away_from_zero,
    scalar_to_decimal,
    split_minor_units,
    to_minor_units,
)
from .errors import ErrorKind, Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoneyOptions:
    """
    Optional fields of a Money value.

    Attributes:
        currency_code: Currency tag, defaults to the configured default currency ("RUB")
        transaction_id: Opaque bookkeeping id, defaults to ""
        description: Opaque bookkeeping text, defaults to ""
    """

    currency_code: str = field(default_factory=get_default_currency)
    transaction_id: str = ""
    description: str = ""


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in canonical (major, minor) form.

    The sign lives in major_units and in the negative flag; minor_units is
    always a magnitude in [0, 99]. The flag matters only for amounts smaller
    than one ruble, where major_units is zero.

    Build values with create() or Money.from_parts(). The constructor only
    accepts fields that are already normalized.

    Examples:
        >>> price = create(5, 50, "RUB")
        >>> str(price)
        '5 руб. 50 коп. (RUB)'

        >>> refund = create(0, -30, "RUB")
        >>> refund.to_minor_units()
        -30
        >>> str(refund)
        '-0 руб. 30 коп. (RUB)'

        >>> add(price, refund).unwrap()
        Money(major_units=5, minor_units=20, negative=False, currency_code='RUB', transaction_id='', description='')
    """

    major_units: int
    minor_units: int
    negative: bool = False
    currency_code: str = field(default_factory=get_default_currency)
    transaction_id: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if not 0 <= self.minor_units <= 99:
            raise ValueError(f"minor_units must be within [0, 99], got {self.minor_units}")
        if self.major_units < 0 and not self.negative:
            raise ValueError(f"negative major_units {self.major_units} requires negative=True")
        if self.major_units > 0 and self.negative:
            raise ValueError(f"positive major_units {self.major_units} cannot be negative")
        if self.negative and self.major_units == 0 and self.minor_units == 0:
            raise ValueError("zero amount cannot be negative")

    @classmethod
    def from_parts(cls, major: int, minor: int, options: MoneyOptions | None = None) -> "Money":
        """
        Normalize a raw (major, minor) pair into a Money value.

        The pair may be out of range or inconsistent in sign, e.g. (5, 150)
        or (3, -250); it is collapsed to a total of minor units first.
        """
        if options is None:
            options = MoneyOptions()
        return cls._from_total(
            to_minor_units(major, minor),
            options.currency_code,
            options.transaction_id,
            options.description,
        )

    @classmethod
    def _from_total(cls, total: int, currency_code: str, transaction_id: str, description: str) -> "Money":
        major, minor, negative = split_minor_units(total)
        return cls(
            major_units=major,
            minor_units=minor,
            negative=negative,
            currency_code=currency_code,
            transaction_id=transaction_id,
            description=description,
        )

    @property
    def options(self) -> MoneyOptions:
        return MoneyOptions(
            currency_code=self.currency_code,
            transaction_id=self.transaction_id,
            description=self.description,
        )

    def to_minor_units(self) -> int:
        """Get the signed total in minor units (kopeks)."""
        magnitude = to_minor_units(abs(self.major_units), self.minor_units)
        return -magnitude if self.negative else magnitude

    def with_total(self, total: int) -> "Money":
        """Return a new value for the given minor-unit total, keeping this value's options."""
        return self._from_total(total, self.currency_code, self.transaction_id, self.description)

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects; raises CurrencyMismatchError."""
        if not isinstance(other, Money):
            return NotImplemented
        return add(self, other).unwrap()

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects; raises CurrencyMismatchError."""
        if not isinstance(other, Money):
            return NotImplemented
        return subtract(self, other).unwrap()

    def __mul__(self, scalar: float) -> "Money":
        """Multiply Money by a scalar; raises InvalidArgumentError."""
        if isinstance(scalar, Money) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return multiply(self, scalar).unwrap()

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Money":
        """Divide Money by a scalar; raises DivisionByZeroError."""
        if isinstance(scalar, Money) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return divide(self, scalar).unwrap()

    def __str__(self) -> str:
        return format_money(self)


def create(
    major: int,
    minor: int,
    currency_code: str | None = None,
    transaction_id: str = "",
    description: str = "",
) -> Money:
    """
    Create a normalized Money value from raw major and minor units.

    Args:
        major: Whole units, any sign
        minor: Fractional units, any integer (negative or above 99 allowed)
        currency_code: Currency tag; None uses the configured default
        transaction_id: Opaque bookkeeping id
        description: Opaque bookkeeping text

    Returns:
        Money with minor_units in [0, 99] and the sign carried by major_units

    Examples:
        create(5, 150) -> 6 руб. 50 коп.
        create(-2, 30) -> -1 руб. 70 коп.
    """
    if currency_code is None:
        options = MoneyOptions(transaction_id=transaction_id, description=description)
    else:
        options = MoneyOptions(currency_code=currency_code, transaction_id=transaction_id, description=description)
    return Money.from_parts(major, minor, options)


def copy_of(value: Money) -> Money:
    """Return an independent field-by-field duplicate of value."""
    return replace(value)


def _check_same_currency(a: Money, b: Money, verb: str) -> Result[Money] | None:
    if a.currency_code != b.currency_code:
        message = f"Cannot {verb} amounts in different currencies: {a.currency_code} and {b.currency_code}"
        logger.debug(message)
        return Result.fail(ErrorKind.CURRENCY_MISMATCH, message)
    return None


def _check_finite(scalar: float, name: str) -> Result[Money] | None:
    if not is_finite_scalar(scalar):
        message = f"{name} must be a finite number, got {scalar}"
        logger.debug(message)
        return Result.fail(ErrorKind.INVALID_ARGUMENT, message)
    return None


def _rounded(a: Money, amount: Decimal, operation: str) -> Result[Money]:
    try:
        total = round_half_away_from_zero(amount)
    except InvalidOperation:
        message = f"Result of {operation} is too large to represent: {amount}"
        logger.debug(message)
        return Result.fail(ErrorKind.INVALID_ARGUMENT, message)
    return Result.ok(a.with_total(total))


def add(a: Money, b: Money) -> Result[Money]:
    """Add b to a. Fails with CURRENCY_MISMATCH when currency codes differ."""
    rejected = _check_same_currency(a, b, "add")
    if rejected is not None:
        return rejected
    return Result.ok(a.with_total(a.to_minor_units() + b.to_minor_units()))


def subtract(a: Money, b: Money) -> Result[Money]:
    """Subtract b from a. Fails with CURRENCY_MISMATCH when currency codes differ."""
    rejected = _check_same_currency(a, b, "subtract")
    if rejected is not None:
        return rejected
    return Result.ok(a.with_total(a.to_minor_units() - b.to_minor_units()))


def multiply(a: Money, scalar: float) -> Result[Money]:
    """
    Scale a by scalar, rounding half away from zero to whole kopeks.

    Example:
        multiply(create(1, 0), 1.005) -> 1 руб. 01 коп. (100.5 kopeks rounds up)
    """
    rejected = _check_finite(scalar, "Multiplier")
    if rejected is not None:
        return rejected
    product = Decimal(a.to_minor_units()) * scalar_to_decimal(scalar)
    return _rounded(a, product, "multiplication")


def divide(a: Money, scalar: float) -> Result[Money]:
    """Divide a by scalar, rounding half away from zero. Fails with DIVISION_BY_ZERO for 0."""
    if scalar == 0:
        logger.debug("Rejected division of %s by zero", a)
        return Result.fail(ErrorKind.DIVISION_BY_ZERO, "Division by zero is not allowed.")
    rejected = _check_finite(scalar, "Divisor")
    if rejected is not None:
        return rejected
    quotient = Decimal(a.to_minor_units()) / scalar_to_decimal(scalar)
    return _rounded(a, quotient, "division")


def transfer_cost(a: Money, percentage: float) -> Result[Money]:
    """
    Calculate the full cost of transferring a with a percentage commission.

    The commission may be negative (a discount).

    Example:
        transfer_cost(create(100, 0), 10.0) -> 110 руб. 00 коп.
    """
    rejected = _check_finite(percentage, "Commission percentage")
    if rejected is not None:
        return rejected
    factor = Decimal(1) + scalar_to_decimal(percentage) / Decimal(100)
    full_cost = Decimal(a.to_minor_units()) * factor
    result = _rounded(a, full_cost, "transfer cost")
    logger.debug(f"Transfer cost of {a} with {percentage}% commission: {result}")
    return result


def format_money(a: Money) -> str:
    """Format as "<sign><rubles> руб. <kopeks> коп. (<currency>)"."""
    return format_minor_units(a.to_minor_units(), a.currency_code)
