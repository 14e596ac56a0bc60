#!/usr/bin/env python3
"""
Error Taxonomy and Operation Results

Money operations never raise for a rejected input. They return a Result that
either carries the new value or a Failure describing why the operation was
refused. Callers that prefer exceptions can call Result.unwrap().

Error Kinds:
- CURRENCY_MISMATCH: add/subtract across different currency codes
- DIVISION_BY_ZERO: divide by a zero scalar
- INVALID_ARGUMENT: non-finite scalar or percentage (inf, nan)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Why a money operation was rejected."""

    CURRENCY_MISMATCH = "currency_mismatch"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_ARGUMENT = "invalid_argument"


class MoneyError(ValueError):
    """Base class for rejected money operations."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT


class CurrencyMismatchError(MoneyError):
    """Raised when combining amounts in different currencies."""

    kind = ErrorKind.CURRENCY_MISMATCH


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Raised when dividing an amount by zero."""

    kind = ErrorKind.DIVISION_BY_ZERO


class InvalidArgumentError(MoneyError):
    """Raised for scalars that cannot produce a finite amount."""

    kind = ErrorKind.INVALID_ARGUMENT


_EXCEPTIONS: dict[ErrorKind, type[MoneyError]] = {
    ErrorKind.CURRENCY_MISMATCH: CurrencyMismatchError,
    ErrorKind.DIVISION_BY_ZERO: DivisionByZeroError,
    ErrorKind.INVALID_ARGUMENT: InvalidArgumentError,
}


@dataclass(frozen=True)
class Failure:
    """A rejected operation: what kind of error and a human-readable message."""

    kind: ErrorKind
    message: str

    def to_exception(self) -> MoneyError:
        """Build the exception matching this failure's kind."""
        return _EXCEPTIONS[self.kind](self.message)


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a money operation.

    Exactly one of value or error is set. Build instances with ok() and fail()
    rather than the constructor.

    Examples:
        >>> Result.ok(42).unwrap()
        42
        >>> Result.fail(ErrorKind.DIVISION_BY_ZERO, "nope").is_ok
        False
    """

    value: T | None = None
    error: Failure | None = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        """Wrap a successful value."""
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "Result[T]":
        """Wrap a rejection."""
        return cls(error=Failure(kind=kind, message=message))

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """
        Return the value, or raise the MoneyError subclass for the failure.

        Raises:
            CurrencyMismatchError, DivisionByZeroError, InvalidArgumentError
        """
        if self.error is not None:
            raise self.error.to_exception()
        return self.value  # type: ignore[return-value]
