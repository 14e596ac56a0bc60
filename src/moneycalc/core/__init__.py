"""
Core Utilities Package

The money value type and the pieces it is built from.

This package provides:
- Money value type with normalization and arithmetic (add, subtract,
  multiply, divide, transfer cost)
- Result and error taxonomy for rejected operations
- Integer/decimal currency helpers with half-away-from-zero rounding
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_default_currency,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    DEFAULT_CURRENCY_CODE,
    format_minor_units,
    round_half_away_from_zero,
    split_minor_units,
    to_minor_units,
)
from .errors import (
    CurrencyMismatchError,
    DivisionByZeroError,
    ErrorKind,
    Failure,
    InvalidArgumentError,
    MoneyError,
    Result,
)
from .money import (
    Money,
    MoneyOptions,
    add,
    copy_of,
    create,
    divide,
    format_money,
    multiply,
    subtract,
    transfer_cost,
)

__all__ = [
    # Configuration
    "Config",
    "CurrencyMismatchError",
    "DEFAULT_CURRENCY_CODE",
    "DivisionByZeroError",
    "Environment",
    # Errors
    "ErrorKind",
    "Failure",
    "InvalidArgumentError",
    # Money
    "Money",
    "MoneyError",
    "MoneyOptions",
    "Result",
    "add",
    "copy_of",
    "create",
    "divide",
    # Currency utilities
    "format_minor_units",
    "format_money",
    "get_config",
    "get_default_currency",
    "is_development",
    "is_production",
    "is_test",
    "multiply",
    "reload_config",
    "round_half_away_from_zero",
    "split_minor_units",
    "subtract",
    "to_minor_units",
    "transfer_cost",
]
