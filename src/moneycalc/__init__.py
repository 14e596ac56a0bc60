"""
Money Calculator - Ruble/Kopek Arithmetic Console Utility

Models a monetary amount in whole and fractional units and exercises it
through an interactive console menu.

Key Features:
- Normalized rubles/kopeks value type with currency, transaction id and description
- Add, subtract, multiply, divide and transfer cost with a percentage commission
- Half-away-from-zero rounding to whole kopeks
- Explicit Result values for rejected operations
- Interactive menu loop (moneycalc menu)

Packages:
- core: Money value type, currency helpers, errors, configuration
- cli: Command-line interface and interactive menu

Example Usage:
    from moneycalc import add, create

    total = add(create(5, 50), create(3, 75)).unwrap()
    print(total)  # 9 руб. 25 коп. (RUB)

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Money Calculator Developers"

# Export the money API for easy access
from .core.money import (
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
from .core.errors import ErrorKind, MoneyError, Result

# Configuration
from .core.config import get_config, Environment

__all__ = [
    # Money API
    "Money",
    "MoneyOptions",
    "create",
    "copy_of",
    "add",
    "subtract",
    "multiply",
    "divide",
    "transfer_cost",
    "format_money",

    # Errors
    "ErrorKind",
    "MoneyError",
    "Result",

    # Configuration
    "get_config",
    "Environment",
]
