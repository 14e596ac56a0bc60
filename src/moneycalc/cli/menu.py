#!/usr/bin/env python3
"""
Interactive Menu - Console Money Calculator

Prompts for a starting amount, then loops over a numbered menu applying
money operations to the current amount until the user chooses to exit.
"""

import logging
from collections.abc import Callable

import click

from ..core.config import get_config
from ..core.errors import Result
from ..core.money import Money, add, create, divide, multiply, subtract, transfer_cost

logger = logging.getLogger(__name__)

MENU_OPTIONS = [
    ("1", "Calculate transfer cost with commission"),
    ("2", "Add another amount"),
    ("3", "Subtract another amount"),
    ("4", "Multiply by a factor"),
    ("5", "Divide by a number"),
    ("0", "Exit"),
]


def prompt_money(default_currency: str) -> Money:
    """
    Prompt for every field of an amount.

    Rubles and kopeks are re-prompted until a valid integer is entered.
    An empty currency falls back to default_currency.
    """
    rubles = click.prompt("Rubles", type=int)
    kopeks = click.prompt("Kopeks", type=int)
    currency = click.prompt(
        f"Currency (default {default_currency})", default="", show_default=False, type=str
    ).strip()
    transaction_id = click.prompt("Transaction ID (optional)", default="", show_default=False, type=str)
    description = click.prompt("Description (optional)", default="", show_default=False, type=str)

    return create(rubles, kopeks, currency or default_currency, transaction_id, description)


def _apply(current: Money, result: Result[Money], operation: str) -> Money:
    """Report an operation's outcome and return the new current amount."""
    if result.error is not None:
        logger.debug(f"{operation} rejected: {result.error.kind.value}")
        click.echo(f"Error: {result.error.message}")
        return current

    new_amount = result.unwrap()
    logger.debug(f"{operation}: {current} -> {new_amount}")
    click.echo(f"New amount: {new_amount}")
    return new_amount


def _transfer_cost(current: Money, default_currency: str) -> Money:
    commission = click.prompt("Commission in percent", type=float)
    result = transfer_cost(current, commission)

    # The quote is informational; the current amount stays as it was
    if result.error is not None:
        click.echo(f"Error: {result.error.message}")
    else:
        click.echo(f"Amount with {commission}% commission: {result.unwrap()}")
    return current


def _add(current: Money, default_currency: str) -> Money:
    click.echo("Enter the amount to add:")
    other = prompt_money(default_currency)
    return _apply(current, add(current, other), "add")


def _subtract(current: Money, default_currency: str) -> Money:
    click.echo("Enter the amount to subtract:")
    other = prompt_money(default_currency)
    return _apply(current, subtract(current, other), "subtract")


def _multiply(current: Money, default_currency: str) -> Money:
    multiplier = click.prompt("Multiplication factor", type=float)
    return _apply(current, multiply(current, multiplier), "multiply")


def _divide(current: Money, default_currency: str) -> Money:
    divisor = click.prompt("Divisor", type=float)
    if divisor == 0:
        click.echo("Division by zero is not allowed.")
        return current
    return _apply(current, divide(current, divisor), "divide")


_HANDLERS: dict[str, Callable[[Money, str], Money]] = {
    "1": _transfer_cost,
    "2": _add,
    "3": _subtract,
    "4": _multiply,
    "5": _divide,
}


def run_menu(money: Money, default_currency: str) -> Money:
    """
    Run the menu loop until the user picks "0".

    Rejected operations are reported and leave the current amount unchanged.

    Returns:
        The amount current when the user exited
    """
    operations = 0

    while True:
        click.echo(f"\nCurrent amount: {money}")
        click.echo("\nChoose an operation:")
        for key, label in MENU_OPTIONS:
            click.echo(f"{key} - {label}")

        option = click.prompt("Option", default="", show_default=False, type=str).strip()

        if option == "0":
            break

        handler = _HANDLERS.get(option)
        if handler is None:
            click.echo("Invalid option, try again.")
            continue

        money = handler(money, default_currency)
        operations += 1

    logger.debug("Menu session finished after %d operations", operations)
    return money


@click.command()
@click.option("--currency", help="Currency used when an entered amount leaves it blank")
def menu(currency: str | None) -> None:
    """
    Interactive calculator for a rubles/kopeks amount.

    Prompts for a starting amount, then offers transfer cost with commission,
    addition, subtraction, multiplication and division.

    Example:
      moneycalc menu
      moneycalc menu --currency USD
    """
    config = get_config()
    default_currency = currency or config.default_currency

    click.echo("Enter the starting amount:")
    money = prompt_money(default_currency)

    final = run_menu(money, default_currency)
    click.echo(f"\nFinal amount: {final}")
