#!/usr/bin/env python3
"""
Main CLI Entry Point for Money Calculator

Provides the command-line interface for the money calculator tools.
"""

import logging
import os

import click

from ..core.config import get_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Money Calculator - rubles and kopeks arithmetic

    Add, subtract, scale and divide amounts, and calculate transfer costs
    with a percentage commission.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        os.environ["MONEYCALC_ENV"] = config_env

    config_obj = get_config()
    config_obj.setup_logging()

    # Configure debug logging if requested
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("moneycalc").setLevel(logging.DEBUG)

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config_obj

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Default currency: {ctx.obj['config'].default_currency}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from moneycalc import __author__, __version__

    click.echo(f"Money Calculator v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Default Currency: {config_obj.default_currency}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


# Import menu command
from .menu import menu  # noqa: E402

# Register the interactive calculator
main.add_command(menu)


if __name__ == "__main__":
    main()
