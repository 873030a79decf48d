from __future__ import annotations

import locale

import click

from cupcake.infrastructure.cli.order_commands import (
    order_create,
    order_dates,
    order_flavors,
)
from cupcake.infrastructure.formatting import apply_locale
from cupcake.infrastructure.logging_config import setup_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.option(
    "--locale",
    "locale_name",
    default=None,
    help="Locale for dates and prices ('' for the environment's locale).",
)
def cli(verbose: bool, locale_name: str | None) -> None:
    """Cupcake: order cupcakes for pickup"""
    logger = setup_logging(verbose)
    if locale_name is not None:
        try:
            active = apply_locale(locale_name)
        except locale.Error:
            raise click.BadParameter(
                f"Locale '{locale_name}' is not available", param_hint="'--locale'"
            )
        logger.debug("Using locale %s", active)


# Register subcommands
cli.add_command(order_create)
cli.add_command(order_dates)
cli.add_command(order_flavors)
