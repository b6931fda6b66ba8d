from decimal import Decimal

import click

from storems.infrastructure.bootstrap import DEFAULT_LOG_LEVEL, Settings, dispatcher
from storems.infrastructure.cli.menu import run_menu
from storems.infrastructure.cli.params import DECIMAL
from storems.infrastructure.logging_config import configure_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group(invoke_without_command=True)
@click.option(
    "--tax-rate",
    type=DECIMAL,
    default="5.0",
    show_default=True,
    envvar="STOREMS_TAX_RATE",
    help="Tax rate in percent applied to every bill.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    envvar="STOREMS_LOG_LEVEL",
    help="Diagnostics written to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, tax_rate: Decimal, log_level: str) -> None:
    """Store Management System: inventory and customer billing"""
    settings = Settings(tax_rate=tax_rate, log_level=log_level.upper())
    configure_logging(settings.log_level)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


@cli.command()
@click.pass_obj
def menu(settings: Settings) -> None:
    """Start the interactive menu (the default)."""
    try:
        run_menu(dispatcher(settings))
    except click.Abort:
        # end of input
        click.echo()
