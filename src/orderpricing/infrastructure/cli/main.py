import logging
from pathlib import Path

import click

from orderpricing.infrastructure.cli.config_commands import config_show
from orderpricing.infrastructure.cli.order_commands import (
    order_breakdown,
    order_price,
    order_validate,
)
from orderpricing.infrastructure.cli.user_commands import (
    user_check_email,
    user_check_username,
    user_create,
)
from orderpricing.infrastructure.logging_config import setup_logging


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with discount settings.",
)
@click.option("--verbose", is_flag=True, default=False, help="Log pricing details to stderr.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """Order pricing and user validation."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@cli.group()
def order() -> None:
    """Price and validate orders."""


@cli.group()
def user() -> None:
    """Validate and create users."""


@cli.group()
def config() -> None:
    """Inspect discount settings."""


# Register subcommands
order.add_command(order_breakdown)
order.add_command(order_price)
order.add_command(order_validate)
user.add_command(user_check_email)
user.add_command(user_check_username)
user.add_command(user_create)
config.add_command(config_show)
