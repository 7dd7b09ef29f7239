"""CLI commands for discount configuration."""

from __future__ import annotations

from dataclasses import fields

import click

from orderpricing.domain.exceptions import DomainException
from orderpricing.infrastructure.bootstrap import discount_configuration


@click.command("show")
@click.pass_obj
def config_show(obj: dict) -> None:
    """Print the effective discount settings."""
    try:
        cfg = discount_configuration(obj.get("config_path"))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for f in fields(cfg):
        click.echo(f"{f.name:<32} {getattr(cfg, f.name)}")
