"""CLI commands for the user-lifecycle service."""

from __future__ import annotations

import click

from orderpricing.infrastructure.bootstrap import user_dispatcher


def _report(valid: bool) -> None:
    click.echo("valid" if valid else "invalid")
    if not valid:
        raise click.exceptions.Exit(1)


@click.command("check-email")
@click.argument("email")
def user_check_email(email: str) -> None:
    """Check an email address (exit code 1 if invalid)."""
    _report(user_dispatcher().validate_email(email))


@click.command("check-username")
@click.argument("username")
def user_check_username(username: str) -> None:
    """Check a username (exit code 1 if invalid)."""
    _report(user_dispatcher().validate_username(username))


@click.command("create")
@click.option("--username", required=True, help="Username (3-50 characters).")
@click.option("--email", required=True, help="Email address.")
def user_create(username: str, email: str) -> None:
    """Create a user after validating both fields."""
    created = user_dispatcher().create_user(username, email)
    if created is None:
        raise click.ClickException("Invalid username or email")

    status = "active" if created.active else "inactive"
    click.echo(f"User '{created.username}' <{created.email}> created ({status})")
