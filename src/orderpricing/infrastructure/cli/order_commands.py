"""CLI commands for pricing orders."""

from __future__ import annotations

import click

from orderpricing.application.dto import OrderItemSpec, PricedOrderDTO
from orderpricing.domain.exceptions import DomainException
from orderpricing.infrastructure.bootstrap import price_order_handler


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'P1:3@10.00,P2:1@5.50' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        product_id, _, rest = entry.rpartition(":")
        qty_str, at, price = rest.partition("@")
        if not product_id or not at:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'ProductId:Quantity@UnitPrice'."
            )
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(
            OrderItemSpec(product_id=product_id.strip(), quantity=qty, unit_price=price.strip())
        )
    return specs


_customer_option = click.option(
    "--customer", "customer_id", required=True, type=int, help="Customer ID."
)
_items_option = click.option(
    "--items", required=True, help="Items as 'ProductId:Qty@Price,ProductId:Qty@Price'."
)


@click.command("price")
@_customer_option
@_items_option
@click.option("--order-id", type=int, default=None, help="Optional order ID.")
@click.pass_obj
def order_price(obj: dict, customer_id: int, items: str, order_id: int | None) -> None:
    """Validate an order and print its discounted total."""
    specs = _parse_items(items)
    try:
        handler = price_order_handler(obj.get("config_path"))
        dto = handler.handle(customer_id=customer_id, item_specs=specs, order_id=order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


def _display_order(dto: PricedOrderDTO) -> None:
    if dto.order_id is not None:
        click.echo(f"Order #{dto.order_id}")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>20}")
    click.echo(f"  {'Discount':<27} {dto.discount_amount:>20}")
    click.echo(f"  {'Order Total':<27} {dto.total_amount:>20}")


@click.command("validate")
@_customer_option
@_items_option
@click.pass_obj
def order_validate(obj: dict, customer_id: int, items: str) -> None:
    """Check whether an order can be priced (exit code 1 if not)."""
    specs = _parse_items(items)
    try:
        handler = price_order_handler(obj.get("config_path"))
        valid = handler.validate(customer_id=customer_id, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("valid" if valid else "invalid")
    if not valid:
        raise click.exceptions.Exit(1)


@click.command("breakdown")
@_customer_option
@_items_option
@click.pass_obj
def order_breakdown(obj: dict, customer_id: int, items: str) -> None:
    """Show every discount candidate and which one was applied."""
    specs = _parse_items(items)
    try:
        handler = price_order_handler(obj.get("config_path"))
        dto = handler.breakdown(customer_id=customer_id, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'Subtotal':<22} {dto.subtotal:>12}")
    click.echo(f"{'Total quantity':<22} {dto.total_quantity:>12}")
    click.echo(f"{'Volume discount':<22} {dto.volume_discount:>12}")
    click.echo(f"{'Customer discount':<22} {dto.customer_discount:>12}")
    click.echo(f"{'Promotional discount':<22} {dto.promotional_discount:>12}")
    click.echo(f"{'Best discount':<22} {dto.chosen_discount:>12}")
    capped = "  (capped)" if dto.cap_applied else ""
    click.echo(f"{'Applied discount':<22} {dto.discount_amount:>12}{capped}")
    click.echo(f"{'Order Total':<22} {dto.total_amount:>12}")
