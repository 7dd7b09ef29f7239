"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one requested line (product, quantity, unit price as text)."""

    product_id: str
    quantity: int
    unit_price: str


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single priced line as displayed to the user."""

    product_id: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class PricedOrderDTO:
    """Output: a priced order as displayed to the user."""

    order_id: int | None
    customer_id: int
    items: list[OrderLineItemDTO]
    subtotal: str
    discount_amount: str
    total_amount: str


@dataclass(frozen=True)
class BreakdownDTO:
    """Output: every discount candidate of one pricing run."""

    subtotal: str
    total_quantity: int
    volume_discount: str
    customer_discount: str
    promotional_discount: str
    chosen_discount: str
    discount_amount: str
    total_amount: str
    cap_applied: bool
