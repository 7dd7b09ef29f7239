"""Domain service: Order Validation.

A boolean gate in front of the pricing engine.  It is stricter than the
engine's own preconditions (positive customer ID, non-blank product ID)
and never raises; any deviation simply yields ``False``.
"""

from __future__ import annotations

from decimal import Decimal

from orderpricing.domain.model.order import Order, OrderItem


class OrderValidator:

    def is_valid(self, order: Order | None) -> bool:
        if order is None:
            return False

        if not _is_positive_int(order.customer_id):
            return False

        items = order.items
        if not items:
            return False

        return all(self._is_valid_item(item) for item in items)

    @staticmethod
    def _is_valid_item(item: OrderItem | None) -> bool:
        if item is None:
            return False

        if not isinstance(item.product_id, str) or not item.product_id.strip():
            return False

        if not _is_positive_int(item.quantity):
            return False

        price = item.unit_price
        if not isinstance(price, Decimal) or not price.is_finite():
            return False
        return price >= 0


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
