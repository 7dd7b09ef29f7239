"""Order and OrderItem — the records the pricing engine works on.

The Order owns its list of line items.  Callers only ever see copies of
that list, so mutating a list after handing it over never changes the
order retroactively.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable


@dataclass
class OrderItem:
    """A single order line.

    Inputs may be absent (``None``) so that malformed orders can be
    represented and then rejected by the validator or the engine.
    ``line_total`` is an output filled in by pricing.  Two items are the
    same line iff their product IDs match.
    """

    product_id: str | None
    quantity: int | None = field(compare=False)
    unit_price: Decimal | None = field(compare=False)
    line_total: Decimal | None = field(default=None, compare=False)

    def __hash__(self) -> int:
        return hash(self.product_id)


class Order:
    """A purchase order.

    ``subtotal``, ``discount_amount`` and ``total_amount`` stay ``None``
    until the order has been priced.  Identity is the ``order_id``:
    changing any other field does not turn it into a different order.
    """

    def __init__(
        self,
        order_id: int | None = None,
        customer_id: int | None = None,
        items: Iterable[OrderItem | None] | None = None,
    ) -> None:
        self.order_id = order_id
        self.customer_id = customer_id
        self._items: list[OrderItem | None] = list(items) if items is not None else []
        self.subtotal: Decimal | None = None
        self.discount_amount: Decimal | None = None
        self.total_amount: Decimal | None = None

    # --- Line items -----------------------------------------------------------

    @property
    def items(self) -> list[OrderItem | None]:
        return list(self._items)

    @items.setter
    def items(self, items: Iterable[OrderItem | None] | None) -> None:
        self._items = list(items) if items is not None else []

    def add_item(self, item: OrderItem | None) -> None:
        """Append *item*; ``None`` is ignored."""
        if item is not None:
            self._items.append(item)

    @property
    def is_priced(self) -> bool:
        return self.total_amount is not None

    # --- Identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self.order_id == other.order_id

    def __hash__(self) -> int:
        return hash(self.order_id)

    def __repr__(self) -> str:
        return (
            f"Order(order_id={self.order_id!r}, customer_id={self.customer_id!r}, "
            f"items={len(self._items)}, total_amount={self.total_amount!r})"
        )
