"""Application service: Price Order use case.

Builds an Order from item specs, hands it to the dispatch shim and maps
the result to DTOs for display.
"""

from __future__ import annotations

from orderpricing.application.dto import (
    BreakdownDTO,
    OrderItemSpec,
    OrderLineItemDTO,
    PricedOrderDTO,
)
from orderpricing.application.order_dispatch import OrderDispatcher
from orderpricing.domain.exceptions import ValidationError
from orderpricing.domain.model.money import format_money, to_decimal
from orderpricing.domain.model.order import Order, OrderItem
from orderpricing.domain.service.order_pricing_service import OrderPricingService


class PriceOrderHandler:

    def __init__(
        self,
        dispatcher: OrderDispatcher,
        pricing_service: OrderPricingService,
    ) -> None:
        self._dispatcher = dispatcher
        self._pricing_service = pricing_service

    def handle(
        self,
        customer_id: int,
        item_specs: list[OrderItemSpec],
        order_id: int | None = None,
    ) -> PricedOrderDTO:
        """Validate and price a new order.

        Raises ValidationError when the dispatch shim rejects the order.
        """
        order = self.build_order(customer_id, item_specs, order_id)
        priced = self._dispatcher.process(order)
        if priced is None:
            raise ValidationError("Order could not be processed")
        return self._to_dto(priced)

    def validate(self, customer_id: int, item_specs: list[OrderItemSpec]) -> bool:
        return self._dispatcher.validate(self.build_order(customer_id, item_specs))

    def breakdown(self, customer_id: int, item_specs: list[OrderItemSpec]) -> BreakdownDTO:
        """Report every discount candidate; engine errors propagate."""
        result = self._pricing_service.breakdown(self.build_order(customer_id, item_specs))
        return BreakdownDTO(
            subtotal=format_money(result.subtotal),
            total_quantity=result.total_quantity,
            volume_discount=format_money(result.volume_discount),
            customer_discount=format_money(result.customer_discount),
            promotional_discount=format_money(result.promotional_discount),
            chosen_discount=format_money(result.chosen_discount),
            discount_amount=format_money(result.discount_amount),
            total_amount=format_money(result.total_amount),
            cap_applied=result.cap_applied,
        )

    @staticmethod
    def build_order(
        customer_id: int,
        item_specs: list[OrderItemSpec],
        order_id: int | None = None,
    ) -> Order:
        order = Order(order_id=order_id, customer_id=customer_id)
        for spec in item_specs:
            order.add_item(
                OrderItem(
                    product_id=spec.product_id,
                    quantity=spec.quantity,
                    unit_price=to_decimal(spec.unit_price),
                )
            )
        return order

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: Order) -> PricedOrderDTO:
        return PricedOrderDTO(
            order_id=order.order_id,
            customer_id=order.customer_id,  # type: ignore[arg-type]
            items=[
                OrderLineItemDTO(
                    product_id=item.product_id,  # type: ignore[union-attr]
                    quantity=item.quantity,  # type: ignore[union-attr]
                    unit_price=format_money(item.unit_price),  # type: ignore[union-attr]
                    line_total=format_money(item.line_total),  # type: ignore[union-attr]
                )
                for item in order.items
            ],
            subtotal=format_money(order.subtotal),
            discount_amount=format_money(order.discount_amount),
            total_amount=format_money(order.total_amount),
        )
