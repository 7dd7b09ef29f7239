"""Order dispatch shim.

Thin entry point in front of the validator and the pricing engine.
Absent or unpriceable orders come back as ``None`` so outer callers see
a single "could not be processed" signal.
"""

from __future__ import annotations

import logging

from orderpricing.domain.exceptions import InvalidInputError, ValidationError
from orderpricing.domain.model.order import Order
from orderpricing.domain.service.order_pricing_service import OrderPricingService
from orderpricing.domain.service.order_validator import OrderValidator

logger = logging.getLogger(__name__)


class OrderDispatcher:

    def __init__(
        self,
        pricing_service: OrderPricingService,
        validator: OrderValidator | None = None,
    ) -> None:
        if pricing_service is None:
            raise ValidationError("OrderPricingService cannot be None")
        self._pricing_service = pricing_service
        self._validator = validator if validator is not None else OrderValidator()

    def process(self, order: Order | None) -> Order | None:
        """Validate and price *order*; ``None`` if either step rejects it."""
        if order is None:
            return None
        if not self.validate(order):
            logger.info("Order %s rejected by validator", order.order_id)
            return None
        return self.calculate_total(order)

    def calculate_total(self, order: Order | None) -> Order | None:
        if order is None:
            return None
        if not self._validator.is_valid(order):
            return None
        try:
            return self._pricing_service.price(order)
        except InvalidInputError as exc:
            logger.info("Order %s could not be priced: %s", order.order_id, exc)
            return None

    def validate(self, order: Order | None) -> bool:
        if order is None:
            return False
        return self._validator.is_valid(order)

    def price_only(self, order: Order | None) -> Order:
        """Call the engine directly; raises InvalidInputError on bad input."""
        return self._pricing_service.price(order)
