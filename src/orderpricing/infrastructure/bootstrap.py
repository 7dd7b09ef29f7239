"""Composition root — wires concrete services together.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

from pathlib import Path

from orderpricing.application.order_dispatch import OrderDispatcher
from orderpricing.application.price_order import PriceOrderHandler
from orderpricing.application.user_dispatch import UserDispatcher
from orderpricing.domain.model.discount_configuration import DiscountConfiguration
from orderpricing.domain.service.order_pricing_service import OrderPricingService
from orderpricing.domain.service.order_validator import OrderValidator
from orderpricing.domain.service.user_service import UserService
from orderpricing.infrastructure.config_loader import load_discount_configuration


def discount_configuration(config_path: Path | None = None) -> DiscountConfiguration:
    if config_path is None:
        return DiscountConfiguration()
    return load_discount_configuration(config_path)


def pricing_service(config_path: Path | None = None) -> OrderPricingService:
    return OrderPricingService(discount_configuration(config_path))


def order_dispatcher(config_path: Path | None = None) -> OrderDispatcher:
    return OrderDispatcher(pricing_service(config_path), OrderValidator())


def price_order_handler(config_path: Path | None = None) -> PriceOrderHandler:
    service = pricing_service(config_path)
    return PriceOrderHandler(
        dispatcher=OrderDispatcher(service, OrderValidator()),
        pricing_service=service,
    )


def user_dispatcher() -> UserDispatcher:
    return UserDispatcher(UserService())
