"""Domain service: Order Pricing.

Turns an order into its final monetary outcome by applying the
business rules in a fixed sequence:

  1. subtotal (line totals summed)
  2. volume discount (tier by total quantity)
  3. customer-tier discount (premium customers)
  4. promotional discount (subtotal at or above a threshold)
  5. best single discount wins -- the candidates are never summed
  6. cap at a fraction of the subtotal
  7. total

Every stored amount is rounded half-up to cents.  Products and
threshold comparisons use the un-rounded values, so the pipeline runs
in a decimal context wide enough to keep every product exact.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from decimal import Decimal, localcontext

from orderpricing.domain.exceptions import InvalidInputError, ValidationError
from orderpricing.domain.model.discount_configuration import DiscountConfiguration
from orderpricing.domain.model.money import ZERO, digit_width, round2
from orderpricing.domain.model.order import Order, OrderItem

logger = logging.getLogger(__name__)

PREMIUM_CUSTOMER_MODULUS = 100

# Never narrower than the default decimal context.
MIN_PRECISION = 28
# Room for the two cents digits added by rounding and a carry.
_PRECISION_SLACK = 4


def is_premium_customer(customer_id: int | None) -> bool:
    """Customer IDs divisible by 100 are premium; an absent ID is not."""
    if customer_id is None:
        return False
    return customer_id % PREMIUM_CUSTOMER_MODULUS == 0


@dataclass(frozen=True)
class PricingBreakdown:
    """Every intermediate figure of one pricing run."""

    line_totals: tuple[Decimal, ...]
    subtotal: Decimal
    total_quantity: int
    volume_discount: Decimal
    customer_discount: Decimal
    promotional_discount: Decimal
    chosen_discount: Decimal
    discount_amount: Decimal
    total_amount: Decimal
    cap_applied: bool


class OrderPricingService:

    def __init__(self, discount_config: DiscountConfiguration) -> None:
        if discount_config is None:
            raise ValidationError("DiscountConfiguration cannot be None")
        self._config = discount_config
        self._config_width = max(
            digit_width(getattr(discount_config, f.name))
            for f in fields(discount_config)
        )

    @property
    def discount_config(self) -> DiscountConfiguration:
        return self._config

    def price(self, order: Order) -> Order:
        """Price *order* in place and return it.

        Sets ``line_total`` on every item and ``subtotal``,
        ``discount_amount`` and ``total_amount`` on the order.

        Raises InvalidInputError if the order is absent, has no items,
        or holds an absent item, a non-positive quantity or a negative
        unit price.
        """
        breakdown = self.breakdown(order)
        for item, line_total in zip(order.items, breakdown.line_totals):
            item.line_total = line_total
        order.subtotal = breakdown.subtotal
        order.discount_amount = breakdown.discount_amount
        order.total_amount = breakdown.total_amount
        logger.debug(
            "Priced order %s: subtotal=%s discount=%s total=%s",
            order.order_id,
            breakdown.subtotal,
            breakdown.discount_amount,
            breakdown.total_amount,
        )
        return order

    def breakdown(self, order: Order) -> PricingBreakdown:
        """Run the pricing pipeline and report every candidate discount.

        Nothing is written onto the order or its items.
        """
        items = self._checked_items(order)

        with localcontext() as ctx:
            ctx.prec = self._precision_for(items)

            # Step 1: subtotal
            line_totals = tuple(round2(item.unit_price * item.quantity) for item in items)
            subtotal = round2(sum(line_totals, ZERO))

            # Steps 2-4: independent discount candidates
            total_quantity = sum(item.quantity for item in items)
            volume = self._volume_discount(total_quantity, subtotal)
            customer = self._customer_tier_discount(order.customer_id, subtotal)
            promotional = self._promotional_discount(subtotal)

            # Step 5: only one discount type applies
            chosen = max(volume, customer, promotional)

            # Step 6: cap
            discount, cap_applied = self._apply_cap(chosen, subtotal)

            # Step 7: total
            total = round2(subtotal - discount)

        return PricingBreakdown(
            line_totals=line_totals,
            subtotal=subtotal,
            total_quantity=total_quantity,
            volume_discount=volume,
            customer_discount=customer,
            promotional_discount=promotional,
            chosen_discount=chosen,
            discount_amount=discount,
            total_amount=total,
            cap_applied=cap_applied,
        )

    # --- Preconditions --------------------------------------------------------

    @staticmethod
    def _checked_items(order: Order | None) -> list[OrderItem]:
        """Assert every engine precondition before any amount is computed."""
        if order is None:
            raise _reject("Order cannot be None")

        items = order.items
        if not items:
            raise _reject("Order must contain at least one item")

        for item in items:
            if item is None:
                raise _reject("Order item cannot be None")
            if item.quantity is None or item.quantity <= 0:
                raise _reject(
                    f"Item quantity must be greater than zero "
                    f"(product {item.product_id!r}, got {item.quantity!r})"
                )
            price = item.unit_price
            if (
                price is None
                or (isinstance(price, Decimal) and not price.is_finite())
                or price < 0
            ):
                raise _reject(
                    f"Item unit price must be non-negative "
                    f"(product {item.product_id!r}, got {price!r})"
                )
        return items

    def _precision_for(self, items: list[OrderItem]) -> int:
        """Digits needed to keep every line product, sum and rate product exact."""
        line_width = max(
            digit_width(item.unit_price) + digit_width(item.quantity) for item in items
        )
        width = line_width + digit_width(len(items)) + self._config_width + _PRECISION_SLACK
        return max(MIN_PRECISION, width)

    # --- Pipeline steps -------------------------------------------------------

    def _volume_discount(self, total_quantity: int, subtotal: Decimal) -> Decimal:
        cfg = self._config
        if total_quantity >= cfg.volume_tier3_threshold:
            rate = cfg.volume_tier3_rate
        elif total_quantity >= cfg.volume_tier2_threshold:
            rate = cfg.volume_tier2_rate
        elif total_quantity >= cfg.volume_tier1_threshold:
            rate = cfg.volume_tier1_rate
        else:
            return ZERO
        return round2(subtotal * rate)

    def _customer_tier_discount(self, customer_id: int | None, subtotal: Decimal) -> Decimal:
        if not is_premium_customer(customer_id):
            return ZERO
        return round2(subtotal * self._config.premium_customer_discount_rate)

    def _promotional_discount(self, subtotal: Decimal) -> Decimal:
        if subtotal >= self._config.promotional_discount_threshold:
            return round2(subtotal * self._config.promotional_discount_rate)
        return ZERO

    def _apply_cap(self, discount: Decimal, subtotal: Decimal) -> tuple[Decimal, bool]:
        # Compared un-rounded so a discount equal to the rounded cap passes.
        max_allowed = subtotal * self._config.max_discount_rate
        if discount > max_allowed:
            return round2(max_allowed), True
        return discount, False


def _reject(reason: str) -> InvalidInputError:
    logger.debug("Cannot price order: %s", reason)
    return InvalidInputError(reason)
