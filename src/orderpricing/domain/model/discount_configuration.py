"""Discount parameters consumed by the pricing engine.

Built once and shared read-only; the engine's output is purely a
function of the order and this configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal

from orderpricing.domain.exceptions import ValidationError

_ONE = Decimal("1")
_ZERO = Decimal("0")


@dataclass(frozen=True)
class DiscountConfiguration:
    """Volume tiers, premium and promotional rates, and the discount cap.

    The defaults are the production values.  Rates are fractions of the
    subtotal (``Decimal("0.05")`` is 5%).
    """

    volume_tier1_threshold: int = 10
    volume_tier1_rate: Decimal = Decimal("0.05")
    volume_tier2_threshold: int = 50
    volume_tier2_rate: Decimal = Decimal("0.10")
    volume_tier3_threshold: int = 100
    volume_tier3_rate: Decimal = Decimal("0.15")

    premium_customer_discount_rate: Decimal = Decimal("0.20")

    promotional_discount_threshold: Decimal = Decimal("500.00")
    promotional_discount_rate: Decimal = Decimal("0.10")

    max_discount_rate: Decimal = Decimal("0.30")

    def __post_init__(self) -> None:
        for name in self.rate_fields():
            rate = getattr(self, name)
            if not isinstance(rate, Decimal):
                raise ValidationError(
                    f"{name} must be a Decimal, got {type(rate).__name__}"
                )
            if rate < _ZERO or rate > _ONE:
                raise ValidationError(f"{name} must be between 0 and 1, got {rate}")

        thresholds = self.volume_thresholds
        for name, value in zip(self.volume_threshold_fields(), thresholds):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(
                    f"{name} must be an integer, got {type(value).__name__}"
                )
            if value < 0:
                raise ValidationError(f"{name} cannot be negative, got {value}")
        if list(thresholds) != sorted(thresholds):
            raise ValidationError(
                f"Volume tier thresholds must be non-decreasing, got {thresholds}"
            )

        promo = self.promotional_discount_threshold
        if not isinstance(promo, Decimal):
            raise ValidationError(
                "promotional_discount_threshold must be a Decimal, "
                f"got {type(promo).__name__}"
            )
        if promo < _ZERO:
            raise ValidationError(
                f"promotional_discount_threshold cannot be negative, got {promo}"
            )

    @property
    def volume_thresholds(self) -> tuple[int, int, int]:
        return (
            self.volume_tier1_threshold,
            self.volume_tier2_threshold,
            self.volume_tier3_threshold,
        )

    @staticmethod
    def rate_fields() -> tuple[str, ...]:
        return tuple(f.name for f in fields(DiscountConfiguration) if f.name.endswith("_rate"))

    @staticmethod
    def volume_threshold_fields() -> tuple[str, ...]:
        return (
            "volume_tier1_threshold",
            "volume_tier2_threshold",
            "volume_tier3_threshold",
        )
