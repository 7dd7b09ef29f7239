"""Unit tests for DiscountConfiguration."""

import dataclasses
from decimal import Decimal

import pytest

from orderpricing.domain.exceptions import ValidationError
from orderpricing.domain.model.discount_configuration import DiscountConfiguration


class TestDefaults:

    def test_production_values(self):
        cfg = DiscountConfiguration()
        assert cfg.volume_thresholds == (10, 50, 100)
        assert cfg.volume_tier1_rate == Decimal("0.05")
        assert cfg.volume_tier2_rate == Decimal("0.10")
        assert cfg.volume_tier3_rate == Decimal("0.15")
        assert cfg.premium_customer_discount_rate == Decimal("0.20")
        assert cfg.promotional_discount_threshold == Decimal("500.00")
        assert cfg.promotional_discount_rate == Decimal("0.10")
        assert cfg.max_discount_rate == Decimal("0.30")

    def test_rate_fields(self):
        assert len(DiscountConfiguration.rate_fields()) == 6


class TestImmutability:

    def test_cannot_be_mutated(self):
        cfg = DiscountConfiguration()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.max_discount_rate = Decimal("0.99")  # type: ignore[misc]

    def test_override_keeps_other_defaults(self):
        cfg = DiscountConfiguration(max_discount_rate=Decimal("0.15"))
        assert cfg.max_discount_rate == Decimal("0.15")
        assert cfg.premium_customer_discount_rate == Decimal("0.20")


class TestValidation:

    def test_float_rate_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            DiscountConfiguration(max_discount_rate=0.3)  # type: ignore[arg-type]

    def test_rate_above_one_rejected(self):
        with pytest.raises(ValidationError, match="between 0 and 1"):
            DiscountConfiguration(volume_tier1_rate=Decimal("1.5"))

    def test_negative_rate_rejected(self):
        with pytest.raises(ValidationError, match="between 0 and 1"):
            DiscountConfiguration(promotional_discount_rate=Decimal("-0.1"))

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            DiscountConfiguration(volume_tier1_threshold=-1)

    def test_decreasing_thresholds_rejected(self):
        with pytest.raises(ValidationError, match="non-decreasing"):
            DiscountConfiguration(volume_tier2_threshold=5)

    def test_negative_promotional_threshold_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            DiscountConfiguration(promotional_discount_threshold=Decimal("-1"))
