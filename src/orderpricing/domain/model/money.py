"""Monetary helpers shared across the domain.

Amounts are plain ``Decimal`` values. Binary floats are never stored:
they cannot represent 0.10 exactly and drift at the discount cap.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from orderpricing.domain.exceptions import ValidationError

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0.00")


def round2(amount: Decimal) -> Decimal:
    """Quantize to exactly two fractional digits, half away from zero."""
    return amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def to_decimal(amount: str | float | int | Decimal) -> Decimal:
    """Coerce to Decimal safely.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.
    """
    if isinstance(amount, bool):
        raise ValidationError(f"Invalid money amount: {amount!r}")
    if isinstance(amount, Decimal):
        return amount
    try:
        result = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid money amount: {amount!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid money amount: {amount!r}")
    return result


def format_money(amount: Decimal | None) -> str:
    if amount is None:
        return "-"
    return f"${amount:.2f}"


def digit_width(amount: Decimal | int) -> int:
    """Integer plus fractional digits needed to hold *amount* exactly."""
    value = Decimal(amount)
    exponent = value.as_tuple().exponent
    fraction = -exponent if isinstance(exponent, int) and exponent < 0 else 0
    return max(value.adjusted(), 0) + 1 + fraction
