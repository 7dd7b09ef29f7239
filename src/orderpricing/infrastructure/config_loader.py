"""Load a DiscountConfiguration from a TOML file.

Two layouts are accepted::

    # discounts.toml
    [discounts]
    max_discount_rate = "0.25"

    # pyproject.toml
    [tool.orderpricing.discounts]
    max_discount_rate = "0.25"

Keys left out keep their defaults.  Quote rates and money thresholds as
strings to keep them exact; bare TOML floats are converted via ``str``.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import fields
from pathlib import Path
from typing import Any, Mapping

from orderpricing.domain.exceptions import ValidationError
from orderpricing.domain.model.discount_configuration import DiscountConfiguration
from orderpricing.domain.model.money import to_decimal

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset(f.name for f in fields(DiscountConfiguration))


def load_discount_configuration(path: Path) -> DiscountConfiguration:
    if not path.exists():
        raise ValidationError(f"Discount configuration file not found: {path}")
    try:
        document = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ValidationError(f"Invalid TOML in {path}: {exc}") from exc

    section = _discount_section(document)
    logger.debug("Loaded %d discount settings from %s", len(section), path)
    return discount_configuration_from_mapping(section)


def discount_configuration_from_mapping(raw: Mapping[str, Any]) -> DiscountConfiguration:
    unknown = sorted(set(raw) - _KNOWN_KEYS)
    if unknown:
        raise ValidationError(f"Unknown discount settings: {', '.join(unknown)}")

    values: dict[str, Any] = {}
    for key, value in raw.items():
        if key in DiscountConfiguration.volume_threshold_fields():
            values[key] = _to_int(key, value)
        else:
            values[key] = to_decimal(value)
    return DiscountConfiguration(**values)


def _discount_section(document: Mapping[str, Any]) -> Mapping[str, Any]:
    tool = document.get("tool", {})
    if not isinstance(tool, Mapping):
        raise ValidationError("The tool section must be a table")
    tool_section = tool.get("orderpricing", {})
    if not isinstance(tool_section, Mapping):
        raise ValidationError("The tool.orderpricing section must be a table")

    section = tool_section.get("discounts", document.get("discounts", {}))
    if not isinstance(section, Mapping):
        raise ValidationError("The discounts section must be a table")
    return section


def _to_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{key} must be an integer, got {value!r}")
    if isinstance(value, float):
        # TOML floats are accepted only when they carry no fraction.
        if not value.is_integer():
            raise ValidationError(f"{key} must be an integer, got {value!r}")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{key} must be an integer, got {value!r}") from exc
