"""Area unit normalization. One constant is used in both directions."""
from decimal import Decimal
from enum import Enum as PyEnum
from typing import NamedTuple

from expocost.engine.errors import InvalidArea

SQFT_PER_SQM = Decimal("10.7639")


class AreaUnit(str, PyEnum):
    SQM = "sqm"
    SQFT = "sqft"


class NormalizedArea(NamedTuple):
    area_sqm: Decimal
    area_sqft: Decimal


def sqm_to_sqft(value: Decimal) -> Decimal:
    return value * SQFT_PER_SQM


def sqft_to_sqm(value: Decimal) -> Decimal:
    return value / SQFT_PER_SQM


def parse_unit(unit: str | AreaUnit) -> AreaUnit:
    """Accept "sqm"/"sqft" case-insensitively."""
    if isinstance(unit, AreaUnit):
        return unit
    try:
        return AreaUnit((unit or "").strip().lower())
    except ValueError:
        raise InvalidArea(f'Area unit must be "sqm" or "sqft", got {unit!r}', field="area.unit") from None


def normalize_area(value: Decimal, unit: str | AreaUnit) -> NormalizedArea:
    """Express an area in both square meters and square feet."""
    area_unit = parse_unit(unit)
    if value is None or not value.is_finite() or value <= 0:
        raise InvalidArea(f"Area must be greater than 0, got {value}", field="area.value")
    if area_unit == AreaUnit.SQM:
        return NormalizedArea(area_sqm=value, area_sqft=sqm_to_sqft(value))
    return NormalizedArea(area_sqm=sqft_to_sqm(value), area_sqft=value)
