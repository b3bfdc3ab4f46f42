"""Pydantic models for the price API.

PriceItem is the stored record. It keeps any extra fields the client sent,
so a PUT replaces the record wholesale, extras included.
"""

from __future__ import annotations

from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, Field

CENTS = Decimal("0.01")
MAX_ROUNDED = 10**21


def round_price(value: int | float) -> int | float:
    """Round a price to 2 decimal places.

    Ties go toward positive infinity on the exact binary value, so
    ``0.125 -> 0.13`` and ``-0.125 -> -0.12``. Integral results come back
    as ``int`` so they serialize as ``50`` rather than ``50.0``.

    Magnitudes of 1e21 and above have no fractional digits left to round
    and are returned unchanged.
    """
    if abs(value) >= MAX_ROUNDED:
        return value
    exact = Decimal(value)
    if exact < 0:
        rounded = -((-exact).quantize(CENTS, rounding=ROUND_HALF_DOWN))
    else:
        rounded = exact.quantize(CENTS, rounding=ROUND_HALF_UP)
    result = float(rounded)
    if result.is_integer():
        return int(result)
    return result


class PriceItem(BaseModel):
    """A named price. ``name`` is the de-facto key within the store."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"name": "kiwi", "price": 33.34}},
    )

    name: str = Field(min_length=1)
    price: int | float


class PriceList(BaseModel):
    """Body of ``GET /prices``."""

    food: list[PriceItem]


class ErrorResponse(BaseModel):
    error: str
