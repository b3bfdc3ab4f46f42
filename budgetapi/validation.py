"""Request payload validation for the mutating price routes.

A payload is valid when it carries a non-empty string ``name`` and a
finite numeric ``price``. Validation runs before any store access, so a
rejected request never mutates the collection.
"""

from __future__ import annotations

import math
import re
from typing import Any

import structlog

from budgetapi.exceptions import InvalidBodyError
from budgetapi.models import PriceItem

logger = structlog.get_logger(__name__)

# Plain decimal notation only: no digit separators, no "inf"/"nan" spellings
NUMERIC_STRING = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def coerce_price(value: Any) -> int | float | None:
    """Return ``value`` as a finite number, or None if it is not one.

    Numeric strings such as ``"12.5"`` are accepted and converted to float.
    Booleans, null and non-finite values are rejected.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not NUMERIC_STRING.fullmatch(text):
            return None
        number = float(text)
    else:
        return None
    try:
        if not math.isfinite(number):
            return None
    except OverflowError:
        return None
    return number


def validate_price_request(payload: Any) -> PriceItem:
    """Validate a request body and build the PriceItem it describes.

    Args:
        payload: Decoded JSON body (anything; non-objects are invalid)

    Returns:
        PriceItem carrying the payload's name, price and any extra fields.
        The price is not rounded here; the store rounds on write.

    Raises:
        InvalidBodyError: If name or price is missing or malformed
    """
    if not isinstance(payload, dict):
        logger.debug("invalid_body", reason="not_an_object")
        raise InvalidBodyError()

    name = payload.get("name")
    if not isinstance(name, str) or not name:
        logger.debug("invalid_body", reason="bad_name")
        raise InvalidBodyError()

    price = coerce_price(payload.get("price"))
    if price is None:
        logger.debug("invalid_body", reason="bad_price", name=name)
        raise InvalidBodyError()

    return PriceItem.model_validate({**payload, "name": name, "price": price})
