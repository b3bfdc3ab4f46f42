"""Shared dependencies for price API routes.

Dependencies are injected using FastAPI's Depends() system.

Usage:
    from fastapi import Depends
    from budgetapi.web.dependencies import get_store, price_payload

    @router.post("/prices")
    async def create(item=Depends(price_payload), store=Depends(get_store)):
        ...
"""

from __future__ import annotations

import json

from fastapi import Request

from budgetapi.exceptions import MalformedJSONError
from budgetapi.models import PriceItem
from budgetapi.store import PriceStore
from budgetapi.validation import validate_price_request


def get_store(request: Request) -> PriceStore:
    """Return the PriceStore owned by the running application.

    The store is created once by create_app() and kept on ``app.state``.
    """
    return request.app.state.store


async def read_json_body(request: Request) -> object:
    """Decode the request body as JSON.

    An empty body, or one not sent as JSON, reads as ``{}``.

    Raises:
        MalformedJSONError: If a JSON body cannot be decoded
    """
    content_type = request.headers.get("content-type", "")
    if "json" not in content_type.lower():
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        raise MalformedJSONError() from None


async def price_payload(request: Request) -> PriceItem:
    """Validated PriceItem from the request body (raises InvalidBodyError)."""
    return validate_price_request(await read_json_body(request))
