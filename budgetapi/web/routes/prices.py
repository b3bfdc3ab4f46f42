"""Price management routes.

Routes:
- GET    /prices        - List every stored price
- POST   /prices        - Add a price
- PATCH  /prices/{name} - Change the price of an item, keeping the rest of it
- PUT    /prices/{name} - Replace an item's whole record
- DELETE /prices/{name} - Remove an item

Mutating routes validate the body through the price_payload dependency
before touching the store. Name lookups are exact and case-sensitive and
affect only the first item with that name.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from budgetapi.models import ErrorResponse, PriceItem, PriceList
from budgetapi.store import PriceStore
from budgetapi.web.dependencies import get_store, price_payload

# Create router with prices tag
router = APIRouter(tags=["prices"])

PRICE_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {"schema": {"$ref": "#/components/schemas/PriceItem"}}
        },
    }
}
INVALID_BODY = {400: {"model": ErrorResponse, "description": "Invalid request body"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Item not found"}}


@router.get(
    "/prices",
    summary="Return all prices",
    responses={200: {"model": PriceList, "description": "The food collection"}},
)
async def list_prices(store: PriceStore = Depends(get_store)):
    return {"food": [item.model_dump() for item in store.list()]}


@router.post(
    "/prices",
    status_code=status.HTTP_201_CREATED,
    summary="Add a new price",
    openapi_extra=PRICE_BODY,
    responses={201: {"model": PriceItem, "description": "Price added"}, **INVALID_BODY},
)
async def create_price(
    item: PriceItem = Depends(price_payload),
    store: PriceStore = Depends(get_store),
):
    """Append the item with its price rounded to 2 decimal places."""
    return store.append(item).model_dump()


@router.patch(
    "/prices/{name}",
    summary="Update the price of a specific item",
    openapi_extra=PRICE_BODY,
    responses={
        200: {"model": PriceItem, "description": "Price updated"},
        **INVALID_BODY,
        **NOT_FOUND,
    },
)
async def update_price(
    name: str,
    item: PriceItem = Depends(price_payload),
    store: PriceStore = Depends(get_store),
):
    """Only the body's price is applied; the body's name is ignored."""
    return store.update_price(name, item.price).model_dump()


@router.put(
    "/prices/{name}",
    summary="Replace a specific item",
    openapi_extra=PRICE_BODY,
    responses={
        200: {"model": PriceItem, "description": "Item replaced"},
        **INVALID_BODY,
        **NOT_FOUND,
    },
)
async def replace_price(
    name: str,
    item: PriceItem = Depends(price_payload),
    store: PriceStore = Depends(get_store),
):
    return store.replace(name, item).model_dump()


@router.delete(
    "/prices/{name}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a specific item",
    response_class=Response,
    responses={204: {"description": "Item deleted"}, **NOT_FOUND},
)
async def delete_price(name: str, store: PriceStore = Depends(get_store)):
    store.remove(name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
