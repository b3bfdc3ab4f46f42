"""Health check API routes."""

from fastapi import APIRouter, Depends, status

from budgetapi.store import PriceStore
from budgetapi.web.dependencies import get_store

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(store: PriceStore = Depends(get_store)):
    """Report liveness and the number of stored prices."""
    return {"status": "ok", "items": len(store)}
