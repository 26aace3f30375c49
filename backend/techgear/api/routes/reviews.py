"""Review Routes — rating statistics."""

from fastapi import APIRouter, Depends

from techgear.api.dependencies import get_review_store
from techgear.core.repository_protocols import ReviewStore

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("/stats")
async def review_stats(store: ReviewStore = Depends(get_review_store)):
    """Average rating per product."""
    return await store.review_stats()
