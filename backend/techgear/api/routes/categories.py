"""Category Routes — product-link maintenance.

Invariants:
    - PUT /categories/{category_id}/products rebuilds the whole join table;
      category_id is accepted for path compatibility and otherwise ignored
"""

import logging

from fastapi import APIRouter, Depends

from techgear.api.dependencies import get_category_store
from techgear.core.repository_protocols import CategoryStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/categories", tags=["categories"])


@router.put("/{category_id}/products")
async def rebuild_category_products(
    category_id: int, store: CategoryStore = Depends(get_category_store),
):
    """Rebuild products_categories with foreign keys cascading on update."""
    logger.info(
        "Product category rebuild requested",
        extra={"category_id": category_id},
    )
    rows = await store.rebuild_product_links()
    return {"message": "Product categories updated", "rows": rows}
