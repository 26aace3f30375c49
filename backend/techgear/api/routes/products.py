"""Product Routes — catalogue listing, lookup, search and product CRUD.

Invariants:
    - Static paths (/stats, /search, /category/...) are registered before /{product_id}
    - Zero rows affected by PUT/DELETE → 404
    - An empty or missing search term is rejected with 400, never treated as "match all"
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from pydantic import ValidationError

from techgear.api.dependencies import (
    get_product_store, get_category_store, get_review_store,
)
from techgear.core.errors import InputValidationError, ResourceNotFoundError
from techgear.core.repository_protocols import (
    ProductStore, CategoryStore, ReviewStore,
)
from techgear.schemas.product import (
    PriceRange, ProductWrite, ProductCreated, MessageResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/products", tags=["products"])


@router.get("")
async def list_products(
    min_price: float | None = Query(None, alias="minPrice"),
    max_price: float | None = Query(None, alias="maxPrice"),
    store: ProductStore = Depends(get_product_store),
):
    """List products, optionally bounded by price."""
    try:
        filters = PriceRange(min_price=min_price, max_price=max_price)
    except ValidationError:
        raise InputValidationError(
            "minPrice cannot be greater than maxPrice", "minPrice",
        )
    return await store.list_products(filters)


@router.get("/stats")
async def product_stats(store: CategoryStore = Depends(get_category_store)):
    """Product count and average price per category."""
    return await store.product_stats()


@router.get("/search")
async def search_products(
    name: str | None = Query(None),
    store: ProductStore = Depends(get_product_store),
):
    """Search products whose name contains the given term."""
    if name is None or not name.strip():
        raise InputValidationError("Search term is missing", "name")
    return await store.search_by_name(name)


@router.get("/category/{category_id}")
async def products_by_category(
    category_id: int, store: ProductStore = Depends(get_product_store),
):
    return await store.list_by_category(category_id)


@router.get("/{product_id}")
async def get_product(
    product_id: int, store: ProductStore = Depends(get_product_store),
):
    product = await store.get_product(product_id)
    if product is None:
        raise ResourceNotFoundError("Product", product_id)
    return product


@router.post(
    "", response_model=ProductCreated, status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductWrite, store: ProductStore = Depends(get_product_store),
):
    product_id = await store.create_product(body)
    return ProductCreated(message="Product created", productId=product_id)


@router.put("/{product_id}", response_model=MessageResponse)
async def update_product(
    product_id: int,
    body: ProductWrite,
    store: ProductStore = Depends(get_product_store),
):
    if await store.update_product(product_id, body) == 0:
        raise ResourceNotFoundError("Product", product_id)
    return MessageResponse(message="Product updated")


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: int, store: ProductStore = Depends(get_product_store),
):
    """Delete a product together with its reviews."""
    if await store.delete_product(product_id) == 0:
        raise ResourceNotFoundError("Product", product_id)
    return MessageResponse(message="Product deleted")


@router.delete("/{product_id}/reviews")
async def delete_product_reviews(
    product_id: int, store: ReviewStore = Depends(get_review_store),
):
    """Delete every review of one product; succeeds even when there are none."""
    deleted = await store.delete_for_product(product_id)
    return {"message": "Reviews deleted", "deleted": deleted}
