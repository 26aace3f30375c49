"""Boundary Protocols — contracts between the routes and the data access layer.

Invariants:
    - Routes depend on these Protocols, never on a concrete repository class
    - Implementations are provided per request via FastAPI dependencies
      (api/dependencies.py) and can be swapped with dependency_overrides

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol

from techgear.schemas.product import PriceRange, ProductWrite


class ProductStore(Protocol):
    """Contract for product persistence."""
    async def list_products(self, filters: PriceRange) -> list[dict]: ...
    async def get_product(self, product_id: int) -> dict | None: ...
    async def search_by_name(self, term: str) -> list[dict]: ...
    async def list_by_category(self, category_id: int) -> list[dict]: ...
    async def create_product(self, data: ProductWrite) -> int: ...
    async def update_product(self, product_id: int, data: ProductWrite) -> int: ...
    async def delete_product(self, product_id: int) -> int: ...


class CustomerStore(Protocol):
    """Contract for customer persistence."""
    async def get_customer(self, customer_id: int) -> dict | None: ...
    async def update_contact_info(self, customer_id: int, changes: dict) -> int: ...
    async def list_orders(self, customer_id: int) -> list[dict]: ...


class CategoryStore(Protocol):
    """Contract for category statistics and join-table maintenance."""
    async def product_stats(self) -> list[dict]: ...
    async def rebuild_product_links(self) -> int: ...


class ReviewStore(Protocol):
    """Contract for review persistence."""
    async def delete_for_product(self, product_id: int) -> int: ...
    async def review_stats(self) -> list[dict]: ...
