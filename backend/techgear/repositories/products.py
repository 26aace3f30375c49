"""Product Repository — catalogue queries and product writes.

Invariants:
    - All read queries share one base SELECT (products + manufacturer + category)
    - Listing predicates are appended conjunctively, one per supplied bound
    - delete_product purges only that product's reviews, in the same transaction

Design Decisions:
    - Products linked to several categories appear once per category, as in the
      legacy listing
    - Category links and order lines are not purged: a still-referenced product
      fails to delete with StorageError (foreign keys never cascade on delete)
"""

import logging

from sqlalchemy import Select, select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from techgear.infrastructure.database import storage_operation
from techgear.models import Product, Manufacturer, Category, ProductCategory, Review
from techgear.schemas.product import PriceRange, ProductWrite

logger = logging.getLogger(__name__)


def product_query() -> Select:
    """Base product SELECT shared by every catalogue read."""
    return (
        select(
            Product.product_id,
            Product.name,
            Product.description,
            Product.price,
            Product.stock_quantity,
            Manufacturer.name.label("manufacturer"),
            Category.name.label("category"),
        )
        .join(Manufacturer, Product.manufacturer_id == Manufacturer.manufacturer_id)
        .outerjoin(ProductCategory, Product.product_id == ProductCategory.product_id)
        .outerjoin(Category, ProductCategory.category_id == Category.category_id)
        .order_by(Product.product_id, Category.category_id)
    )


def price_predicates(filters: PriceRange) -> list[ColumnElement[bool]]:
    """One predicate per supplied bound, in min/max order."""
    predicates: list[ColumnElement[bool]] = []
    if filters.min_price is not None:
        predicates.append(Product.price >= filters.min_price)
    if filters.max_price is not None:
        predicates.append(Product.price <= filters.max_price)
    return predicates


class ProductRepository:
    """Product reads and writes for a single request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @storage_operation("list products")
    async def list_products(self, filters: PriceRange) -> list[dict]:
        query = product_query()
        predicates = price_predicates(filters)
        if predicates:
            query = query.where(*predicates)
        result = await self.db.execute(query)
        return [dict(row) for row in result.mappings().all()]

    @storage_operation("get product")
    async def get_product(self, product_id: int) -> dict | None:
        result = await self.db.execute(
            product_query().where(Product.product_id == product_id),
        )
        row = result.mappings().first()
        return dict(row) if row else None

    @storage_operation("search products")
    async def search_by_name(self, term: str) -> list[dict]:
        """Substring match on name using LIKE; % and _ in term match literally."""
        result = await self.db.execute(
            product_query().where(Product.name.contains(term, autoescape=True)),
        )
        return [dict(row) for row in result.mappings().all()]

    @storage_operation("list products by category")
    async def list_by_category(self, category_id: int) -> list[dict]:
        result = await self.db.execute(
            product_query().where(Category.category_id == category_id),
        )
        return [dict(row) for row in result.mappings().all()]

    @storage_operation("create product")
    async def create_product(self, data: ProductWrite) -> int:
        product = Product(**data.model_dump())
        self.db.add(product)
        await self.db.commit()
        product_id = product.product_id
        logger.info("Product created", extra={"product_id": product_id})
        return product_id

    @storage_operation("update product")
    async def update_product(self, product_id: int, data: ProductWrite) -> int:
        """Overwrite every writable column. Returns rows affected."""
        result = await self.db.execute(
            update(Product)
            .where(Product.product_id == product_id)
            .values(**data.model_dump())
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        logger.info(
            "Product updated",
            extra={"product_id": product_id, "rows": result.rowcount},
        )
        return result.rowcount

    @storage_operation("delete product")
    async def delete_product(self, product_id: int) -> int:
        """Delete the product and its reviews atomically. Returns products deleted."""
        await self.db.execute(
            delete(Review)
            .where(Review.product_id == product_id)
            .execution_options(synchronize_session=False),
        )
        result = await self.db.execute(
            delete(Product)
            .where(Product.product_id == product_id)
            .execution_options(synchronize_session=False),
        )
        if result.rowcount == 0:
            await self.db.rollback()
            return 0
        await self.db.commit()
        logger.info("Product deleted", extra={"product_id": product_id, "rows": 1})
        return result.rowcount
