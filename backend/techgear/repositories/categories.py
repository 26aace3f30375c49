"""Category Repository — per-category product statistics and the join-table rebuild.

Invariants:
    - rebuild_product_links runs create/copy/drop/rename in ONE transaction:
      any failure rolls back and leaves products_categories untouched
    - The rebuilt table has the same row set (ids included) as before
    - Running the rebuild repeatedly is idempotent

Design Decisions:
    - Plain DDL via text(): the table is replaced in place, not altered, so the
      rebuilt definition always carries ON UPDATE CASCADE on both foreign keys
    - Transactional DDL relies on the explicit BEGIN installed by
      configure_sqlite (infrastructure/database.py)
"""

import logging

from sqlalchemy import select, func, text
from sqlalchemy.ext.asyncio import AsyncSession

from techgear.infrastructure.database import storage_operation
from techgear.models import Category, Product, ProductCategory

logger = logging.getLogger(__name__)

_REBUILD_STATEMENTS = (
    """
    CREATE TABLE products_categories_temp (
        id INTEGER PRIMARY KEY,
        product_id INTEGER,
        category_id INTEGER,
        FOREIGN KEY (product_id) REFERENCES products (product_id) ON UPDATE CASCADE,
        FOREIGN KEY (category_id) REFERENCES categories (category_id) ON UPDATE CASCADE
    )
    """,
    """
    INSERT INTO products_categories_temp (id, product_id, category_id)
    SELECT id, product_id, category_id FROM products_categories
    """,
    "DROP TABLE products_categories",
    "ALTER TABLE products_categories_temp RENAME TO products_categories",
)


class CategoryRepository:
    """Category statistics and product-link maintenance."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @storage_operation("product stats")
    async def product_stats(self) -> list[dict]:
        """Product count and average price per category."""
        result = await self.db.execute(
            select(
                Category.name.label("Category"),
                func.count(Product.product_id).label("Products"),
                func.avg(Product.price).label("Average_Price"),
            )
            .outerjoin(ProductCategory, ProductCategory.category_id == Category.category_id)
            .outerjoin(Product, Product.product_id == ProductCategory.product_id)
            .group_by(Category.category_id)
            .order_by(Category.category_id),
        )
        return [dict(row) for row in result.mappings().all()]

    @storage_operation("rebuild product categories")
    async def rebuild_product_links(self) -> int:
        """Recreate products_categories with its current definition.

        Returns the number of rows carried over.
        """
        for statement in _REBUILD_STATEMENTS:
            await self.db.execute(text(statement))
        rows = (await self.db.execute(
            select(func.count()).select_from(ProductCategory),
        )).scalar_one()
        await self.db.commit()
        logger.info("Rebuilt products_categories", extra={"rows": rows})
        return rows
