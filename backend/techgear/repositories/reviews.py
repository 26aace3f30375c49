"""Review Repository — per-product review purge and rating statistics."""

import logging

from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from techgear.infrastructure.database import storage_operation
from techgear.models import Product, Review

logger = logging.getLogger(__name__)


class ReviewRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    @storage_operation("delete reviews")
    async def delete_for_product(self, product_id: int) -> int:
        """Delete every review of one product. Returns rows deleted."""
        result = await self.db.execute(
            delete(Review)
            .where(Review.product_id == product_id)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        logger.info(
            "Reviews deleted",
            extra={"product_id": product_id, "rows": result.rowcount},
        )
        return result.rowcount

    @storage_operation("review stats")
    async def review_stats(self) -> list[dict]:
        """Average rating per product; unreviewed products report None."""
        result = await self.db.execute(
            select(
                Product.name.label("Product"),
                func.avg(Review.rating).label("Average_Score"),
            )
            .outerjoin(Review, Review.product_id == Product.product_id)
            .group_by(Product.product_id)
            .order_by(Product.product_id),
        )
        return [dict(row) for row in result.mappings().all()]
