"""Route Dependencies — build one repository per request from the injected session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from techgear.core.repository_protocols import (
    ProductStore, CustomerStore, CategoryStore, ReviewStore,
)
from techgear.infrastructure.database import get_db
from techgear.repositories import (
    ProductRepository, CustomerRepository, CategoryRepository, ReviewRepository,
)


def get_product_store(db: AsyncSession = Depends(get_db)) -> ProductStore:
    return ProductRepository(db)


def get_customer_store(db: AsyncSession = Depends(get_db)) -> CustomerStore:
    return CustomerRepository(db)


def get_category_store(db: AsyncSession = Depends(get_db)) -> CategoryStore:
    return CategoryRepository(db)


def get_review_store(db: AsyncSession = Depends(get_db)) -> ReviewStore:
    return ReviewRepository(db)
