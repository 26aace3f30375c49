"""ProductCategory ORM — join table for the product/category many-to-many.

Invariants:
    - Both foreign keys cascade on update, never on delete
    - The DDL here must stay in sync with the rebuild statements in
      repositories/categories.py
"""

from sqlalchemy import Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from techgear.db.base import Base


class ProductCategory(Base):
    __tablename__ = "products_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    product_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("products.product_id", onupdate="CASCADE"),
    )
    category_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.category_id", onupdate="CASCADE"),
    )
