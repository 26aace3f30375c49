"""Review ORM — customer rating of a product.

Invariants:
    - Always references a Product; removed explicitly before that product is deleted
"""

from sqlalchemy import Integer, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from techgear.db.base import Base


class Review(Base):
    """Product review with a numeric rating."""
    __tablename__ = "reviews"

    review_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.product_id", onupdate="CASCADE"),
        nullable=False,
    )
    customer_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("customers.customer_id", onupdate="CASCADE"),
        nullable=True,
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
