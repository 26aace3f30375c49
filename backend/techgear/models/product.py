"""Product ORM — catalogue entry sold by the shop.

Invariants:
    - Always belongs to a Manufacturer (manufacturer_id FK)
    - Foreign keys pointing here cascade on update only, never on delete

Design Decisions:
    - No ORM-level delete cascade: reviews are purged explicitly by the
      repository, category links and order lines block deletion
"""

from sqlalchemy import Integer, String, Text, Float, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from techgear.db.base import Base


class Product(Base):
    """Product sold by the shop."""
    __tablename__ = "products"

    product_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    manufacturer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("manufacturers.manufacturer_id", onupdate="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    stock_quantity: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )

    manufacturer: Mapped["Manufacturer"] = relationship(
        "Manufacturer", back_populates="products",
    )
