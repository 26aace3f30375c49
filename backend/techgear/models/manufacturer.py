"""Manufacturer ORM — brand that makes one or more products."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from techgear.db.base import Base


class Manufacturer(Base):
    __tablename__ = "manufacturers"

    manufacturer_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    products: Mapped[list["Product"]] = relationship(
        "Product", back_populates="manufacturer",
    )
