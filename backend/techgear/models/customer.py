"""Customer ORM — shop customer and owner of orders.

Invariants:
    - password is persisted as found in the legacy database and never
      serialized by the API
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from techgear.db.base import Base


class Customer(Base):
    """Shop customer."""
    __tablename__ = "customers"

    customer_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str | None] = mapped_column(String(254), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    password: Mapped[str | None] = mapped_column(String(200), nullable=True)

    orders: Mapped[list["Order"]] = relationship(
        "Order", back_populates="customer",
    )
