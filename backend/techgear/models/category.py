"""Category ORM — product grouping, linked to products through products_categories."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from techgear.db.base import Base


class Category(Base):
    __tablename__ = "categories"

    category_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
