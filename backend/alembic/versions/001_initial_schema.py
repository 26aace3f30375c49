"""Initial schema — manufacturers, categories, products, customers, orders, reviews.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Foreign keys cascade on update only; nothing cascades on delete.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "manufacturers",
        sa.Column("manufacturer_id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
    )

    op.create_table(
        "categories",
        sa.Column("category_id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
    )

    op.create_table(
        "products",
        sa.Column("product_id", sa.Integer, primary_key=True),
        sa.Column(
            "manufacturer_id", sa.Integer,
            sa.ForeignKey("manufacturers.manufacturer_id", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("price", sa.Float, nullable=False),
        sa.Column("stock_quantity", sa.Integer, nullable=False, server_default="0"),
    )

    op.create_table(
        "products_categories",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "product_id", sa.Integer,
            sa.ForeignKey("products.product_id", onupdate="CASCADE"),
        ),
        sa.Column(
            "category_id", sa.Integer,
            sa.ForeignKey("categories.category_id", onupdate="CASCADE"),
        ),
    )

    op.create_table(
        "customers",
        sa.Column("customer_id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(254), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("address", sa.Text, nullable=True),
        sa.Column("password", sa.String(200), nullable=True),
    )

    op.create_table(
        "orders",
        sa.Column("order_id", sa.Integer, primary_key=True),
        sa.Column(
            "customer_id", sa.Integer,
            sa.ForeignKey("customers.customer_id", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.Column("order_date", sa.Date, nullable=False),
    )

    op.create_table(
        "orders_products",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "order_id", sa.Integer,
            sa.ForeignKey("orders.order_id", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "product_id", sa.Integer,
            sa.ForeignKey("products.product_id", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.Column("quantity", sa.Integer, nullable=False, server_default="1"),
        sa.Column("unit_price", sa.Float, nullable=False),
    )

    op.create_table(
        "reviews",
        sa.Column("review_id", sa.Integer, primary_key=True),
        sa.Column(
            "product_id", sa.Integer,
            sa.ForeignKey("products.product_id", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "customer_id", sa.Integer,
            sa.ForeignKey("customers.customer_id", onupdate="CASCADE"),
            nullable=True,
        ),
        sa.Column("rating", sa.Integer, nullable=False),
        sa.Column("comment", sa.Text, nullable=True),
    )


def downgrade() -> None:
    op.drop_table("reviews")
    op.drop_table("orders_products")
    op.drop_table("orders")
    op.drop_table("customers")
    op.drop_table("products_categories")
    op.drop_table("products")
    op.drop_table("categories")
    op.drop_table("manufacturers")
