"""Root conftest — in-memory database, seed data and the HTTP test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the full schema
    - The app receives the test DatabaseSessionManager through app.state,
      the same way the lifespan hook installs the real one
    - Fixture sessions are closed before the client runs: the in-memory
      database is one shared connection

Seed data:
    manufacturers  1 Logitech, 2 Anker
    categories     1 Peripherals, 2 Cables, 3 Audio (no products)
    products       1 Wireless Mouse 29.99 [Peripherals]
                   2 Mechanical Keyboard 89.50 [Peripherals]
                   3 USB-C Charging Cable 12.00 [Cables]
                   4 Power Bank 100% 45.00 (no category)
                   5 Webcam 59.00 (no category)
    reviews        product 1: 5, 4 | product 3: 2 | product 5: 3
    customers      1 Anna Svensson (orders 1, 2), 2 Erik Lind (no orders)
    order lines    order 1: 2x product 1, 1x product 3 | order 2: 1x product 2
"""

import os
from datetime import date

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from httpx import ASGITransport, AsyncClient

from techgear.infrastructure.database import DatabaseSessionManager
from techgear.main import app
from techgear.models import (
    Manufacturer, Category, Product, ProductCategory,
    Customer, Order, OrderProduct, Review,
)


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
async def db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
async def seed(db_manager):
    async with db_manager.session() as session:
        session.add_all([
            Manufacturer(manufacturer_id=1, name="Logitech"),
            Manufacturer(manufacturer_id=2, name="Anker"),
            Category(category_id=1, name="Peripherals"),
            Category(category_id=2, name="Cables"),
            Category(category_id=3, name="Audio"),
        ])
        await session.flush()
        session.add_all([
            Product(product_id=1, manufacturer_id=1, name="Wireless Mouse",
                    description="2.4 GHz", price=29.99, stock_quantity=100),
            Product(product_id=2, manufacturer_id=1, name="Mechanical Keyboard",
                    description="Brown switches", price=89.5, stock_quantity=20),
            Product(product_id=3, manufacturer_id=2, name="USB-C Charging Cable",
                    description="2m", price=12.0, stock_quantity=300),
            Product(product_id=4, manufacturer_id=2, name="Power Bank 100%",
                    description="20000 mAh", price=45.0, stock_quantity=15),
            Product(product_id=5, manufacturer_id=1, name="Webcam",
                    description="1080p", price=59.0, stock_quantity=8),
            Customer(customer_id=1, name="Anna Svensson", email="anna@example.com",
                     phone="070-1234567", address="Storgatan 1, Stockholm",
                     password="hunter2"),
            Customer(customer_id=2, name="Erik Lind", email="erik@example.com",
                     phone="070-7654321", address="Lillgatan 2, Uppsala",
                     password="secret"),
        ])
        await session.flush()
        session.add_all([
            ProductCategory(id=1, product_id=1, category_id=1),
            ProductCategory(id=2, product_id=2, category_id=1),
            ProductCategory(id=3, product_id=3, category_id=2),
            Review(product_id=1, customer_id=1, rating=5, comment="Great"),
            Review(product_id=1, customer_id=2, rating=4),
            Review(product_id=3, customer_id=1, rating=2, comment="Frays"),
            Review(product_id=5, customer_id=2, rating=3),
            Order(order_id=1, customer_id=1, order_date=date(2024, 1, 15)),
            Order(order_id=2, customer_id=1, order_date=date(2024, 2, 20)),
        ])
        await session.flush()
        session.add_all([
            OrderProduct(order_id=1, product_id=1, quantity=2, unit_price=29.99),
            OrderProduct(order_id=1, product_id=3, quantity=1, unit_price=12.0),
            OrderProduct(order_id=2, product_id=2, quantity=1, unit_price=89.5),
        ])
        await session.commit()


@pytest.fixture
async def client(db_manager):
    """HTTP client bound to the app, backed by the test database."""
    app.state.db_manager = db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
    app.state.db_manager = None
