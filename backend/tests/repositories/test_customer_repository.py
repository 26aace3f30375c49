"""CustomerRepository — order aggregation and contact updates."""

import pytest
from sqlalchemy import select

from techgear.models import Customer
from techgear.repositories.customers import CustomerRepository


async def test_get_customer_aggregates_orders(db, seed):
    customer = await CustomerRepository(db).get_customer(1)
    assert [o["Order_Nr"] for o in customer["Orders"]] == [1, 2]


async def test_get_customer_missing_returns_none(db, seed):
    assert await CustomerRepository(db).get_customer(42) is None


async def test_update_contact_info_leaves_name_and_password(db, seed):
    repo = CustomerRepository(db)
    rows = await repo.update_contact_info(2, {"email": "new@example.com"})
    assert rows == 1

    customer = (await db.execute(
        select(Customer).where(Customer.customer_id == 2),
    )).scalar_one()
    await db.refresh(customer)
    assert customer.email == "new@example.com"
    assert customer.name == "Erik Lind"
    assert customer.password == "secret"


async def test_update_contact_info_rejects_non_contact_fields(db, seed):
    with pytest.raises(ValueError):
        await CustomerRepository(db).update_contact_info(1, {"password": "x"})


async def test_list_orders_unknown_customer_is_empty(db, seed):
    assert await CustomerRepository(db).list_orders(42) == []
