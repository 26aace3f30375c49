"""Customer routes — profile with nested orders, contact updates, order lines."""


async def test_get_customer_with_orders(client, seed):
    res = await client.get("/customers/1")
    assert res.status_code == 200
    body = res.json()
    assert body["Customer_Id"] == 1
    assert body["name"] == "Anna Svensson"
    assert body["Orders"] == [
        {"Order_Nr": 1, "Order_Date": "2024-01-15"},
        {"Order_Nr": 2, "Order_Date": "2024-02-20"},
    ]


async def test_get_customer_never_exposes_password(client, seed):
    body = (await client.get("/customers/1")).json()
    assert "password" not in body


async def test_get_customer_without_orders_has_empty_list(client, seed):
    body = (await client.get("/customers/2")).json()
    assert body["Orders"] == []


async def test_get_missing_customer_returns_404(client, seed):
    res = await client.get("/customers/999")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_update_customer_contact_info(client, seed):
    res = await client.put("/customers/2", json={
        "email": "erik.lind@example.com",
        "phone": "08-555 00 00",
        "address": "Nygatan 3, Uppsala",
    })
    assert res.status_code == 200
    assert res.json() == {"message": "Customer updated"}

    body = (await client.get("/customers/2")).json()
    assert body["email"] == "erik.lind@example.com"
    assert body["phone"] == "08-555 00 00"
    assert body["address"] == "Nygatan 3, Uppsala"
    assert body["name"] == "Erik Lind"


async def test_update_customer_changes_only_supplied_fields(client, seed):
    res = await client.put("/customers/1", json={"phone": "073-0000000"})
    assert res.status_code == 200

    body = (await client.get("/customers/1")).json()
    assert body["phone"] == "073-0000000"
    assert body["email"] == "anna@example.com"
    assert body["address"] == "Storgatan 1, Stockholm"


async def test_update_customer_ignores_non_contact_fields(client, seed):
    res = await client.put("/customers/1", json={"email": "a@b.se", "name": "Mallory"})
    assert res.status_code == 200
    assert (await client.get("/customers/1")).json()["name"] == "Anna Svensson"


async def test_update_customer_without_contact_fields_returns_400(client, seed):
    res = await client.put("/customers/1", json={})
    assert res.status_code == 400


async def test_update_missing_customer_returns_404(client, seed):
    res = await client.put("/customers/999", json={"email": "nobody@example.com"})
    assert res.status_code == 404


async def test_customer_orders_lists_every_line(client, seed):
    res = await client.get("/customers/1/orders")
    assert res.status_code == 200
    assert res.json() == [
        {"Order_Nr": 1, "Order_Date": "2024-01-15", "Product": "Wireless Mouse",
         "Quantity": 2, "Unit_Price": 29.99},
        {"Order_Nr": 1, "Order_Date": "2024-01-15", "Product": "USB-C Charging Cable",
         "Quantity": 1, "Unit_Price": 12.0},
        {"Order_Nr": 2, "Order_Date": "2024-02-20", "Product": "Mechanical Keyboard",
         "Quantity": 1, "Unit_Price": 89.5},
    ]


async def test_customer_orders_empty_for_customer_without_orders(client, seed):
    res = await client.get("/customers/2/orders")
    assert res.status_code == 200
    assert res.json() == []
