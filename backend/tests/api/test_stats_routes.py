"""Statistics routes — per-category product stats and per-product review scores."""

import pytest


async def test_product_stats_per_category(client, seed):
    res = await client.get("/products/stats")
    assert res.status_code == 200
    stats = res.json()
    assert [s["Category"] for s in stats] == ["Peripherals", "Cables", "Audio"]
    assert [s["Products"] for s in stats] == [2, 1, 0]
    assert stats[0]["Average_Price"] == pytest.approx((29.99 + 89.5) / 2)
    assert stats[1]["Average_Price"] == pytest.approx(12.0)
    assert stats[2]["Average_Price"] is None


async def test_review_stats_per_product(client, seed):
    res = await client.get("/reviews/stats")
    assert res.status_code == 200
    assert res.json() == [
        {"Product": "Wireless Mouse", "Average_Score": 4.5},
        {"Product": "Mechanical Keyboard", "Average_Score": None},
        {"Product": "USB-C Charging Cable", "Average_Score": 2.0},
        {"Product": "Power Bank 100%", "Average_Score": None},
        {"Product": "Webcam", "Average_Score": 3.0},
    ]


async def test_stats_on_empty_database(client):
    assert (await client.get("/products/stats")).json() == []
    assert (await client.get("/reviews/stats")).json() == []
