"""Join-table rebuild — idempotent, atomic replacement of products_categories.

Invariants:
    - Row set (ids included) identical after one or two rebuilds
    - A failure in any step leaves the original table and no temp table behind
    - The rebuilt table cascades key updates from products
"""

import pytest
from sqlalchemy import select, text, update

import techgear.repositories.categories as categories_module
from techgear.core.errors import StorageError
from techgear.models import Product, ProductCategory
from techgear.repositories.categories import CategoryRepository


async def _links(db) -> set[tuple]:
    rows = await db.execute(
        select(ProductCategory.id, ProductCategory.product_id, ProductCategory.category_id),
    )
    return set(rows.all())


async def _tables(db) -> set[str]:
    rows = await db.execute(
        text("SELECT name FROM sqlite_master WHERE type = 'table'"),
    )
    return set(rows.scalars().all())


async def test_rebuild_twice_keeps_row_set(db, seed):
    repo = CategoryRepository(db)
    before = await _links(db)
    await db.commit()

    assert await repo.rebuild_product_links() == 3
    assert await repo.rebuild_product_links() == 3

    assert await _links(db) == before == {(1, 1, 1), (2, 2, 1), (3, 3, 2)}


async def test_rebuild_on_empty_table(db):
    assert await CategoryRepository(db).rebuild_product_links() == 0
    assert "products_categories" in await _tables(db)


async def test_rebuild_leaves_no_temp_table(db, seed):
    await CategoryRepository(db).rebuild_product_links()
    tables = await _tables(db)
    assert "products_categories" in tables
    assert "products_categories_temp" not in tables


async def test_rebuilt_table_cascades_product_key_updates(db, seed):
    await CategoryRepository(db).rebuild_product_links()

    await db.execute(
        update(Product)
        .where(Product.product_id == 3)
        .values(product_id=30)
        .execution_options(synchronize_session=False),
    )
    await db.commit()

    assert (3, 30, 2) in await _links(db)


async def test_failed_rebuild_leaves_original_table(db, seed, monkeypatch):
    statements = categories_module._REBUILD_STATEMENTS
    # Last step collides with an existing table after create, copy and drop succeeded
    monkeypatch.setattr(
        categories_module, "_REBUILD_STATEMENTS",
        statements[:-1] + ("ALTER TABLE products_categories_temp RENAME TO products",),
    )
    before = await _links(db)
    await db.commit()

    with pytest.raises(StorageError) as exc_info:
        await CategoryRepository(db).rebuild_product_links()
    assert exc_info.value.operation == "rebuild product categories"

    tables = await _tables(db)
    assert "products_categories" in tables
    assert "products_categories_temp" not in tables
    assert await _links(db) == before
