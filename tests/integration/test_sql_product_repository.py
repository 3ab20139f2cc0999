"""Integration tests for SqlProductRepository.

Tests cover:
- Save and retrieve product (entity <-> model mapping)
- Listing order
- Update and delete
- Missing rows and driver failures surface as None / StorageError

Architecture:
- Integration tests with a REAL SQLite database (aiosqlite)
- Fresh database file per test (tmp_path)
"""

from datetime import UTC
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy import text
from uuid_extensions import uuid7

from product_catalog.core.errors import StorageError
from product_catalog.infrastructure.persistence.database import Database
from product_catalog.infrastructure.persistence.repositories.product_repository import (
    SqlProductRepository,
)
from tests.conftest import create_test_product


@pytest_asyncio.fixture
async def database(tmp_path):
    """Fresh SQLite database with the products table."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'products.db'}")
    await db.create_all()
    yield db
    await db.close()


@pytest.fixture
def repo(database):
    return SqlProductRepository(database=database)


@pytest.mark.integration
class TestSqlProductRepositoryReads:
    """Test retrieval and mapping."""

    @pytest.mark.asyncio
    async def test_add_and_get_by_id(self, repo):
        product = create_test_product(name="Laptop", price="999.99")

        await repo.add(product)
        found = await repo.get_by_id(product.id)

        assert found is not None
        assert found.id == product.id
        assert found.name == "Laptop"
        assert found.price == Decimal("999.99")
        assert found.created_at.tzinfo is not None
        assert found.created_at == product.created_at.astimezone(UTC)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", ["9999999999.99", "0.01"])
    async def test_price_at_column_limits_round_trips(self, repo, price):
        product = create_test_product(name="Pen", price=price)

        await repo.add(product)
        found = await repo.get_by_id(product.id)

        assert found.price == Decimal(price)

    @pytest.mark.asyncio
    async def test_get_by_id_missing_returns_none(self, repo):
        assert await repo.get_by_id(uuid7()) is None

    @pytest.mark.asyncio
    async def test_get_all_empty(self, repo):
        assert await repo.get_all() == []

    @pytest.mark.asyncio
    async def test_get_all_ordered_by_creation(self, repo):
        products = [create_test_product(name=f"P{i}") for i in range(5)]
        for product in reversed(products):
            # Insert in reverse; order must still follow created_at
            await repo.add(product)

        listed = await repo.get_all()

        assert [p.id for p in listed] == [p.id for p in products]

    @pytest.mark.asyncio
    async def test_name_stored_untrimmed(self, repo):
        product = create_test_product(name="  Desk  ")

        await repo.add(product)

        assert (await repo.get_by_id(product.id)).name == "  Desk  "


@pytest.mark.integration
class TestSqlProductRepositoryWrites:
    """Test update and delete."""

    @pytest.mark.asyncio
    async def test_update_persists_new_state(self, repo):
        product = create_test_product()
        await repo.add(product)

        product.update(name="Laptop Pro", price=Decimal("1299.00"))
        await repo.update(product)

        stored = await repo.get_by_id(product.id)
        assert stored.name == "Laptop Pro"
        assert stored.price == Decimal("1299.00")

    @pytest.mark.asyncio
    async def test_update_missing_raises_storage_error(self, repo):
        with pytest.raises(StorageError) as exc_info:
            await repo.update(create_test_product())

        assert exc_info.value.operation == "update"

    @pytest.mark.asyncio
    async def test_delete_removes_row(self, repo):
        product = create_test_product()
        await repo.add(product)

        await repo.delete(product.id)

        assert await repo.get_by_id(product.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self, repo):
        await repo.delete(uuid7())

    @pytest.mark.asyncio
    async def test_writes_visible_to_new_repository(self, database, repo):
        product = create_test_product()
        await repo.add(product)

        other = SqlProductRepository(database=database)

        assert await other.get_by_id(product.id) is not None


@pytest.mark.integration
class TestSqlProductRepositoryFailures:
    """Test driver errors wrapped in StorageError."""

    @pytest.mark.asyncio
    async def test_duplicate_id_raises_storage_error(self, repo):
        product = create_test_product()
        await repo.add(product)

        with pytest.raises(StorageError) as exc_info:
            await repo.add(product)

        assert exc_info.value.operation == "add"
        assert exc_info.value.cause is not None

    @pytest.mark.asyncio
    async def test_missing_table_raises_storage_error(self, database, repo):
        async with database.get_session() as session:
            await session.execute(text("DROP TABLE products"))

        with pytest.raises(StorageError) as exc_info:
            await repo.get_all()

        assert exc_info.value.operation == "get_all"
