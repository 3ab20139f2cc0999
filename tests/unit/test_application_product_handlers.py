"""Unit tests for product command and query handlers.

Tests cover:
- CreateProductHandler: persists, returns id, emits ProductCreated
- UpdateProductHandler: not found, replaces fields, emits ProductUpdated
- DeleteProductHandler: not found, deletes, emits ProductDeleted
- GetAllProductsHandler: projections in repository order, no notification
- Cancellation observed before repository calls

Architecture:
- Unit tests for application handlers (mocked dependencies)
- Mock repository protocol with AsyncMock
- Test handler logic, not persistence
"""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from product_catalog.application.commands.handlers.create_product_handler import (
    CreateProductHandler,
)
from product_catalog.application.commands.handlers.delete_product_handler import (
    DeleteProductHandler,
)
from product_catalog.application.commands.handlers.update_product_handler import (
    UpdateProductHandler,
)
from product_catalog.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)
from product_catalog.application.dtos import ProductView
from product_catalog.application.queries.handlers.get_all_products_handler import (
    GetAllProductsHandler,
)
from product_catalog.application.queries.product_queries import GetAllProducts
from product_catalog.core.cancellation import CancellationToken, OperationCancelled
from product_catalog.core.enums import ErrorCode
from product_catalog.core.errors import NotFoundError
from product_catalog.core.result import Failure, Success
from product_catalog.domain.events.product_events import (
    ProductCreated,
    ProductDeleted,
    ProductUpdated,
)
from tests.conftest import create_test_product


@pytest.fixture
def token():
    return CancellationToken()


@pytest.fixture
def mock_repo():
    repo = AsyncMock()
    repo.get_by_id.return_value = None
    repo.get_all.return_value = []
    return repo


@pytest.mark.unit
class TestCreateProductHandler:
    """Test product creation."""

    @pytest.mark.asyncio
    async def test_create_persists_and_returns_id(self, mock_repo, token):
        handler = CreateProductHandler(product_repo=mock_repo)

        result = await handler.handle(
            CreateProduct(name="Laptop", price=Decimal("999.99")), token
        )

        assert isinstance(result, Success)
        mock_repo.add.assert_awaited_once()
        stored = mock_repo.add.await_args.args[0]
        assert result.value.value == stored.id
        assert stored.name == "Laptop"
        assert stored.price == Decimal("999.99")

    @pytest.mark.asyncio
    async def test_create_returns_product_created_notification(self, mock_repo, token):
        handler = CreateProductHandler(product_repo=mock_repo)

        result = await handler.handle(
            CreateProduct(name="Laptop", price=Decimal("999.99")), token
        )

        event = result.value.notification
        assert isinstance(event, ProductCreated)
        assert event.product_id == result.value.value
        assert event.name == "Laptop"
        assert event.price == Decimal("999.99")

    @pytest.mark.asyncio
    async def test_create_keeps_name_untrimmed(self, mock_repo, token):
        handler = CreateProductHandler(product_repo=mock_repo)

        await handler.handle(CreateProduct(name="  Desk ", price=Decimal("5")), token)

        assert mock_repo.add.await_args.args[0].name == "  Desk "

    @pytest.mark.asyncio
    async def test_cancelled_token_prevents_write(self, mock_repo, token):
        handler = CreateProductHandler(product_repo=mock_repo)
        token.cancel()

        with pytest.raises(OperationCancelled):
            await handler.handle(CreateProduct(name="Pen", price=Decimal("1")), token)

        mock_repo.add.assert_not_awaited()


@pytest.mark.unit
class TestUpdateProductHandler:
    """Test product update."""

    @pytest.mark.asyncio
    async def test_update_unknown_id_returns_not_found(self, mock_repo, token):
        handler = UpdateProductHandler(product_repo=mock_repo)
        product_id = uuid7()

        result = await handler.handle(
            UpdateProduct(product_id=product_id, name="Desk", price=Decimal("10")),
            token,
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.PRODUCT_NOT_FOUND
        assert result.error.resource_type == "Product"
        assert result.error.resource_id == str(product_id)
        mock_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_replaces_fields_and_persists(self, mock_repo, token):
        product = create_test_product()
        mock_repo.get_by_id.return_value = product
        handler = UpdateProductHandler(product_repo=mock_repo)

        result = await handler.handle(
            UpdateProduct(
                product_id=product.id, name="Laptop Pro", price=Decimal("1299.00")
            ),
            token,
        )

        assert isinstance(result, Success)
        assert result.value.value is None
        mock_repo.update.assert_awaited_once_with(product)
        assert product.name == "Laptop Pro"
        assert product.price == Decimal("1299.00")

    @pytest.mark.asyncio
    async def test_update_returns_product_updated_notification(self, mock_repo, token):
        product = create_test_product()
        mock_repo.get_by_id.return_value = product
        handler = UpdateProductHandler(product_repo=mock_repo)

        result = await handler.handle(
            UpdateProduct(product_id=product.id, name="Desk", price=Decimal("10")),
            token,
        )

        event = result.value.notification
        assert isinstance(event, ProductUpdated)
        assert event.product_id == product.id
        assert event.name == "Desk"

    @pytest.mark.asyncio
    async def test_cancel_between_load_and_write_skips_update(self, mock_repo, token):
        product = create_test_product()

        async def load_then_cancel(product_id):
            token.cancel()
            return product

        mock_repo.get_by_id.side_effect = load_then_cancel
        handler = UpdateProductHandler(product_repo=mock_repo)

        with pytest.raises(OperationCancelled):
            await handler.handle(
                UpdateProduct(product_id=product.id, name="Desk", price=Decimal("1")),
                token,
            )

        mock_repo.update.assert_not_awaited()


@pytest.mark.unit
class TestDeleteProductHandler:
    """Test product deletion."""

    @pytest.mark.asyncio
    async def test_delete_unknown_id_returns_not_found(self, mock_repo, token):
        handler = DeleteProductHandler(product_repo=mock_repo)

        result = await handler.handle(DeleteProduct(product_id=uuid7()), token)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PRODUCT_NOT_FOUND
        mock_repo.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_removes_and_notifies(self, mock_repo, token):
        product = create_test_product()
        mock_repo.get_by_id.return_value = product
        handler = DeleteProductHandler(product_repo=mock_repo)

        result = await handler.handle(DeleteProduct(product_id=product.id), token)

        assert isinstance(result, Success)
        mock_repo.delete.assert_awaited_once_with(product.id)
        event = result.value.notification
        assert isinstance(event, ProductDeleted)
        assert event.product_id == product.id


@pytest.mark.unit
class TestGetAllProductsHandler:
    """Test product listing."""

    @pytest.mark.asyncio
    async def test_empty_catalog_returns_empty_list(self, mock_repo, token):
        handler = GetAllProductsHandler(product_repo=mock_repo)

        result = await handler.handle(GetAllProducts(), token)

        assert isinstance(result, Success)
        assert result.value.value == []
        assert result.value.notification is None

    @pytest.mark.asyncio
    async def test_returns_views_in_repository_order(self, mock_repo, token):
        first = create_test_product(name="Laptop", price="999.99")
        second = create_test_product(name="Mouse", price="25")
        mock_repo.get_all.return_value = [first, second]
        handler = GetAllProductsHandler(product_repo=mock_repo)

        result = await handler.handle(GetAllProducts(), token)

        assert result.value.value == [
            ProductView(id=first.id, name="Laptop", price=Decimal("999.99")),
            ProductView(id=second.id, name="Mouse", price=Decimal("25")),
        ]
