"""Shared pytest fixtures.

Fixtures build the pipeline by hand (no container singletons) so every test
gets a fresh repository, publisher and registries:
- mock_logger: MagicMock whose bind() returns itself, so assertions can be
  made on the same object the dispatcher logs through
- product_repo: empty InMemoryProductRepository
- publisher: InMemoryNotificationPublisher with no subscribers
- dispatcher / catalog: fully wired pipeline over the fixtures above
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from product_catalog.application.cqrs.dispatcher import RequestDispatcher
from product_catalog.application.services.product_catalog import ProductCatalog
from product_catalog.core.config import get_settings
from product_catalog.core.container import (
    build_handler_registry,
    build_validator_registry,
    clear_container,
)
from product_catalog.domain.entities.product import Product
from product_catalog.infrastructure.events.in_memory_publisher import (
    InMemoryNotificationPublisher,
)
from product_catalog.infrastructure.persistence.repositories.in_memory_product_repository import (
    InMemoryProductRepository,
)


def create_test_product(name: str = "Laptop", price: str = "999.99") -> Product:
    """Build a valid Product with a fresh id."""
    return Product.create(name=name, price=Decimal(price))


@pytest.fixture
def mock_logger():
    """Logger double; bind() returns the same mock."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def product_repo():
    """Empty in-memory product repository."""
    return InMemoryProductRepository()


@pytest.fixture
def publisher(mock_logger):
    """Publisher with no subscribers."""
    return InMemoryNotificationPublisher(logger=mock_logger)


@pytest.fixture
def dispatcher(product_repo, publisher, mock_logger):
    """Dispatcher wired from the CQRS catalog over the in-memory repository."""
    return RequestDispatcher(
        handlers=build_handler_registry(product_repo=product_repo),
        validators=build_validator_registry(),
        publisher=publisher,
        logger=mock_logger,
    )


@pytest.fixture
def catalog(dispatcher):
    """ProductCatalog service over the dispatcher fixture."""
    return ProductCatalog(dispatcher=dispatcher)


@pytest.fixture
def clean_container(monkeypatch):
    """Reset settings and container singletons around a test.

    Forces the memory backend and JSON logs unless the test overrides the
    environment after requesting this fixture.
    """
    monkeypatch.setenv("CATALOG_ENVIRONMENT", "testing")
    monkeypatch.setenv("CATALOG_STORAGE_BACKEND", "memory")
    get_settings.cache_clear()
    clear_container()
    yield
    get_settings.cache_clear()
    clear_container()
