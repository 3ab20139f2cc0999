"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from product_catalog.core.container import get_dispatcher, get_logger

The container is organized into modules by concern:
- infrastructure: logging, database, product repository, lifespan
- events: notification publisher and subscriptions
- handlers: handler/validator registries, dispatcher, catalog service

Factories import their implementations lazily, so importing the container
does not import infrastructure.
"""

from product_catalog.core.container.events import get_notification_publisher
from product_catalog.core.container.handlers import (
    build_handler_registry,
    build_validator_registry,
    get_dispatcher,
    get_handler_registry,
    get_product_catalog,
    get_validator_registry,
)
from product_catalog.core.container.infrastructure import (
    catalog_lifespan,
    get_database,
    get_logger,
    get_product_repository,
)

ALL_FACTORIES = (
    get_logger,
    get_database,
    get_product_repository,
    get_notification_publisher,
    get_handler_registry,
    get_validator_registry,
    get_dispatcher,
    get_product_catalog,
)


def clear_container() -> None:
    """Drop every cached singleton (tests, settings reload)."""
    for factory in ALL_FACTORIES:
        factory.cache_clear()


__all__ = [
    "build_handler_registry",
    "build_validator_registry",
    "catalog_lifespan",
    "clear_container",
    "get_database",
    "get_dispatcher",
    "get_handler_registry",
    "get_logger",
    "get_notification_publisher",
    "get_product_catalog",
    "get_product_repository",
    "get_validator_registry",
]
