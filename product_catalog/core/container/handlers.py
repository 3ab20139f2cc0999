"""CQRS pipeline factories - registry-driven auto-wiring.

Builds the HandlerRegistry from COMMAND_REGISTRY/QUERY_REGISTRY by
introspecting each handler's __init__ parameter names and injecting the
matching dependency. Adding a request = add its registry entry; nothing in
this module changes.

Usage:
    dispatcher = get_dispatcher()
    result = await dispatcher.dispatch(CreateProduct(name="Laptop", price=price))
"""

from functools import lru_cache
from typing import TYPE_CHECKING, Any

from product_catalog.core.container.events import get_notification_publisher
from product_catalog.core.container.infrastructure import (
    get_logger,
    get_product_repository,
)
from product_catalog.core.errors import ConfigurationError
from product_catalog.core.validation import ValidatorRegistry

if TYPE_CHECKING:
    from product_catalog.application.cqrs.dispatcher import RequestDispatcher
    from product_catalog.application.cqrs.handler_registry import HandlerRegistry
    from product_catalog.application.services.product_catalog import ProductCatalog
    from product_catalog.domain.protocols.product_repository import ProductRepository


def build_handler_registry(
    product_repo: "ProductRepository", **dependencies: Any
) -> "HandlerRegistry":
    """Instantiate every catalogued handler and register it.

    Args:
        product_repo: Repository injected into handlers that ask for it.
        **dependencies: Further injectable dependencies, by parameter name.

    Returns:
        Fresh HandlerRegistry covering every command and query.

    Raises:
        ConfigurationError: A handler needs a dependency nobody provides,
            or two catalog entries share a request type.
    """
    from product_catalog.application.cqrs.handler_registry import HandlerRegistry
    from product_catalog.application.cqrs.metadata import get_handler_dependencies
    from product_catalog.application.cqrs.registry import get_all_request_handlers

    available: dict[str, Any] = {"product_repo": product_repo, **dependencies}
    registry = HandlerRegistry()

    for request_class, handler_class in get_all_request_handlers():
        kwargs: dict[str, Any] = {}
        for name in get_handler_dependencies(handler_class):
            if name not in available:
                raise ConfigurationError(
                    f"{handler_class.__name__} requires '{name}', "
                    f"which the container does not provide"
                )
            kwargs[name] = available[name]
        registry.register(request_class, handler_class(**kwargs))

    return registry


def build_validator_registry() -> ValidatorRegistry:
    """Register every product rule set in a fresh ValidatorRegistry."""
    from product_catalog.application.validators.product_validators import (
        PRODUCT_RULE_SETS,
    )

    registry = ValidatorRegistry()
    for rule_set in PRODUCT_RULE_SETS:
        registry.register(rule_set)
    return registry


@lru_cache()
def get_handler_registry() -> "HandlerRegistry":
    """Get handler registry singleton (app-scoped)."""
    return build_handler_registry(product_repo=get_product_repository())


@lru_cache()
def get_validator_registry() -> ValidatorRegistry:
    """Get validator registry singleton (app-scoped)."""
    return build_validator_registry()


@lru_cache()
def get_dispatcher() -> "RequestDispatcher":
    """Get request dispatcher singleton (app-scoped).

    The dispatcher holds no per-request state, so one instance serves
    every concurrent dispatch.
    """
    from product_catalog.application.cqrs.dispatcher import RequestDispatcher

    return RequestDispatcher(
        handlers=get_handler_registry(),
        validators=get_validator_registry(),
        publisher=get_notification_publisher(),
        logger=get_logger(),
    )


@lru_cache()
def get_product_catalog() -> "ProductCatalog":
    """Get ProductCatalog service singleton (app-scoped)."""
    from product_catalog.application.services.product_catalog import ProductCatalog

    return ProductCatalog(dispatcher=get_dispatcher())
