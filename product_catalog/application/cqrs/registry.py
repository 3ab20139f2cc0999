"""CQRS Registry - Single Source of Truth for Commands and Queries.

This registry catalogs ALL commands and queries in the system with their metadata.
Used for:
- Container auto-wiring (build_handler_registry instantiates every handler)
- Compliance tests (verify no drift between requests/handlers/validators)

Adding new commands/queries:
1. Define command/query dataclass in the appropriate *_commands.py/*_queries.py file
2. Create handler class in handlers/ directory
3. Add entry to COMMAND_REGISTRY or QUERY_REGISTRY below
4. Run tests - they'll tell you what's missing
"""

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
from product_catalog.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)
from product_catalog.application.dtos import ProductView
from product_catalog.application.queries.handlers.get_all_products_handler import (
    GetAllProductsHandler,
)
from product_catalog.application.queries.product_queries import GetAllProducts
from product_catalog.domain.events.base_event import DomainEvent
from product_catalog.domain.events.product_events import (
    ProductCreated,
    ProductDeleted,
    ProductUpdated,
)

# ═══════════════════════════════════════════════════════════════════════════
# COMMAND REGISTRY
# ═══════════════════════════════════════════════════════════════════════════

COMMAND_REGISTRY: list[CommandMetadata] = [
    CommandMetadata(
        command_class=CreateProduct,
        handler_class=CreateProductHandler,
        category=CQRSCategory.PRODUCT,
        event_class=ProductCreated,
        description="Create a product and return its generated id",
    ),
    CommandMetadata(
        command_class=UpdateProduct,
        handler_class=UpdateProductHandler,
        category=CQRSCategory.PRODUCT,
        event_class=ProductUpdated,
        description="Replace name and price of an existing product",
    ),
    CommandMetadata(
        command_class=DeleteProduct,
        handler_class=DeleteProductHandler,
        category=CQRSCategory.PRODUCT,
        event_class=ProductDeleted,
        description="Remove an existing product",
    ),
]

# ═══════════════════════════════════════════════════════════════════════════
# QUERY REGISTRY
# ═══════════════════════════════════════════════════════════════════════════

QUERY_REGISTRY: list[QueryMetadata] = [
    QueryMetadata(
        query_class=GetAllProducts,
        handler_class=GetAllProductsHandler,
        category=CQRSCategory.PRODUCT,
        result_dto_class=ProductView,
        description="List every product in creation order",
    ),
]


def get_all_request_handlers() -> list[tuple[type, type]]:
    """Return (request_class, handler_class) pairs for every catalogued request."""
    return [(meta.command_class, meta.handler_class) for meta in COMMAND_REGISTRY] + [
        (meta.query_class, meta.handler_class) for meta in QUERY_REGISTRY
    ]


def validate_registry_consistency() -> list[str]:
    """Validate registry for common issues.

    Returns:
        List of error messages. Empty if registry is consistent.

    Example:
        >>> validate_registry_consistency()
        []
    """
    errors: list[str] = []

    request_classes = [request for request, _ in get_all_request_handlers()]
    if len(request_classes) != len(set(request_classes)):
        errors.append("Request class registered more than once")

    for request_class, handler_class in get_all_request_handlers():
        if not callable(getattr(handler_class, "handle", None)):
            errors.append(f"Handler {handler_class.__name__} missing handle() method")
        if not handler_class.__name__.startswith(request_class.__name__):
            errors.append(
                f"Handler {handler_class.__name__} does not follow "
                f"<{request_class.__name__}>Handler naming"
            )

    for cmd_meta in COMMAND_REGISTRY:
        if cmd_meta.event_class is not None and not issubclass(
            cmd_meta.event_class, DomainEvent
        ):
            errors.append(
                f"{cmd_meta.command_class.__name__} declares "
                f"{cmd_meta.event_class.__name__}, which is not a DomainEvent"
            )

    return errors
