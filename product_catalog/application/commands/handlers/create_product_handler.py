"""Create product handler.

Flow:
1. Build Product (id generated, timestamps set)
2. Persist via repository
3. Return the id with a ProductCreated notification

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, events)
- NO infrastructure imports (repositories are injected via protocols)
"""

from uuid import UUID

from product_catalog.application.commands.product_commands import CreateProduct
from product_catalog.application.cqrs.handling import Handled
from product_catalog.core.cancellation import CancellationToken
from product_catalog.core.errors import DomainError
from product_catalog.core.result import Result, Success
from product_catalog.domain.entities.product import Product
from product_catalog.domain.events.product_events import ProductCreated
from product_catalog.domain.protocols.product_repository import ProductRepository


class CreateProductHandler:
    """Handler for CreateProduct command."""

    def __init__(self, product_repo: ProductRepository) -> None:
        """Initialize handler with dependencies.

        Args:
            product_repo: Product repository for persistence.
        """
        self._product_repo = product_repo

    async def handle(
        self, cmd: CreateProduct, cancellation: CancellationToken
    ) -> Result[Handled[UUID], DomainError]:
        """Handle create product command.

        Args:
            cmd: Validated CreateProduct command.
            cancellation: Checked before the write.

        Returns:
            Success(Handled(product_id, ProductCreated)).

        Raises:
            OperationCancelled: Token cancelled before the write.
            StorageError: Repository write failed.
        """
        product = Product.create(name=cmd.name, price=cmd.price)

        cancellation.raise_if_cancelled()
        await self._product_repo.add(product)

        return Success(
            value=Handled(
                value=product.id,
                notification=ProductCreated(
                    product_id=product.id,
                    name=product.name,
                    price=product.price,
                ),
            )
        )
