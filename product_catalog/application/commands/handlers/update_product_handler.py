"""Update product handler.

Flow:
1. Load product by id (NotFoundError if absent)
2. Replace name and price
3. Persist via repository
4. Return with a ProductUpdated notification

Two concurrent updates of the same product both succeed; the later write
wins.
"""

from product_catalog.application.commands.product_commands import UpdateProduct
from product_catalog.application.cqrs.handling import Handled
from product_catalog.core.cancellation import CancellationToken
from product_catalog.core.enums import ErrorCode
from product_catalog.core.errors import DomainError, NotFoundError
from product_catalog.core.result import Failure, Result, Success
from product_catalog.domain.errors.product_error import ProductError
from product_catalog.domain.events.product_events import ProductUpdated
from product_catalog.domain.protocols.product_repository import ProductRepository


class UpdateProductHandler:
    """Handler for UpdateProduct command."""

    def __init__(self, product_repo: ProductRepository) -> None:
        """Initialize handler with dependencies.

        Args:
            product_repo: Product repository for persistence.
        """
        self._product_repo = product_repo

    async def handle(
        self, cmd: UpdateProduct, cancellation: CancellationToken
    ) -> Result[Handled[None], DomainError]:
        """Handle update product command.

        Args:
            cmd: Validated UpdateProduct command.
            cancellation: Checked before each repository call.

        Returns:
            Success(Handled(None, ProductUpdated)) on success.
            Failure(NotFoundError) if the product does not exist.
        """
        cancellation.raise_if_cancelled()
        product = await self._product_repo.get_by_id(cmd.product_id)
        if product is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.PRODUCT_NOT_FOUND,
                    message=ProductError.PRODUCT_NOT_FOUND,
                    resource_type="Product",
                    resource_id=str(cmd.product_id),
                )
            )

        product.update(name=cmd.name, price=cmd.price)

        cancellation.raise_if_cancelled()
        await self._product_repo.update(product)

        return Success(
            value=Handled(
                value=None,
                notification=ProductUpdated(
                    product_id=product.id,
                    name=product.name,
                    price=product.price,
                ),
            )
        )
