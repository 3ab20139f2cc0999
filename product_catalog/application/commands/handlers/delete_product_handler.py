"""Delete product handler.

Flow:
1. Load product by id (NotFoundError if absent)
2. Remove via repository
3. Return with a ProductDeleted notification

A second delete of the same id fails with NotFoundError.
"""

from product_catalog.application.commands.product_commands import DeleteProduct
from product_catalog.application.cqrs.handling import Handled
from product_catalog.core.cancellation import CancellationToken
from product_catalog.core.enums import ErrorCode
from product_catalog.core.errors import DomainError, NotFoundError
from product_catalog.core.result import Failure, Result, Success
from product_catalog.domain.errors.product_error import ProductError
from product_catalog.domain.events.product_events import ProductDeleted
from product_catalog.domain.protocols.product_repository import ProductRepository


class DeleteProductHandler:
    """Handler for DeleteProduct command."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(
        self, cmd: DeleteProduct, cancellation: CancellationToken
    ) -> Result[Handled[None], DomainError]:
        """Handle delete product command.

        Returns:
            Success(Handled(None, ProductDeleted)) on success.
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

        cancellation.raise_if_cancelled()
        await self._product_repo.delete(product.id)

        return Success(
            value=Handled(
                value=None,
                notification=ProductDeleted(product_id=product.id),
            )
        )
