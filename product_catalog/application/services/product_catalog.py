"""ProductCatalog application service.

Boundary facade over the RequestDispatcher: each method builds one request
value and dispatches it. Transport layers (HTTP, CLI) call this service and
map the returned Result onto their own status codes.

Route mapping:
    create_product  -> CreateProduct   -> Success(product_id)
    get_all_products -> GetAllProducts -> Success(list[ProductView])
    update_product  -> UpdateProduct   -> Success(None) | NotFoundError
    delete_product  -> DeleteProduct   -> Success(None) | NotFoundError
"""

from decimal import Decimal, InvalidOperation
from uuid import UUID

from product_catalog.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)
from product_catalog.application.cqrs.dispatcher import RequestDispatcher
from product_catalog.application.dtos.product_dtos import ProductView
from product_catalog.application.queries.product_queries import GetAllProducts
from product_catalog.core.cancellation import CancellationToken
from product_catalog.core.enums import ErrorCode
from product_catalog.core.errors import DomainError, FieldViolation, ValidationError
from product_catalog.core.result import Failure, Result


def to_price(value: Decimal | int | float | str) -> Decimal:
    """Coerce a boundary price into Decimal without binary float noise.

    Input that does not parse as a number becomes Decimal('NaN'), which the
    price rules reject with a ValidationError.

    Example:
        >>> to_price(19.99)
        Decimal('19.99')
        >>> to_price("abc")
        Decimal('NaN')
    """
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        return Decimal("NaN")


class ProductCatalog:
    """Use-case entry points for the product catalog."""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        """Initialize service.

        Args:
            dispatcher: Request dispatcher the service sends every request to.
        """
        self._dispatcher = dispatcher

    async def create_product(
        self,
        name: str,
        price: Decimal | int | float | str,
        cancellation: CancellationToken | None = None,
    ) -> Result[UUID, DomainError]:
        """Create a product.

        Returns:
            Success(product_id) or Failure(ValidationError | CancelledError).
        """
        command = CreateProduct(name=name, price=to_price(price))
        return await self._dispatcher.dispatch(command, cancellation)

    async def get_all_products(
        self, cancellation: CancellationToken | None = None
    ) -> Result[list[ProductView], DomainError]:
        """List every product in creation order."""
        return await self._dispatcher.dispatch(GetAllProducts(), cancellation)

    async def update_product(
        self,
        product_id: UUID,
        name: str,
        price: Decimal | int | float | str,
        *,
        path_id: UUID | None = None,
        cancellation: CancellationToken | None = None,
    ) -> Result[None, DomainError]:
        """Replace name and price of an existing product.

        Args:
            product_id: Id carried in the request body.
            name: New name.
            price: New price.
            path_id: Id taken from the resource address, if the transport
                has one. Must equal ``product_id``.
            cancellation: Caller's cancellation signal.

        Returns:
            Success(None), or Failure with ValidationError (including an id
            mismatch, rejected before dispatch), NotFoundError or
            CancelledError.
        """
        if path_id is not None and path_id != product_id:
            message = "Route id does not match request id."
            return Failure(
                error=ValidationError(
                    code=ErrorCode.PRODUCT_ID_MISMATCH,
                    message=message,
                    field="id",
                    violations=(FieldViolation(field="id", message=message),),
                    details={"path_id": str(path_id), "body_id": str(product_id)},
                )
            )

        command = UpdateProduct(
            product_id=product_id,
            name=name,
            price=to_price(price),
        )
        return await self._dispatcher.dispatch(command, cancellation)

    async def delete_product(
        self,
        product_id: UUID,
        cancellation: CancellationToken | None = None,
    ) -> Result[None, DomainError]:
        """Remove a product.

        Returns:
            Success(None), or Failure with ValidationError, NotFoundError or
            CancelledError.
        """
        return await self._dispatcher.dispatch(
            DeleteProduct(product_id=product_id), cancellation
        )
