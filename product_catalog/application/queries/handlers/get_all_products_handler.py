"""GetAllProducts query handler.

Handles requests to list every product. Returns DTOs (not domain entities)
to maintain layer separation.

Architecture:
- Application layer handler (orchestrates domain operations)
- Returns Result[Handled[list[ProductView]], DomainError] (railway-oriented programming)
- Read-only: never emits a notification
"""

from product_catalog.application.cqrs.handling import Handled
from product_catalog.application.dtos.product_dtos import ProductView
from product_catalog.application.queries.product_queries import GetAllProducts
from product_catalog.core.cancellation import CancellationToken
from product_catalog.core.errors import DomainError
from product_catalog.core.result import Result, Success
from product_catalog.domain.protocols.product_repository import ProductRepository


class GetAllProductsHandler:
    """Handler for GetAllProducts query.

    Dependencies (injected via constructor):
        - ProductRepository: For data retrieval

    Returns:
        Result[Handled[list[ProductView]], DomainError]: Success with the
        projections in repository order (empty list when the catalog is empty).
    """

    def __init__(self, product_repo: ProductRepository) -> None:
        """Initialize handler with dependencies.

        Args:
            product_repo: Product repository for data access.
        """
        self._product_repo = product_repo

    async def handle(
        self, query: GetAllProducts, cancellation: CancellationToken
    ) -> Result[Handled[list[ProductView]], DomainError]:
        """Handle GetAllProducts query.

        Args:
            query: GetAllProducts query (no fields).
            cancellation: Checked before the read.

        Returns:
            Success(Handled(list of ProductView)).
        """
        cancellation.raise_if_cancelled()
        products = await self._product_repo.get_all()

        return Success(
            value=Handled(value=[ProductView.from_entity(p) for p in products])
        )
