"""Product DTOs (Data Transfer Objects).

Read projections returned by query handlers to the boundary layer.
DTOs are detached from entities: changing one never touches storage.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from product_catalog.domain.entities.product import Product


@dataclass(frozen=True, kw_only=True)
class ProductView:
    """Projection of a product for listing.

    Attributes:
        id: Product identifier.
        name: Product name.
        price: Product price.
    """

    id: UUID
    name: str
    price: Decimal

    @classmethod
    def from_entity(cls, product: Product) -> "ProductView":
        """Build the projection from a Product entity."""
        return cls(id=product.id, name=product.name, price=product.price)
