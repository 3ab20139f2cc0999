"""Product database model.

Maps the Product aggregate onto the ``products`` table.
"""

from decimal import Decimal

from sqlalchemy import Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from product_catalog.domain.errors.product_error import (
    PRODUCT_NAME_MAX_LENGTH,
    PRODUCT_PRICE_DECIMAL_PLACES,
    PRODUCT_PRICE_MAX_DIGITS,
)
from product_catalog.infrastructure.persistence.base import BaseMutableModel


class ProductModel(BaseMutableModel):
    """Product model.

    Fields:
        id: UUID primary key, assigned by the domain (from BaseMutableModel)
        created_at: Creation timestamp (from BaseMutableModel)
        updated_at: Last modification timestamp (from BaseMutableModel)
        name: Product name (at most 100 characters)
        price: Unit price, two decimal places

    Indexes:
        - idx_products_created: (created_at, id) - stable listing order
    """

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(
        String(PRODUCT_NAME_MAX_LENGTH),
        nullable=False,
        comment="Product display name",
    )

    price: Mapped[Decimal] = mapped_column(
        Numeric(PRODUCT_PRICE_MAX_DIGITS, PRODUCT_PRICE_DECIMAL_PLACES),
        nullable=False,
        comment="Unit price (strictly positive)",
    )

    __table_args__ = (Index("idx_products_created", "created_at", "id"),)
