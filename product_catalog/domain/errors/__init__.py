"""Domain error constants."""

from product_catalog.domain.errors.product_error import (
    PRODUCT_NAME_MAX_LENGTH,
    PRODUCT_PRICE_DECIMAL_PLACES,
    PRODUCT_PRICE_MAX_DIGITS,
    ProductError,
)

__all__ = [
    "PRODUCT_NAME_MAX_LENGTH",
    "PRODUCT_PRICE_DECIMAL_PLACES",
    "PRODUCT_PRICE_MAX_DIGITS",
    "ProductError",
]
