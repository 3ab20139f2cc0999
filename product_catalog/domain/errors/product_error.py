"""Product domain errors.

Defines product-specific error constants for invariant violations and
lookups.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Raised as ValueError only by Product construction/mutation, which is
      unreachable for requests that passed validation
    - NOT_FOUND is used by handlers when building NotFoundError

Usage:
    from product_catalog.domain.errors import ProductError

    if not name.strip():
        raise ValueError(ProductError.INVALID_PRODUCT_NAME)
"""

PRODUCT_NAME_MAX_LENGTH = 100

# Price fits Numeric(12, 2): 10 integer digits, 2 decimal places
PRODUCT_PRICE_MAX_DIGITS = 12
PRODUCT_PRICE_DECIMAL_PLACES = 2


class ProductError:
    """Product error constants.

    Error Categories:
        - Validation errors: INVALID_PRODUCT_NAME, PRODUCT_NAME_TOO_LONG,
          INVALID_PRODUCT_PRICE, PRODUCT_PRICE_PRECISION_EXCEEDED
        - Identity errors: PRODUCT_ID_IMMUTABLE
        - Lookup errors: PRODUCT_NOT_FOUND
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    INVALID_PRODUCT_NAME = "Product name cannot be empty"
    PRODUCT_NAME_TOO_LONG = (
        f"Product name cannot exceed {PRODUCT_NAME_MAX_LENGTH} characters"
    )
    INVALID_PRODUCT_PRICE = "Product price must be a finite number greater than zero"
    PRODUCT_PRICE_PRECISION_EXCEEDED = (
        f"Product price cannot exceed {PRODUCT_PRICE_MAX_DIGITS} digits "
        f"with {PRODUCT_PRICE_DECIMAL_PLACES} decimal places"
    )

    # -------------------------------------------------------------------------
    # Identity / Lookup Errors
    # -------------------------------------------------------------------------

    PRODUCT_ID_IMMUTABLE = "Product id cannot be reassigned"
    PRODUCT_NOT_FOUND = "Product not found"
