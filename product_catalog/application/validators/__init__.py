"""Request rule sets, registered into the ValidatorRegistry at startup."""

from product_catalog.application.validators.product_validators import (
    CREATE_PRODUCT_RULES,
    DELETE_PRODUCT_RULES,
    PRODUCT_RULE_SETS,
    UPDATE_PRODUCT_RULES,
)

__all__ = [
    "CREATE_PRODUCT_RULES",
    "DELETE_PRODUCT_RULES",
    "PRODUCT_RULE_SETS",
    "UPDATE_PRODUCT_RULES",
]
