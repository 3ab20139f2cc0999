"""Product request rule sets.

One RuleSet per product command. Queries carry no input and have no rules.
Messages are part of the boundary contract; callers show them verbatim.

Rules:
    CreateProduct: name not blank, name <= 100 chars, price > 0,
        price fits 12 digits with 2 decimals
    UpdateProduct: product_id set, then the same name/price rules
    DeleteProduct: product_id set
"""

from product_catalog.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)
from product_catalog.core.validation import (
    RuleSet,
    greater_than,
    max_length,
    not_blank,
    not_default,
    precision_scale,
)
from product_catalog.domain.errors.product_error import (
    PRODUCT_NAME_MAX_LENGTH,
    PRODUCT_PRICE_DECIMAL_PLACES,
    PRODUCT_PRICE_MAX_DIGITS,
)

CREATE_PRODUCT_RULES = RuleSet(
    request_type=CreateProduct,
    rules=(
        not_blank("name"),
        max_length("name", PRODUCT_NAME_MAX_LENGTH),
        greater_than("price", 0),
        precision_scale("price", PRODUCT_PRICE_MAX_DIGITS, PRODUCT_PRICE_DECIMAL_PLACES),
    ),
)

UPDATE_PRODUCT_RULES = RuleSet(
    request_type=UpdateProduct,
    rules=(
        not_default("product_id", label="Id"),
        not_blank("name"),
        max_length("name", PRODUCT_NAME_MAX_LENGTH),
        greater_than("price", 0),
        precision_scale("price", PRODUCT_PRICE_MAX_DIGITS, PRODUCT_PRICE_DECIMAL_PLACES),
    ),
)

DELETE_PRODUCT_RULES = RuleSet(
    request_type=DeleteProduct,
    rules=(not_default("product_id", label="Id"),),
)

PRODUCT_RULE_SETS: tuple[RuleSet, ...] = (
    CREATE_PRODUCT_RULES,
    UPDATE_PRODUCT_RULES,
    DELETE_PRODUCT_RULES,
)
