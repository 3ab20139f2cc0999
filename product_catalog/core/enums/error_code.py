"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Pipeline errors (OPERATION_CANCELLED, SUBSCRIBER_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    PRODUCT_ID_MISMATCH = "product_id_mismatch"

    # Resource errors
    PRODUCT_NOT_FOUND = "product_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Pipeline errors
    OPERATION_CANCELLED = "operation_cancelled"
    SUBSCRIBER_FAILED = "subscriber_failed"
