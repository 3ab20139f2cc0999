"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from product_catalog.core.enums import ErrorCode, Environment
"""

from product_catalog.core.enums.environment import Environment
from product_catalog.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
