"""Product queries (CQRS read operations).

Queries represent requests for catalog data. They are immutable
dataclasses and NEVER change state or emit domain events.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetAllProducts:
    """List every product in creation order.

    Example:
        >>> result = await dispatcher.dispatch(GetAllProducts())
        >>> # Success(value=[ProductView(...), ...])
    """
