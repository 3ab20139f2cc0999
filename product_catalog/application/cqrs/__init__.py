"""CQRS pipeline: handler registry, dispatcher and request catalog.

The catalog (registry.py) is imported lazily by the container to avoid
pulling every handler into modules that only need the dispatcher types.
"""

from product_catalog.application.cqrs.dispatcher import DispatchStage, RequestDispatcher
from product_catalog.application.cqrs.handler_registry import HandlerRegistry
from product_catalog.application.cqrs.handling import Handled, RequestHandler

__all__ = [
    "DispatchStage",
    "Handled",
    "HandlerRegistry",
    "RequestDispatcher",
    "RequestHandler",
]
