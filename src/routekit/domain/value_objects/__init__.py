"""Domain value objects package.

Usage:
    from routekit.domain.value_objects import RouteDescriptor, NamedReference
"""

from routekit.domain.value_objects.policy_descriptor import (
    ConfiguredReference,
    InlineFunction,
    NamedReference,
    PolicyDescriptor,
    PolicyList,
    PolicyOrMiddleware,
)
from routekit.domain.value_objects.route_context import RouteContext
from routekit.domain.value_objects.route_descriptor import (
    RouteConfig,
    RouteDescriptor,
)
from routekit.domain.value_objects.route_handler import (
    HandlerChain,
    HandlerFunction,
    HandlerReference,
    RouteHandler,
)

__all__ = [
    # Policies / middlewares
    "ConfiguredReference",
    "InlineFunction",
    "NamedReference",
    "PolicyDescriptor",
    "PolicyList",
    "PolicyOrMiddleware",
    # Handlers
    "HandlerChain",
    "HandlerFunction",
    "HandlerReference",
    "RouteHandler",
    # Routes
    "RouteConfig",
    "RouteContext",
    "RouteDescriptor",
]
