"""routekit: validate declarative route descriptors and register them on FastAPI routers.

Usage:
    from fastapi import APIRouter
    from routekit import RouteManager, RouteManagerConfig, RoutingHost

    host = RoutingHost(handlers={"health.check": health_check})
    manager = RouteManager(host, RouteManagerConfig(default_policies=["is-authenticated"]))

    router = APIRouter()
    manager.add_routes(
        [{"method": "GET", "path": "/health", "handler": "health.check"}],
        router,
    )
"""

from routekit.core.result import Failure, Result, Success
from routekit.domain.errors import (
    InvalidRouteConfigError,
    RouteCompositionError,
    RouteConfigError,
    RouteViolation,
)
from routekit.domain.validators import validate_route_config
from routekit.domain.value_objects import RouteContext, RouteDescriptor
from routekit.presentation.routers import (
    FastAPIEndpointComposer,
    RouteGroup,
    RouteManager,
    RouteManagerConfig,
    RoutingHost,
)

__all__ = [
    "FastAPIEndpointComposer",
    "Failure",
    "InvalidRouteConfigError",
    "Result",
    "RouteCompositionError",
    "RouteConfigError",
    "RouteContext",
    "RouteDescriptor",
    "RouteGroup",
    "RouteManager",
    "RouteManagerConfig",
    "RouteViolation",
    "RoutingHost",
    "Success",
    "validate_route_config",
]
