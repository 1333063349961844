"""Route registration for FastAPI routers.

Modules:
    route_manager: RouteManager - validate and register route declarations
    endpoint_composer: FastAPIEndpointComposer - build APIRoutes from routes
    host: RoutingHost - named handler/policy/middleware registries

Usage:
    from routekit.presentation.routers import RouteManager, RoutingHost

    manager = RouteManager(RoutingHost(handlers={"health.check": health}))
    manager.add_routes([{"method": "GET", "path": "/health", "handler": "health.check"}], router)
"""

from routekit.presentation.routers.endpoint_composer import FastAPIEndpointComposer
from routekit.presentation.routers.host import DependencyFactory, RoutingHost
from routekit.presentation.routers.route_manager import (
    RouteGroup,
    RouteManager,
    RouteManagerConfig,
)

__all__ = [
    "DependencyFactory",
    "FastAPIEndpointComposer",
    "RouteGroup",
    "RouteManager",
    "RouteManagerConfig",
    "RoutingHost",
]
