"""Domain errors package.

Usage:
    from routekit.domain.errors import RouteConfigError, InvalidRouteConfigError
"""

from routekit.domain.errors.route_composition_error import RouteCompositionError
from routekit.domain.errors.route_config_error import (
    InvalidRouteConfigError,
    RouteConfigError,
    RouteViolation,
)

__all__ = [
    "InvalidRouteConfigError",
    "RouteCompositionError",
    "RouteConfigError",
    "RouteViolation",
]
