"""Domain validators package.

Usage:
    from routekit.domain.validators import validate_route_config
"""

from routekit.domain.validators.route_config import validate_route_config

__all__ = ["validate_route_config"]
