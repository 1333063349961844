"""Domain enums."""

from routekit.domain.enums.http_method import HTTPMethod

__all__ = ["HTTPMethod"]
