"""Composition context handed to the endpoint composer.

Carries the router a route must be bound to together with the route's
``info`` metadata.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class RouteContext:
    """Where and with what metadata a route is composed.

    Attributes:
        router: Router handle the route is registered on (root router or
            a prefixed sub-router).
        info: Route metadata (tags, summary, name, ...), read-only.
    """

    router: Any
    info: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def as_dict(self) -> dict[str, Any]:
        """Flatten into ``{**info, "router": router}``."""
        return {**self.info, "router": self.router}
