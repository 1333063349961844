"""Route descriptor models.

A route descriptor declares one routable endpoint:

    {
        "method": "GET",
        "path": "/articles/{article_id}",
        "handler": "article.find_one",
        "config": {
            "policies": ["global::is-authenticated"],
            "middlewares": [{"name": "cache", "options": {"ttl": 60}}],
        },
        "info": {"tags": ["Articles"]},
    }

``RouteDescriptor.model_validate`` is the schema; unknown ``config`` keys are
dropped, ``info`` is carried without validation.

Reference:
    - routekit.domain.validators.route_config (error aggregation)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr

from routekit.domain.enums import HTTPMethod
from routekit.domain.value_objects.policy_descriptor import (
    NonEmptyStr,
    PolicyList,
    PolicyOrMiddleware,
)
from routekit.domain.value_objects.route_handler import RouteHandler


class RouteConfig(BaseModel):
    """Cross-cutting configuration applied to a route.

    Attributes:
        policies: Ordered policies, checked before the handler runs.
        middlewares: Ordered middlewares, run after policies.
        prefix: Route-level path prefix (string). When declared (even as ""), the route
            opts out of the enclosing group's prefix.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    policies: PolicyList | None = None
    middlewares: PolicyList | None = None
    prefix: StrictStr | None = None

    @property
    def declares_prefix(self) -> bool:
        """Whether the caller supplied ``prefix``, regardless of its value."""
        return "prefix" in self.model_fields_set


class RouteDescriptor(BaseModel):
    """Normalized route descriptor (output of validation).

    Attributes:
        method: HTTP method; a str enum, so it compares equal to "GET" etc.
        path: Router path pattern (e.g. "/articles/{article_id}").
        handler: Classified handler variant.
        config: Optional policies/middlewares/prefix.
        info: Opaque metadata forwarded to the endpoint composer.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    method: HTTPMethod
    path: NonEmptyStr
    handler: RouteHandler
    config: RouteConfig | None = None
    info: Any = None

    @property
    def policies(self) -> tuple[PolicyOrMiddleware, ...]:
        """Declared policies, empty when none are declared."""
        if self.config is None or self.config.policies is None:
            return ()
        return self.config.policies

    @property
    def middlewares(self) -> tuple[PolicyOrMiddleware, ...]:
        """Declared middlewares, empty when none are declared."""
        if self.config is None or self.config.middlewares is None:
            return ()
        return self.config.middlewares

    def with_default_policies(
        self, defaults: tuple[PolicyOrMiddleware, ...]
    ) -> "RouteDescriptor":
        """Return a copy with ``defaults`` prepended to the declared policies.

        Routes that declare no policies (or an empty list) are returned as-is.

        Args:
            defaults: Policies to place ahead of the route's own, in order.

        Returns:
            RouteDescriptor: The augmented copy, or self when nothing changes.
        """
        if not defaults or not self.policies:
            return self
        config = self.config.model_copy(  # type: ignore[union-attr]
            update={"policies": (*defaults, *self.policies)}
        )
        return self.model_copy(update={"config": config})
