"""Routing host: name -> implementation lookup tables.

The host is the application context the endpoint composer resolves named
references against. Handlers are endpoint callables; policies and
middlewares are factories that receive the descriptor's options and return
a FastAPI dependency callable.

Usage:
    def is_owner(options: Mapping[str, Any]) -> Callable[..., bool]:
        field = options.get("field", "owner_id")

        def check(request: Request) -> bool:
            return request.headers.get("x-user") == request.path_params.get(field)

        return check

    host = RoutingHost(
        handlers={"article.find": find_article},
        policies={"is-owner": is_owner},
    )
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from routekit.core.enums import ErrorCode
from routekit.domain.errors import RouteCompositionError

DependencyFactory = Callable[[Mapping[str, Any]], Callable[..., Any]]


@dataclass(frozen=True, slots=True, kw_only=True)
class RoutingHost:
    """Registries of named handlers, policies and middlewares.

    Attributes:
        handlers: Handler name -> endpoint callable.
        policies: Policy name -> factory(options) -> dependency.
        middlewares: Middleware name -> factory(options) -> dependency.
    """

    handlers: Mapping[str, Callable[..., Any]] = field(default_factory=dict)
    policies: Mapping[str, DependencyFactory] = field(default_factory=dict)
    middlewares: Mapping[str, DependencyFactory] = field(default_factory=dict)

    def resolve_handler(self, name: str) -> Callable[..., Any]:
        """Look up a handler by name.

        Raises:
            RouteCompositionError: If no handler is registered under ``name``.
        """
        try:
            return self.handlers[name]
        except KeyError:
            raise RouteCompositionError(
                f"Handler not found: {name}",
                code=ErrorCode.HANDLER_NOT_FOUND,
                reference=name,
            ) from None

    def resolve_policy(
        self, name: str, options: Mapping[str, Any] | None = None
    ) -> Callable[..., Any]:
        """Build the dependency for a named policy.

        Raises:
            RouteCompositionError: If no policy is registered under ``name``.
        """
        factory = self.policies.get(name)
        if factory is None:
            raise RouteCompositionError(
                f"Policy not found: {name}",
                code=ErrorCode.POLICY_NOT_FOUND,
                reference=name,
            )
        return factory(options or {})

    def resolve_middleware(
        self, name: str, options: Mapping[str, Any] | None = None
    ) -> Callable[..., Any]:
        """Build the dependency for a named middleware.

        Raises:
            RouteCompositionError: If no middleware is registered under ``name``.
        """
        factory = self.middlewares.get(name)
        if factory is None:
            raise RouteCompositionError(
                f"Middleware not found: {name}",
                code=ErrorCode.MIDDLEWARE_NOT_FOUND,
                reference=name,
            )
        return factory(options or {})
