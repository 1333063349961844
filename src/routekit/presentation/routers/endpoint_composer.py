"""FastAPI endpoint composer.

Turns a validated RouteDescriptor into an ``APIRoute`` on the router carried
by its RouteContext, using ``router.add_api_route()``.

Composition:
    - handler: name -> host handler; callable -> itself; chain -> every step
      but the last becomes a dependency, the last step is the endpoint
    - policies: resolved through host.policies, wrapped in a guard that
      rejects the request with 403 when the policy returns False
    - middlewares: resolved through host.middlewares, used as dependencies
    - dependency order: policies, middlewares, chain steps

All names are resolved before ``add_api_route`` is called, so a route is
either fully registered or not registered at all.
"""

from collections.abc import Callable, Mapping
from typing import Any

from fastapi import Depends, HTTPException, status

from routekit.domain.enums import HTTPMethod
from routekit.domain.errors import RouteCompositionError
from routekit.domain.value_objects import (
    ConfiguredReference,
    HandlerChain,
    HandlerFunction,
    HandlerReference,
    InlineFunction,
    NamedReference,
    PolicyDescriptor,
    RouteContext,
    RouteDescriptor,
)
from routekit.presentation.routers.host import RoutingHost

ALL_METHODS: tuple[str, ...] = (
    "GET",
    "POST",
    "PUT",
    "PATCH",
    "DELETE",
    "HEAD",
    "OPTIONS",
)

# info keys forwarded to APIRouter.add_api_route()
ROUTE_INFO_OPTIONS: tuple[str, ...] = (
    "name",
    "tags",
    "summary",
    "description",
    "operation_id",
    "deprecated",
)

Resolver = Callable[[str, Mapping[str, Any] | None], Callable[..., Any]]


class FastAPIEndpointComposer:
    """Compose validated routes into FastAPI routes.

    Args:
        host: Registries used to resolve handler, policy and middleware names.
    """

    def __init__(self, host: RoutingHost) -> None:
        self._host = host

    def compose(self, route: RouteDescriptor, context: RouteContext) -> None:
        """Register ``route`` on ``context.router``.

        Args:
            route: Validated route with default policies already injected.
            context: Target router and route info.

        Raises:
            RouteCompositionError: If a name cannot be resolved or the
                handler chain is unusable.
        """
        endpoint, chain_dependencies = self._resolve_handler(route.handler)

        dependencies = [
            *(
                _guard_policy(_resolve(policy, self._host.resolve_policy))
                for policy in route.policies
            ),
            *(
                _resolve(middleware, self._host.resolve_middleware)
                for middleware in route.middlewares
            ),
            *chain_dependencies,
        ]

        context.router.add_api_route(
            _route_path(route),
            endpoint,
            methods=list(_route_methods(route.method)),
            dependencies=[Depends(dependency) for dependency in dependencies],
            **_route_options(context.info),
        )

    def _resolve_handler(
        self, handler: HandlerReference | HandlerChain | HandlerFunction
    ) -> tuple[Callable[..., Any], list[Callable[..., Any]]]:
        match handler:
            case HandlerReference(name=name):
                return self._host.resolve_handler(name), []
            case HandlerFunction(function=function):
                return function, []
            case HandlerChain(steps=steps):
                if not steps:
                    raise RouteCompositionError("Handler chain cannot be empty")
                resolved = [self._resolve_step(step) for step in steps]
                return resolved[-1], resolved[:-1]
        raise RouteCompositionError(f"Unsupported handler: {handler!r}")

    def _resolve_step(self, step: Any) -> Callable[..., Any]:
        if isinstance(step, str):
            return self._host.resolve_handler(step)
        if callable(step):
            return step
        raise RouteCompositionError(
            f"Handler chain step must be a name or a callable, got {type(step).__name__}"
        )


def _resolve(descriptor: PolicyDescriptor, resolver: Resolver) -> Callable[..., Any]:
    match descriptor:
        case NamedReference(name=name):
            return resolver(name, None)
        case ConfiguredReference(name=name, options=options):
            return resolver(name, options)
        case InlineFunction(function=function):
            return function
    raise RouteCompositionError(f"Unsupported descriptor: {descriptor!r}")


def _guard_policy(policy: Callable[..., Any]) -> Callable[..., None]:
    """Wrap a policy so a False result rejects the request."""

    def enforce_policy(allowed: Any = Depends(policy)) -> None:
        if allowed is False:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Policy Failed",
            )

    return enforce_policy


def _route_path(route: RouteDescriptor) -> str:
    if route.config is not None and route.config.declares_prefix:
        return f"{route.config.prefix or ''}{route.path}"
    return route.path


def _route_methods(method: HTTPMethod) -> tuple[str, ...]:
    if method is HTTPMethod.ALL:
        return ALL_METHODS
    return (method.value,)


def _route_options(info: Mapping[str, Any]) -> dict[str, Any]:
    options = {key: info[key] for key in ROUTE_INFO_OPTIONS if key in info}
    match options.get("tags"):
        case str() as tag:
            options["tags"] = [tag]
        case None:
            pass
        case tags:
            options["tags"] = list(tags)
    return options
