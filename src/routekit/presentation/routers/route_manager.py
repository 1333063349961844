"""Route manager: validates route declarations and registers them on routers.

Route specifications come in two shapes:

    Flat list (registered on the given router):
        [
            {"method": "GET", "path": "/health", "handler": "health.check"},
        ]

    Nested group (registered on a new prefixed sub-router):
        {
            "prefix": "/v1",
            "routes": [
                {"method": "GET", "path": "/articles", "handler": "article.find"},
                # Declaring config.prefix opts out of the group prefix
                {"method": "GET", "path": "/ping", "handler": "ping",
                 "config": {"prefix": ""}},
            ],
        }

Each route is validated, default policies are prepended when the route
declares policies of its own, and the composer registers it. Routes are
processed in order; the first failure aborts the call and routes already
registered stay registered.

Usage:
    from fastapi import APIRouter, FastAPI

    manager = RouteManager(host, RouteManagerConfig(default_policies=["is-authenticated"]))
    router = APIRouter()
    manager.add_routes(ROUTES, router)

    app = FastAPI()
    app.include_router(router)
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, NotRequired, TypedDict

import structlog
from fastapi import APIRouter
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from routekit.core.config import Settings, get_settings
from routekit.core.result import Failure, Success
from routekit.domain.errors import InvalidRouteConfigError
from routekit.domain.protocols import EndpointComposerProtocol
from routekit.domain.validators import validate_route_config
from routekit.domain.value_objects import (
    PolicyList,
    RouteConfig,
    RouteContext,
    RouteDescriptor,
)
from routekit.presentation.routers.endpoint_composer import FastAPIEndpointComposer
from routekit.presentation.routers.host import RoutingHost

logger = structlog.get_logger(__name__)


class RouteGroup(TypedDict):
    """Nested route group: routes mounted under ``prefix``."""

    routes: Sequence[Any]
    prefix: NotRequired[str]


class RouteManagerConfig(BaseModel):
    """Immutable route manager configuration.

    Attributes:
        default_policies: Policies prepended, in order, to every route that
            declares at least one policy. Accepts ``defaultPolicies`` too.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    default_policies: PolicyList = Field(
        default=(),
        validation_alias=AliasChoices("default_policies", "defaultPolicies"),
    )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "RouteManagerConfig":
        """Build configuration from environment settings.

        Args:
            settings: Settings to read; defaults to get_settings().

        Returns:
            RouteManagerConfig: Config with ROUTEKIT_DEFAULT_POLICIES applied.
        """
        settings = settings or get_settings()
        return cls(default_policies=settings.default_policies)


class RouteManager:
    """Validate route declarations and register them on FastAPI routers.

    Args:
        host: Registries the default composer resolves names against.
        config: Manager configuration (default policies).
        composer: Endpoint composer; defaults to FastAPIEndpointComposer(host).
        router_factory: Builds sub-routers for nested groups; called with
            ``prefix=...``.
    """

    def __init__(
        self,
        host: RoutingHost,
        config: RouteManagerConfig | None = None,
        *,
        composer: EndpointComposerProtocol | None = None,
        router_factory: Callable[..., APIRouter] = APIRouter,
    ) -> None:
        self._config = config or RouteManagerConfig()
        self._composer = composer or FastAPIEndpointComposer(host)
        self._router_factory = router_factory

    @property
    def config(self) -> RouteManagerConfig:
        return self._config

    def add_routes(
        self, routes: Sequence[Any] | RouteGroup | Any, router: APIRouter
    ) -> None:
        """Register a flat route list or a nested route group.

        Args:
            routes: List of route descriptors, or ``{"routes": [...], "prefix": "/x"}``.
            router: Router the routes (or the group's sub-router) attach to.

        Raises:
            InvalidRouteConfigError: If a route fails validation.
        """
        match routes:
            case Mapping() if _is_route_list(routes.get("routes")):
                self._add_group(routes["routes"], routes.get("prefix") or "", router)
            case str() | bytes():
                _log_ignored(routes)
            case Sequence():
                for route in routes:
                    self.add_route(route, router)
            case _:
                _log_ignored(routes)

    def add_route(self, route: Any, router: APIRouter) -> None:
        """Validate one route descriptor and register it on ``router``.

        Args:
            route: Raw route descriptor.
            router: Router to bind the route to.

        Raises:
            InvalidRouteConfigError: If the descriptor fails validation;
                nothing is registered for it.
        """
        match validate_route_config(route):
            case Failure(error=error):
                logger.error(
                    "route_config_invalid",
                    fields=list(error.fields),
                    violations=[str(violation) for violation in error.violations],
                )
                raise InvalidRouteConfigError(error)
            case Success(value=descriptor):
                self._register(descriptor, router)

    def _add_group(
        self, routes: Sequence[Any], prefix: str, router: APIRouter
    ) -> None:
        prefix = prefix.rstrip("/")
        sub_router = self._router_factory(prefix=prefix)

        nested = 0
        for route in routes:
            if _declares_prefix(route):
                self.add_route(route, router)
            else:
                self.add_route(route, sub_router)
                nested += 1

        router.include_router(sub_router)
        logger.debug("route_group_mounted", prefix=prefix, route_count=nested)

    def _register(self, route: RouteDescriptor, router: APIRouter) -> None:
        route = route.with_default_policies(self._config.default_policies)
        info = route.info if isinstance(route.info, Mapping) else {}

        self._composer.compose(route, RouteContext(router=router, info=info))

        logger.debug(
            "route_registered",
            method=route.method.value,
            path=route.path,
            policy_count=len(route.policies),
        )


def _is_route_list(routes: Any) -> bool:
    """Whether a group's ``routes`` value is a non-empty list of routes."""
    return (
        isinstance(routes, Sequence)
        and not isinstance(routes, str | bytes)
        and len(routes) > 0
    )


def _declares_prefix(route: Any) -> bool:
    """Whether a raw route's config carries its own ``prefix`` key."""
    if isinstance(route, RouteDescriptor):
        return route.config is not None and route.config.declares_prefix
    if not isinstance(route, Mapping):
        return False
    config = route.get("config")
    if isinstance(config, RouteConfig):
        return config.declares_prefix
    return isinstance(config, Mapping) and "prefix" in config


def _log_ignored(routes: Any) -> None:
    logger.warning(
        "route_group_ignored",
        reason="expected a list of routes or a mapping with 'routes'",
        received=type(routes).__name__,
    )
