"""API tests for routes registered through RouteManager.

Builds a FastAPI app from declarative route specifications and exercises it
with TestClient to verify:
1. Flat and nested routes are reachable at the expected paths
2. Routes opting out of a group prefix bypass it
3. Unmatched methods on matched paths return 405
4. Policies (named, configured, inline, injected defaults) gate access
5. Middlewares and chain steps run before the endpoint
"""

from collections.abc import Callable, Mapping
from typing import Any

import pytest
from fastapi import APIRouter, FastAPI, Request
from fastapi.testclient import TestClient

from routekit.presentation.routers import RouteManager, RouteManagerConfig, RoutingHost

calls: list[str] = []


def list_articles() -> list[dict[str, int]]:
    return [{"id": 1}]


def ping() -> dict[str, str]:
    return {"pong": "ok"}


def health_check() -> dict[str, str]:
    return {"status": "healthy"}


def echo_method(request: Request) -> dict[str, str]:
    return {"method": request.method}


def record_visit() -> None:
    calls.append("visit")


def has_header(options: Mapping[str, Any]) -> Callable[[Request], bool]:
    header = options.get("header", "x-token")

    def check(request: Request) -> bool:
        return header in request.headers

    return check


def deny(options: Mapping[str, Any]) -> Callable[[], bool]:
    return lambda: False


def allow(options: Mapping[str, Any]) -> Callable[[], bool]:
    return lambda: True


def recorder(options: Mapping[str, Any]) -> Callable[[], None]:
    label = options.get("label", "middleware")

    def record() -> None:
        calls.append(label)

    return record


HOST = RoutingHost(
    handlers={
        "article.list": list_articles,
        "health.check": health_check,
        "ping": ping,
        "echo": echo_method,
    },
    policies={"has-header": has_header, "deny": deny, "allow": allow},
    middlewares={"recorder": recorder},
)

ROUTES: list[dict[str, Any]] = [
    {"method": "GET", "path": "/health", "handler": "health.check"},
    {"method": "ALL", "path": "/echo", "handler": "echo"},
    {
        "method": "GET",
        "path": "/private",
        "handler": "health.check",
        "config": {"policies": [{"name": "has-header", "options": {"header": "x-api-key"}}]},
    },
    {
        "method": "GET",
        "path": "/forbidden",
        "handler": "health.check",
        "config": {"policies": ["allow", lambda: False]},
    },
    {
        "method": "GET",
        "path": "/traced",
        "handler": [record_visit, "health.check"],
        "config": {"middlewares": [{"name": "recorder", "options": {"label": "mw"}}]},
    },
]

V1_GROUP: dict[str, Any] = {
    "prefix": "/v1",
    "routes": [
        {"method": "GET", "path": "/articles", "handler": "article.list"},
        {"method": "GET", "path": "/ping", "handler": "ping", "config": {"prefix": ""}},
    ],
}


def build_client(routes: Any, config: RouteManagerConfig | None = None) -> TestClient:
    manager = RouteManager(HOST, config)
    router = APIRouter()
    for spec in routes:
        manager.add_routes(spec, router)
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    calls.clear()
    return build_client([ROUTES, V1_GROUP])


@pytest.mark.api
class TestRouteReachability:
    """Registered routes answer at their expected paths."""

    def test_flat_route_is_reachable(self, client):
        """Test GET /health from a flat list."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_nested_route_is_reachable_under_prefix(self, client):
        """Test group routes are mounted under /v1."""
        response = client.get("/v1/articles")

        assert response.status_code == 200
        assert response.json() == [{"id": 1}]

    def test_nested_route_is_not_reachable_without_prefix(self, client):
        """Test group routes do not leak to the root."""
        assert client.get("/articles").status_code == 404

    def test_opted_out_route_bypasses_group_prefix(self, client):
        """Test config.prefix registers the route on the outer router."""
        assert client.get("/ping").status_code == 200
        assert client.get("/v1/ping").status_code == 404

    def test_unmatched_method_returns_405(self, client):
        """Test the sub-router's allowed methods surface through the root."""
        response = client.post("/v1/articles")

        assert response.status_code == 405

    @pytest.mark.parametrize("method", ["GET", "POST", "PUT", "PATCH", "DELETE"])
    def test_all_method_route_answers_every_method(self, client, method):
        """Test ALL matches every method."""
        response = client.request(method, "/echo")

        assert response.status_code == 200
        assert response.json() == {"method": method}


@pytest.mark.api
class TestPolicies:
    """Policies gate access to the endpoint."""

    def test_configured_policy_allows_with_header(self, client):
        """Test options reach the policy factory."""
        response = client.get("/private", headers={"x-api-key": "secret"})

        assert response.status_code == 200

    def test_configured_policy_rejects_without_header(self, client):
        """Test a False policy result returns 403."""
        response = client.get("/private")

        assert response.status_code == 403
        assert response.json() == {"detail": "Policy Failed"}

    def test_inline_policy_rejects(self, client):
        """Test inline callables are enforced like named policies."""
        assert client.get("/forbidden").status_code == 403

    def test_default_policy_applies_to_routes_with_policies(self):
        """Test injected defaults run ahead of declared policies."""
        client = build_client(
            [
                [
                    {"method": "GET", "path": "/guarded", "handler": "health.check", "config": {"policies": ["allow"]}},
                    {"method": "GET", "path": "/open", "handler": "health.check"},
                ]
            ],
            RouteManagerConfig(default_policies=["deny"]),
        )

        assert client.get("/guarded").status_code == 403
        assert client.get("/open").status_code == 200


@pytest.mark.api
class TestMiddlewares:
    """Middlewares and chain steps run before the endpoint."""

    def test_middleware_then_chain_step_run(self, client):
        """Test middleware runs before the chain step."""
        response = client.get("/traced")

        assert response.status_code == 200
        assert calls == ["mw", "visit"]
