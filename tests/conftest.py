"""Pytest configuration and shared fixtures.

Fixtures:
1. root_router: fresh APIRouter per test
2. composer: MagicMock standing in for the endpoint composer
3. host: RoutingHost with a health handler and a few policies
"""

from collections.abc import Callable, Mapping
from typing import Any
from unittest.mock import MagicMock

import pytest
from fastapi import APIRouter

from routekit.presentation.routers import RoutingHost


def health_check() -> dict[str, str]:
    """Handler used across tests."""
    return {"status": "healthy"}


def allow(options: Mapping[str, Any]) -> Callable[[], bool]:
    """Policy factory that always allows."""
    return lambda: True


def deny(options: Mapping[str, Any]) -> Callable[[], bool]:
    """Policy factory that always rejects."""
    return lambda: False


@pytest.fixture
def root_router() -> APIRouter:
    """Fresh root router (no prefix)."""
    return APIRouter()


@pytest.fixture
def composer() -> MagicMock:
    """Endpoint composer double recording every compose() call."""
    return MagicMock()


@pytest.fixture
def host() -> RoutingHost:
    """Host with one handler and allow/deny policies."""
    return RoutingHost(
        handlers={"health.check": health_check},
        policies={"allow": allow, "deny": deny},
    )
