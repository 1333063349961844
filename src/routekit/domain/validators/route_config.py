"""Route descriptor validation.

Validates an untyped route descriptor against the ``RouteDescriptor`` schema.
Every violation is collected (no short-circuit) and reported in a single
``RouteConfigError``.

Rules:
    - method: required, one of GET, POST, PUT, PATCH, DELETE, ALL (exact case)
    - path: required non-empty string
    - handler: required; string, list/tuple, or callable
    - config: optional mapping; policies/middlewares are sequences of
      names, callables or {name, options} mappings; unknown keys dropped

Usage:
    from routekit.domain.validators import validate_route_config

    match validate_route_config({"method": "GET", "path": "/health", "handler": "health.check"}):
        case Success(value=route):
            ...
        case Failure(error=error):
            print(error.fields)
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from routekit.core.result import Failure, Result, Success
from routekit.domain.errors import RouteConfigError, RouteViolation
from routekit.domain.value_objects import RouteDescriptor
from routekit.domain.value_objects.policy_descriptor import (
    CONFIGURED_REFERENCE_TAG,
    INLINE_FUNCTION_TAG,
    NAMED_REFERENCE_TAG,
)
from routekit.domain.value_objects.route_handler import (
    HANDLER_CHAIN_TAG,
    HANDLER_FUNCTION_TAG,
    HANDLER_REFERENCE_TAG,
)

# Union tags appear in pydantic error locations; they are not descriptor fields.
_UNION_TAGS: frozenset[str] = frozenset(
    {
        NAMED_REFERENCE_TAG,
        INLINE_FUNCTION_TAG,
        CONFIGURED_REFERENCE_TAG,
        HANDLER_REFERENCE_TAG,
        HANDLER_CHAIN_TAG,
        HANDLER_FUNCTION_TAG,
    }
)


def validate_route_config(route: Any) -> Result[RouteDescriptor, RouteConfigError]:
    """Validate a raw route descriptor.

    The input is never mutated; the returned descriptor is a new, frozen
    object with unknown ``config`` keys stripped.

    Args:
        route: Route descriptor (mapping or RouteDescriptor).

    Returns:
        Success with the normalized RouteDescriptor, or Failure with a
        RouteConfigError listing every violation.
    """
    try:
        descriptor = RouteDescriptor.model_validate(route)
    except PydanticValidationError as exc:
        violations = tuple(
            _to_violation(detail) for detail in exc.errors(include_url=False)
        )
        return Failure(error=RouteConfigError.from_violations(violations))
    return Success(value=descriptor)


def _to_violation(detail: Mapping[str, Any]) -> RouteViolation:
    location = ".".join(
        str(part) for part in detail["loc"] if part not in _UNION_TAGS
    )
    return RouteViolation(
        location=location,
        message=detail["msg"],
        error_type=detail["type"],
    )
