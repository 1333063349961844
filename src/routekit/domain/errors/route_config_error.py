"""Route configuration errors.

Architecture:
- RouteConfigError is a ValidationError domain error, returned in Failure
- InvalidRouteConfigError is the exception the route manager raises when a
  Failure must abort registration; it wraps the domain error
"""

from dataclasses import dataclass

from routekit.core.enums import ErrorCode
from routekit.core.errors import ValidationError


@dataclass(frozen=True, slots=True, kw_only=True)
class RouteViolation:
    """A single violated schema constraint.

    Attributes:
        location: Dotted path to the offending value (e.g. "config.policies.1").
            Empty when the descriptor itself has the wrong shape.
        message: Human-readable constraint description.
        error_type: Machine-readable pydantic error type (e.g. "missing").
    """

    location: str
    message: str
    error_type: str

    @property
    def field(self) -> str:
        """Top-level descriptor field (e.g. "config"), or "route"."""
        return self.location.split(".", 1)[0] or "route"

    def __str__(self) -> str:
        return f"{self.location or 'route'}: {self.message}"


@dataclass(frozen=True, slots=True, kw_only=True)
class RouteConfigError(ValidationError):
    """All schema violations found in one route descriptor.

    Attributes:
        code: ErrorCode.ROUTE_CONFIG_INVALID.
        message: Summary listing every violation.
        field: First violated top-level field.
        violations: Every violation, in schema order.
    """

    violations: tuple[RouteViolation, ...] = ()

    @classmethod
    def from_violations(
        cls, violations: tuple[RouteViolation, ...]
    ) -> "RouteConfigError":
        """Build the aggregated error from individual violations.

        Args:
            violations: Non-empty tuple of violations.

        Returns:
            RouteConfigError: Error naming every violation.
        """
        summary = "; ".join(str(violation) for violation in violations)
        return cls(
            code=ErrorCode.ROUTE_CONFIG_INVALID,
            message=f"Invalid route config: {summary}",
            field=violations[0].field if violations else None,
            violations=violations,
        )

    @property
    def fields(self) -> tuple[str, ...]:
        """Distinct top-level fields that failed, in order of first failure."""
        return tuple(dict.fromkeys(violation.field for violation in self.violations))


class InvalidRouteConfigError(ValueError):
    """Raised when a route descriptor fails validation during registration."""

    def __init__(self, error: RouteConfigError) -> None:
        """Initialize from the aggregated domain error.

        Args:
            error: Domain error carrying every violation.
        """
        super().__init__(error.message)
        self.error = error

    @property
    def violations(self) -> tuple[RouteViolation, ...]:
        return self.error.violations
