"""Common error classes shared across layers.

Error Types:
- ValidationError: Input validation failures

Usage:
    from routekit.core.errors import ValidationError
    from routekit.core.enums import ErrorCode
    from routekit.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.VALIDATION_FAILED,
        message="path cannot be empty",
        field="path",
    ))
"""

from dataclasses import dataclass

from routekit.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None
