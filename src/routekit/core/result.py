"""Result types for railway-oriented programming.

Validation returns a Result instead of raising, which keeps the failure path
explicit and lets callers decide whether a failure aborts their work.

Usage:
    result = validate_route_config(raw_route)
    match result:
        case Success(value=route):
            register(route)
        case Failure(error=error):
            print(error.violations)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
