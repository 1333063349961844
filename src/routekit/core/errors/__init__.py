"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from routekit.core.errors import DomainError, ValidationError
"""

from routekit.core.enums import ErrorCode
from routekit.core.errors.common_errors import ValidationError
from routekit.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ErrorCode",
    "ValidationError",
]
