"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (VALIDATION_*, ROUTE_CONFIG_*)
- Resolution errors (*_NOT_FOUND)
- Composition errors (ROUTE_COMPOSITION_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes.

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    ROUTE_CONFIG_INVALID = "route_config_invalid"

    # Resolution errors
    HANDLER_NOT_FOUND = "handler_not_found"
    POLICY_NOT_FOUND = "policy_not_found"
    MIDDLEWARE_NOT_FOUND = "middleware_not_found"

    # Composition errors
    ROUTE_COMPOSITION_FAILED = "route_composition_failed"
