"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from routekit.core.enums import ErrorCode, Environment
"""

from routekit.core.enums.environment import Environment
from routekit.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
