"""Core enums package.

Usage:
    from userservice.core.enums import ErrorCode, Environment
"""

from userservice.core.enums.environment import Environment
from userservice.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
