"""API utilities and dependencies.

This package contains shared API utilities:
- deps: FastAPI dependency injection functions
"""

from .deps import (
    get_admin_password,
    get_tool_store,
    require_admin,
    sanitize_error_message,
)

__all__ = [
    "get_admin_password",
    "get_tool_store",
    "require_admin",
    "sanitize_error_message",
]
