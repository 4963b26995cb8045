"""FastAPI dependency injection functions.

This module contains shared dependencies for API endpoints:
- Settings and tool store access
- Admin password extraction and validation
- Error sanitization
"""

import logging
from typing import Annotated

from fastapi import Depends, Header

from ..config import Settings, get_settings
from ..errors import ToolsDirectoryError
from ..services.auth import check_admin_secret
from ..store import ToolStore, get_store

logger = logging.getLogger(__name__)


# ============ ERROR SANITIZATION ============


def sanitize_error_message(error: Exception) -> str:
    """
    Sanitize error messages to prevent information disclosure.

    Reported conditions keep their message; anything else is logged and
    replaced with a generic message.
    """
    if isinstance(error, ToolsDirectoryError):
        return error.message

    logger.error(f"Unexpected error: {error}", exc_info=True)
    return "An internal server error occurred. Please try again."


# ============ STORE ============


async def get_tool_store(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ToolStore:
    """Shared tool store for the configured backend."""
    return await get_store(settings)


# ============ ADMIN AUTH ============


async def get_admin_password(
    x_admin_password: Annotated[str | None, Header(alias="X-Admin-Password")] = None,
) -> str | None:
    """Extract the admin password from the request header."""
    return x_admin_password


async def require_admin(
    password: Annotated[str | None, Depends(get_admin_password)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> None:
    """Reject the request unless it carries the configured admin password."""
    check_admin_secret(password, settings.admin_password)
