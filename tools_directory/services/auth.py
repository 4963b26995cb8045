"""Shared-secret authorization for admin operations."""

import hmac
import logging

from ..errors import ServerMisconfigured, Unauthorized

logger = logging.getLogger(__name__)


def check_admin_secret(
    provided: str | None,
    expected: str | None,
    message: str = "Unauthorized",
) -> None:
    """
    Verify the secret sent by a client against the configured one.

    Args:
        provided: Secret from the request header, if any
        expected: Secret from configuration
        message: Error message used when the secret is rejected

    Raises:
        ServerMisconfigured: if no secret is configured
        Unauthorized: if the provided secret is missing or does not match
    """
    if not expected:
        logger.error("Admin password is not configured")
        raise ServerMisconfigured("ADMIN_PASSWORD not configured")

    if not provided or not hmac.compare_digest(provided.encode(), expected.encode()):
        logger.warning("Rejected admin request with invalid password")
        raise Unauthorized(message)
