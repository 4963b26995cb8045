"""Error taxonomy for the tools directory.

Domain code raises these; the exception handlers in ``server`` translate
each one into a JSON error body with the class's ``status_code``.
"""


class ToolsDirectoryError(Exception):
    """Base class for all reported conditions."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthorized(ToolsDirectoryError):
    """Admin secret missing or wrong."""

    status_code = 401


class ToolValidationError(ToolsDirectoryError):
    """Required field missing or value out of range."""

    status_code = 400


class ToolNotFound(ToolsDirectoryError):
    """No tool with the requested id."""

    status_code = 404

    def __init__(self, tool_id: str):
        super().__init__("Tool not found")
        self.tool_id = tool_id


class StorageFailure(ToolsDirectoryError):
    """The backing store could not be read or written."""

    status_code = 500


class ServerMisconfigured(ToolsDirectoryError):
    """A required setting (admin secret, KV credentials) is not configured."""

    status_code = 500
