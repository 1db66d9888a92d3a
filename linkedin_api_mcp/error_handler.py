# linkedin_api_mcp/error_handler.py
"""
Centralized error handling for the LinkedIn API MCP server.

Converts the server's exception hierarchy into MCP protocol errors with the
right JSON-RPC code, so every tool failure reaches the client in one
consistent shape. Unexpected exceptions are logged with their type and
reported as internal errors.
"""

import structlog
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, ErrorData

from linkedin_api_mcp.exceptions import LinkedInMCPError

logger = structlog.get_logger(__name__)


def convert_exception_to_error_data(exception: Exception, context: str = "") -> ErrorData:
    """
    Convert an exception to a JSON-RPC error payload.

    Args:
        exception: The exception to convert
        context: Which tool (or phase) failed

    Returns:
        ErrorData with code and message
    """
    if isinstance(exception, LinkedInMCPError):
        data = exception.details or None
        return ErrorData(code=exception.code, message=exception.message, data=data)

    logger.error(
        "Unexpected error",
        context=context,
        exception_type=type(exception).__name__,
        exception_message=str(exception),
    )
    return ErrorData(
        code=INTERNAL_ERROR,
        message=f"Failed to execute {context}: {exception}",
    )


def to_mcp_error(exception: Exception, context: str = "") -> McpError:
    """Wrap ``exception`` in an ``McpError`` ready to be raised from a handler."""
    if isinstance(exception, McpError):
        return exception
    return McpError(convert_exception_to_error_data(exception, context))
