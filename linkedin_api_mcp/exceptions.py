# linkedin_api_mcp/exceptions.py
"""
Custom exceptions for the LinkedIn API MCP server.

Every exception carries a human-readable message, optional details and the
underlying cause, plus the JSON-RPC error code it is reported with. Validation
and catalog errors are raised before any network call; remote errors are raised
at the single point of HTTP invocation.
"""

from typing import Any, Dict, Optional, Sequence

from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, INVALID_REQUEST, METHOD_NOT_FOUND


class LinkedInMCPError(Exception):
    """Base exception for the LinkedIn API MCP server.

    Attributes:
        message: Human-readable error message
        details: Additional context about the error
        cause: Original exception that caused this error
    """

    code: int = INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class UnknownToolError(LinkedInMCPError):
    """Raised when a tool name is not present in the catalog."""

    code = METHOD_NOT_FOUND

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}", details={"tool": tool_name})
        self.tool_name = tool_name


class InvalidArgumentsError(LinkedInMCPError):
    """Raised when tool arguments are missing or violate a per-tool rule."""

    code = INVALID_PARAMS

    def __init__(self, message: str, fields: Sequence[str] = ()):
        super().__init__(message, details={"fields": list(fields)})
        self.fields = tuple(fields)


class RemoteAPIError(LinkedInMCPError):
    """Raised when the remote API call fails (status, network or timeout)."""

    code = INTERNAL_ERROR

    def __init__(
        self,
        status_code: Optional[int],
        reason: str,
        cause: Optional[Exception] = None,
    ):
        shown_status = status_code if status_code is not None else 500
        super().__init__(
            f"HarvestAPI error ({shown_status}): {reason}",
            details={"status_code": status_code, "reason": reason},
            cause=cause,
        )
        self.status_code = status_code
        self.reason = reason


class ConfigurationError(LinkedInMCPError):
    """Raised when configuration validation fails."""

    code = INVALID_REQUEST
