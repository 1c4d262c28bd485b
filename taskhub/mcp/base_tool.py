"""
MCP Base Tool Interface

Provides base functionality for all MCP tool handlers including:
- Not-found and validation errors
- Standard success payloads
- Invocation logging
- Conversion of handler errors into protocol-level tool errors
"""

from typing import Any, Awaitable, Callable, Dict, Optional
import logging

from mcp.server.fastmcp.exceptions import ToolError
from pydantic import ValidationError

from taskhub.services.store import Store

logger = logging.getLogger(__name__)

SENSITIVE_KEYS = ("password", "token", "secret")


class MCPToolError(Exception):
    """Base exception for MCP tool errors"""
    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class BaseMCPTool:
    """
    Base class for the per-entity tool handlers

    Handlers are thin: they call the store, serialize the result and raise
    MCPToolError when a request cannot be served.
    """

    def __init__(self, store: Store):
        self.store = store

    def not_found(self, entity: str, entity_id: str) -> MCPToolError:
        """Build the not-found error for an entity; callers raise it."""
        return MCPToolError(
            code="NOT_FOUND",
            message=f"{entity} not found",
            details={"id": entity_id},
        )

    def require_changes(self, changes: Dict[str, Any], entity_id: str) -> None:
        """
        Validate that an update carries at least one field

        Raises:
            MCPToolError: If the patch is empty
        """
        if not changes:
            raise MCPToolError(
                code="VALIDATION_ERROR",
                message="At least one field must be provided for update",
                details={"id": entity_id},
            )

    def log_tool_invocation(self, tool_name: str, params: Dict[str, Any]) -> None:
        """
        Log MCP tool invocation for audit trail

        Args:
            tool_name: Name of the tool being invoked
            params: Tool parameters (sensitive data is redacted)
        """
        safe_params = {k: v for k, v in params.items() if k not in SENSITIVE_KEYS}
        logger.info(f"MCP Tool Invocation: {tool_name} | Params: {safe_params}")


def create_success_response(data: Any, message: Optional[str] = None) -> Dict[str, Any]:
    """Wrap handler output as {"success": True, "data": ..., "message"?: ...}."""
    response: Dict[str, Any] = {"success": True, "data": data}

    if message:
        response["message"] = message

    return response


def _to_tool_error(tool_name: str, error: Exception) -> ToolError:
    if isinstance(error, MCPToolError):
        logger.warning(f"Tool {tool_name} failed [{error.code}]: {error.message} | Details: {error.details}")
        return ToolError(error.message)
    if isinstance(error, ValidationError):
        logger.warning(f"Tool {tool_name} rejected input: {error}")
        return ToolError(f"Validation failed: {error}")
    logger.exception(f"Tool {tool_name} failed unexpectedly")
    return ToolError(f"Failed to {tool_name.replace('_', ' ')}")


def invoke(tool_name: str, call: Callable[[], Dict[str, Any]]) -> Dict[str, Any]:
    """
    Run a handler call, turning failures into an error-flagged tool result

    MCPToolError keeps its message, pydantic validation errors become
    validation failures, anything else is logged and reported generically.
    """
    try:
        return call()
    except Exception as e:
        raise _to_tool_error(tool_name, e) from e


async def ainvoke(tool_name: str, call: Callable[[], Awaitable[Dict[str, Any]]]) -> Dict[str, Any]:
    """Async counterpart of invoke for handlers that suspend."""
    try:
        return await call()
    except Exception as e:
        raise _to_tool_error(tool_name, e) from e
