"""
Shared tool execution and response formatting.

Every tool returns a JSON-serializable dict: ``{"success": True, "data": ...}``
on success, or ``{"success": False, "error": ...}`` with the formatted error.
"""

from loguru import logger
from typing import Any, Awaitable, Callable, Dict

from ..exceptions import GitHubAPIError, GitHubMCPError, format_github_error
from ..models import Model
from ..validation import sanitize_for_logging


def serialize(result: Any) -> Any:
    """Convert models (and lists of models) into plain JSON values."""
    if isinstance(result, Model):
        return result.to_dict()
    if isinstance(result, (list, tuple)):
        return [serialize(item) for item in result]
    return result


def success_response(result: Any) -> Dict[str, Any]:
    return {"success": True, "data": serialize(result)}


def error_response(error: Exception) -> Dict[str, Any]:
    """Build the failure payload for an exception."""
    if isinstance(error, GitHubMCPError):
        response: Dict[str, Any] = {
            "success": False,
            "error": str(error) if isinstance(error, GitHubAPIError) else format_github_error(error),
            "error_type": error.__class__.__name__,
            "details": error.details,
        }
        if isinstance(error, GitHubAPIError):
            response["error_kind"] = error.kind.value
        return response
    return {
        "success": False,
        "error": f"Unexpected error: {error}",
        "error_type": error.__class__.__name__,
    }


async def execute_tool(
    tool_name: str,
    operation: Callable[..., Awaitable[Any]],
    **kwargs: Any
) -> Dict[str, Any]:
    """
    Run a service operation with consistent logging and error handling.

    Args:
        tool_name: Name of the MCP tool, for logging
        operation: Async service method to call
        **kwargs: Tool arguments forwarded to the operation

    Returns:
        Success or failure payload
    """
    logger.debug(f"Tool {tool_name} called with {sanitize_for_logging(kwargs)}")
    try:
        result = await operation(**kwargs)
        return success_response(result)
    except GitHubMCPError as e:
        logger.warning(f"Tool {tool_name} failed: {e}")
        return error_response(e)
    except Exception as e:
        logger.exception(f"Unexpected error in {tool_name}: {e}")
        return error_response(e)
