"""
Custom exceptions for the GitHub MCP Server.

Provides a small error hierarchy for local failures (configuration, input
validation, malformed upstream payloads) and a single tagged error type for
failed GitHub API calls, classified by HTTP status code.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional, Dict, Any
from loguru import logger


DEFAULT_ERROR_MESSAGE = "GitHub API error"
RATE_LIMIT_RESET_FALLBACK = timedelta(minutes=1)


class GitHubMCPError(Exception):
    """Base exception for all GitHub MCP Server errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause
        logger.error(f"{self.__class__.__name__}: {message}")
        if details:
            logger.error(f"Error details: {details}")
        if cause:
            logger.error(f"Caused by: {cause}")


class ConfigurationError(GitHubMCPError):
    """Raised when there are configuration issues."""

    def __init__(self, message: str, missing_vars: Optional[list] = None, **kwargs):
        details = kwargs.pop("details", {})
        if missing_vars:
            details["missing_environment_variables"] = missing_vars
        cause = kwargs.pop("cause", None)
        super().__init__(message, details=details, cause=cause)


class ValidationError(GitHubMCPError):
    """Raised when tool input fails local validation."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if field:
            details["field"] = field
        cause = kwargs.pop("cause", None)
        super().__init__(message, details=details, cause=cause)
        self.field = field


class MalformedResponseError(GitHubMCPError):
    """Raised when a GitHub response does not have the expected JSON shape."""

    def __init__(self, message: str, resource: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        cause = kwargs.pop("cause", None)
        super().__init__(message, details=details, cause=cause)
        self.resource = resource


class GitHubErrorKind(Enum):
    """Classification of a failed GitHub API call."""
    AUTHENTICATION = "authentication"
    PERMISSION = "permission"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION = "validation"
    RATE_LIMIT = "rate_limit"
    API = "api"


_STATUS_KINDS = {
    401: GitHubErrorKind.AUTHENTICATION,
    403: GitHubErrorKind.PERMISSION,
    404: GitHubErrorKind.NOT_FOUND,
    409: GitHubErrorKind.CONFLICT,
    422: GitHubErrorKind.VALIDATION,
    429: GitHubErrorKind.RATE_LIMIT,
}

_KIND_PREFIXES = {
    GitHubErrorKind.AUTHENTICATION: "Authentication Failed",
    GitHubErrorKind.PERMISSION: "Permission Denied",
    GitHubErrorKind.NOT_FOUND: "Not Found",
    GitHubErrorKind.CONFLICT: "Conflict",
    GitHubErrorKind.VALIDATION: "Validation Error",
    GitHubErrorKind.RATE_LIMIT: "Rate Limit Exceeded",
    GitHubErrorKind.API: "GitHub API Error",
}


class GitHubAPIError(GitHubMCPError):
    """
    Raised when a GitHub API call fails.

    The ``kind`` attribute discriminates the failure; ``response`` keeps the
    upstream payload and ``reset_at`` is only set for rate limit errors.
    ``step`` names the stage of a multi-call operation that failed, if any.
    """

    def __init__(
        self,
        kind: GitHubErrorKind,
        message: str,
        status: Optional[int] = None,
        response: Any = None,
        reset_at: Optional[datetime] = None,
        step: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        details["kind"] = kind.value
        if status is not None:
            details["status"] = status
        if step:
            details["step"] = step
        if reset_at is not None:
            details["reset_at"] = reset_at.isoformat()
        cause = kwargs.pop("cause", None)
        self.kind = kind
        self.status = status
        self.response = response
        self.reset_at = reset_at
        self.step = step
        super().__init__(message, details=details, cause=cause)

    def __str__(self) -> str:
        text = format_github_error(self)
        if self.step:
            return f"error {self.step}: {text}"
        return text


def _parse_reset_at(value: Any) -> Optional[datetime]:
    """Parse an RFC 3339 timestamp from a rate limit payload."""
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def create_github_error(
    status: int,
    response: Any = None,
    step: Optional[str] = None,
    cause: Optional[Exception] = None
) -> GitHubAPIError:
    """
    Create the appropriate GitHub error for an HTTP status code.

    Args:
        status: HTTP status code returned by GitHub
        response: Decoded response payload (usually a dict)
        step: Optional name of the failing step in a multi-call operation
        cause: Optional underlying exception

    Returns:
        GitHubAPIError classified by status code
    """
    message = None
    if isinstance(response, dict):
        message = response.get("message")
    if not isinstance(message, str) or not message:
        message = DEFAULT_ERROR_MESSAGE

    kind = _STATUS_KINDS.get(status, GitHubErrorKind.API)

    reset_at = None
    if kind == GitHubErrorKind.RATE_LIMIT:
        if isinstance(response, dict):
            reset_at = _parse_reset_at(response.get("reset_at"))
        if reset_at is None:
            reset_at = datetime.now(timezone.utc) + RATE_LIMIT_RESET_FALLBACK

    return GitHubAPIError(
        kind,
        message,
        status=status,
        response=response,
        reset_at=reset_at,
        step=step,
        cause=cause,
    )


def format_github_error(error: Exception) -> str:
    """
    Format an error for display to MCP clients.

    Args:
        error: Any exception

    Returns:
        Human readable error text
    """
    if not isinstance(error, GitHubAPIError):
        if isinstance(error, GitHubMCPError):
            return error.message
        return str(error)

    prefix = _KIND_PREFIXES[error.kind]
    text = f"{prefix}: {error.message}"
    if error.kind == GitHubErrorKind.VALIDATION and error.response is not None:
        text += f"\nDetails: {error.response}"
    elif error.kind == GitHubErrorKind.RATE_LIMIT and error.reset_at is not None:
        text += f"\nResets at: {error.reset_at.isoformat()}"
    return text


def is_not_found(error: Exception) -> bool:
    """Check whether an error is a GitHub 404."""
    return isinstance(error, GitHubAPIError) and error.kind == GitHubErrorKind.NOT_FOUND
