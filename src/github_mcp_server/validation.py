"""
Input validation for GitHub tool parameters.

All checks are local and run before any network call. The owner, repository
and branch rules mirror the naming rules GitHub and Git enforce, so an invalid
name is rejected with a precise message instead of an opaque upstream 404/422.
"""

import re
from datetime import datetime
from typing import Any, Iterable, Optional, Tuple

from .constants import PAGINATION
from .exceptions import ValidationError


class InputValidator:
    """Centralized input validation for tool parameters."""

    # Patterns
    OWNER_NAME_PATTERN = re.compile(r'[a-zA-Z0-9]+(-[a-zA-Z0-9]+)*')
    OWNER_CHARS_PATTERN = re.compile(r'[a-zA-Z0-9-]+')
    REPO_NAME_PATTERN = re.compile(r'[a-zA-Z0-9_.-]+')
    BRANCH_INVALID_CHARS_PATTERN = re.compile(r'[\s~^:?*\[\\\]]')
    SHA_PATTERN = re.compile(r'[0-9a-fA-F]{7,64}')
    TIMESTAMP_PATTERN = re.compile(r'\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})')

    # Limits
    MAX_OWNER_NAME_LENGTH = 39

    @staticmethod
    def validate_owner_name(owner: str, field: str = "owner") -> str:
        """
        Validate a GitHub user or organization name.

        Args:
            owner: User or organization login
            field: Parameter name used in error details

        Returns:
            Validated owner name

        Raises:
            ValidationError: If the owner name is invalid
        """
        if not owner or not isinstance(owner, str):
            raise ValidationError("owner name cannot be empty", field=field)

        if not InputValidator.OWNER_CHARS_PATTERN.fullmatch(owner):
            raise ValidationError(
                "owner name can only contain letters, numbers, and hyphens",
                field=field
            )

        if not InputValidator.OWNER_NAME_PATTERN.fullmatch(owner):
            raise ValidationError(
                "owner name must start and end with a letter or number "
                "and cannot contain consecutive hyphens",
                field=field
            )

        if len(owner) > InputValidator.MAX_OWNER_NAME_LENGTH:
            raise ValidationError(
                f"owner name is too long (max {InputValidator.MAX_OWNER_NAME_LENGTH} characters)",
                field=field
            )

        return owner

    @staticmethod
    def validate_repository_name(name: str, field: str = "repo") -> str:
        """
        Validate a repository name.

        Args:
            name: Repository name without the owner part

        Returns:
            Validated repository name

        Raises:
            ValidationError: If the repository name is invalid
        """
        if not name or not isinstance(name, str):
            raise ValidationError("repository name cannot be empty", field=field)

        if not InputValidator.REPO_NAME_PATTERN.fullmatch(name):
            raise ValidationError(
                "repository name can only contain letters, numbers, hyphens, periods, and underscores",
                field=field
            )

        if name.startswith('.') or name.endswith('.'):
            raise ValidationError(
                "repository name cannot start or end with a period",
                field=field
            )

        return name

    @staticmethod
    def validate_branch_name(branch: str, field: str = "branch") -> str:
        """
        Validate a branch name according to Git ref naming rules.

        Args:
            branch: Branch name (without ``refs/heads/``)

        Returns:
            Validated branch name

        Raises:
            ValidationError: If the branch name is invalid
        """
        if not branch or not isinstance(branch, str):
            raise ValidationError("branch name cannot be empty", field=field)

        if '..' in branch:
            raise ValidationError("branch name cannot contain '..'", field=field)

        if InputValidator.BRANCH_INVALID_CHARS_PATTERN.search(branch):
            raise ValidationError("branch name contains invalid characters", field=field)

        if branch.startswith('/') or branch.endswith('/'):
            raise ValidationError("branch name cannot start or end with '/'", field=field)

        if branch.endswith('.lock'):
            raise ValidationError("branch name cannot end with '.lock'", field=field)

        return branch

    @staticmethod
    def validate_repo_ref(owner: str, repo: str) -> Tuple[str, str]:
        """Validate an owner/repository pair."""
        return (
            InputValidator.validate_owner_name(owner),
            InputValidator.validate_repository_name(repo),
        )

    @staticmethod
    def validate_query(query: str) -> str:
        """Validate a search query string."""
        if not query or not isinstance(query, str) or not query.strip():
            raise ValidationError("query is required", field="query")
        return query

    @staticmethod
    def validate_issue_number(number: Any) -> int:
        """Validate an issue number."""
        if isinstance(number, bool) or not isinstance(number, int) or number <= 0:
            raise ValidationError("issue number must be a positive integer", field="number")
        return number

    @staticmethod
    def validate_required(value: Optional[str], message: str, field: str) -> str:
        """Validate that a string parameter is present."""
        if not value:
            raise ValidationError(message, field=field)
        return value

    @staticmethod
    def validate_choice(
        value: Optional[str],
        choices: Iterable[str],
        field: str
    ) -> Optional[str]:
        """Validate an optional enumerated string parameter."""
        choices = list(choices)
        if value and value not in choices:
            raise ValidationError(
                f"{field} must be one of: {', '.join(choices)}",
                field=field
            )
        return value or None

    @staticmethod
    def validate_timestamp(value: Optional[str], field: str) -> Optional[datetime]:
        """
        Validate an optional ISO 8601 timestamp (YYYY-MM-DDTHH:MM:SSZ).

        Returns:
            Parsed datetime, or None when the value is empty
        """
        if not value:
            return None
        message = f"{field} must be an ISO 8601 timestamp (YYYY-MM-DDTHH:MM:SSZ)"
        if not isinstance(value, str) or not InputValidator.TIMESTAMP_PATTERN.fullmatch(value):
            raise ValidationError(message, field=field)
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            # Well-formed but out of range, e.g. month 13
            raise ValidationError(message, field=field)

    @staticmethod
    def validate_sha(value: str, field: str = "sha") -> str:
        """Validate a hexadecimal Git object SHA (abbreviated or full)."""
        if not isinstance(value, str) or not InputValidator.SHA_PATTERN.fullmatch(value):
            raise ValidationError(f"{field} must be a hexadecimal commit SHA", field=field)
        return value

    @staticmethod
    def normalize_pagination(
        page: Optional[int],
        per_page: Optional[int],
        default_per_page: int = PAGINATION.DEFAULT_PER_PAGE
    ) -> Tuple[int, int]:
        """
        Apply pagination defaults.

        A missing or non-positive page becomes 1; a missing or out-of-range
        page size becomes the default.
        """
        if not page or page < 1:
            page = PAGINATION.DEFAULT_PAGE
        if not per_page or per_page < 1 or per_page > PAGINATION.MAX_PER_PAGE:
            per_page = default_per_page
        return page, per_page

    @staticmethod
    def sanitize_for_logging(data: Any) -> Any:
        """
        Sanitize data for logging to prevent leaking sensitive information.

        Args:
            data: Data to sanitize (can be dict, list, string, etc.)

        Returns:
            Sanitized data safe for logging
        """
        if isinstance(data, dict):
            sensitive_keys = {
                'token', 'password', 'secret', 'credential', 'authorization'
            }
            return {
                k: '***REDACTED***' if any(s in k.lower() for s in sensitive_keys) else InputValidator.sanitize_for_logging(v)
                for k, v in data.items()
            }
        elif isinstance(data, (list, tuple)):
            return [InputValidator.sanitize_for_logging(item) for item in data]
        elif isinstance(data, str):
            # File bodies can be large; keep log lines readable
            if len(data) > 200:
                return data[:200] + '...'
            return data
        else:
            return data


# Convenience functions
def sanitize_for_logging(data: Any) -> Any:
    """Sanitize data for logging."""
    return InputValidator.sanitize_for_logging(data)
