"""
Configuration constants for the GitHub MCP Server.

This module centralizes API values and limits so services and tools share
a single definition.
"""

from dataclasses import dataclass


VERSION = "1.0.0"
USER_AGENT = f"github-mcp-server/{VERSION}"


@dataclass(frozen=True)
class APIConstants:
    """Constants for talking to the GitHub REST API."""

    BASE_URL: str = "https://api.github.com"
    DEFAULT_TIMEOUT: int = 30  # seconds

    # Environment variable names for the bearer token, in lookup order
    TOKEN_ENV_VAR: str = "GITHUB_PERSONAL_ACCESS_TOKEN"
    TOKEN_ENV_VAR_FALLBACK: str = "GITHUB_TOKEN"


@dataclass(frozen=True)
class PaginationConstants:
    """Constants for paginated list and search endpoints."""

    DEFAULT_PAGE: int = 1
    DEFAULT_PER_PAGE: int = 30
    MAX_PER_PAGE: int = 100


@dataclass(frozen=True)
class GitConstants:
    """Constants for Git data (tree/commit/ref) operations."""

    BLOB_MODE: str = "100644"
    BLOB_TYPE: str = "blob"
    HEADS_PREFIX: str = "heads/"
    REF_TAGS_PREFIX: str = "refs/tags/"


# Create singleton instances
API = APIConstants()
PAGINATION = PaginationConstants()
GIT = GitConstants()


ISSUE_STATES = ("open", "closed", "all")
ISSUE_UPDATE_STATES = ("open", "closed")
ISSUE_SORTS = ("created", "updated", "comments")
SORT_DIRECTIONS = ("asc", "desc")
