"""
GitHub MCP Server

A Model Context Protocol server exposing GitHub repository, branch, file,
issue, commit and search operations as tools.
"""

from .constants import VERSION

__version__ = VERSION

from .server import GitHubMCPServer
from .config import Config
from .client import GitHubClient
from .exceptions import (
    GitHubMCPError,
    ConfigurationError,
    ValidationError,
    MalformedResponseError,
    GitHubAPIError,
    GitHubErrorKind,
)

__all__ = [
    # Core
    "GitHubMCPServer",
    "Config",
    "GitHubClient",
    # Exceptions
    "GitHubMCPError",
    "ConfigurationError",
    "ValidationError",
    "MalformedResponseError",
    "GitHubAPIError",
    "GitHubErrorKind",
]
