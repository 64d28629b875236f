"""
Service layer for the GitHub MCP Server.

Each service validates its input, issues the GitHub API calls for one
family of operations and maps the responses into typed models.
"""

from .repository_service import RepositoryService
from .branch_service import BranchService
from .file_service import FileService
from .issue_service import IssueService
from .commit_service import CommitService
from .search_service import SearchService

__all__ = [
    "RepositoryService",
    "BranchService",
    "FileService",
    "IssueService",
    "CommitService",
    "SearchService",
]
