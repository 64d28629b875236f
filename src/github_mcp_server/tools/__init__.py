"""
MCP tools for the GitHub MCP Server.

Each module registers one family of tools on a FastMCP instance.
"""

from .repository_tools import register_repository_tools
from .branch_tools import register_branch_tools
from .file_tools import register_file_tools
from .issue_tools import register_issue_tools
from .commit_tools import register_commit_tools
from .search_tools import register_search_tools

__all__ = [
    "register_repository_tools",
    "register_branch_tools",
    "register_file_tools",
    "register_issue_tools",
    "register_commit_tools",
    "register_search_tools",
]
