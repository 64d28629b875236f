"""
Branch and tag tools for the GitHub MCP Server.
"""

from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from ..services.branch_service import BranchService
from .responses import execute_tool


def register_branch_tools(mcp: FastMCP, branch_service: BranchService) -> None:
    """Register branch and tag tools with the MCP server."""

    @mcp.tool()
    async def create_branch(owner: str, repo: str, branch: str, from_branch: str) -> Dict[str, Any]:
        """
        Create a new branch in a GitHub repository.

        Args:
            owner: Repository owner (username or organization)
            repo: Repository name
            branch: Name for the new branch
            from_branch: Source branch to create the new branch from
        """
        return await execute_tool(
            "create_branch",
            branch_service.create_branch,
            owner=owner,
            repo=repo,
            branch=branch,
            from_branch=from_branch,
        )

    @mcp.tool()
    async def list_tags(
        owner: str,
        repo: str,
        search: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        List tag names of a repository.

        Args:
            owner: Repository owner
            repo: Repository name
            search: Case-insensitive substring to filter tag names on the fetched page
            page: Page number for pagination (default 1)
            per_page: Number of results per page (default 30, max 100)
        """
        return await execute_tool(
            "list_tags",
            branch_service.list_tags,
            owner=owner,
            repo=repo,
            search=search,
            page=page,
            per_page=per_page,
        )
