"""
Commit history tools for the GitHub MCP Server.
"""

from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from ..services.commit_service import CommitService
from .responses import execute_tool


def register_commit_tools(mcp: FastMCP, commit_service: CommitService) -> None:
    """Register commit tools with the MCP server."""

    @mcp.tool()
    async def list_commits(
        owner: str,
        repo: str,
        branch: Optional[str] = None,
        path: Optional[str] = None,
        since: Optional[str] = None,
        until: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        List commits of a branch in a GitHub repository.

        Args:
            owner: Repository owner
            repo: Repository name
            branch: Branch name to list commits from; defaults to the default branch
            path: Only commits containing this file path
            since: Only commits after this ISO 8601 timestamp
            until: Only commits before this ISO 8601 timestamp
            page: Page number for pagination (default 1)
            per_page: Number of results per page (default 30, max 100)
        """
        return await execute_tool(
            "list_commits",
            commit_service.list_commits,
            owner=owner,
            repo=repo,
            branch=branch,
            path=path,
            since=since,
            until=until,
            page=page,
            per_page=per_page,
        )
