"""
Search tools for the GitHub MCP Server.

Code, issue and user search. Repository search lives with the
repository tools.
"""

from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from ..services.search_service import SearchService
from .responses import execute_tool


def register_search_tools(mcp: FastMCP, search_service: SearchService) -> None:
    """Register search tools with the MCP server."""

    @mcp.tool()
    async def search_code(
        query: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Search for code across GitHub repositories.

        Args:
            query: Search query using GitHub code search syntax (e.g. 'addClass repo:jquery/jquery')
            page: Page number for pagination (default 1)
            per_page: Number of results per page (default 30, max 100)
        """
        return await execute_tool(
            "search_code", search_service.search_code, query=query, page=page, per_page=per_page
        )

    @mcp.tool()
    async def search_issues(
        query: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> Dict[str, Any]:
        """Search for issues and pull requests across GitHub repositories."""
        return await execute_tool(
            "search_issues", search_service.search_issues, query=query, page=page, per_page=per_page
        )

    @mcp.tool()
    async def search_users(
        query: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> Dict[str, Any]:
        """Search for users and organizations on GitHub."""
        return await execute_tool(
            "search_users", search_service.search_users, query=query, page=page, per_page=per_page
        )
