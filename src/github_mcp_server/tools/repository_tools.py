"""
Repository tools for the GitHub MCP Server.

MCP tools for searching, creating and forking repositories.
"""

from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from ..services.repository_service import RepositoryService
from .responses import execute_tool


def register_repository_tools(mcp: FastMCP, repository_service: RepositoryService) -> None:
    """
    Register repository tools with the MCP server.

    Args:
        mcp: FastMCP server instance
        repository_service: Repository service instance
    """

    @mcp.tool()
    async def search_repositories(
        query: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Search for GitHub repositories.

        Args:
            query: Search query using GitHub search syntax (e.g. 'language:python stars:>100')
            page: Page number for pagination (default 1)
            per_page: Number of results per page (default 30, max 100)

        Returns:
            total_count, incomplete_results and the matching repositories
        """
        return await execute_tool(
            "search_repositories",
            repository_service.search_repositories,
            query=query,
            page=page,
            per_page=per_page,
        )

    @mcp.tool()
    async def create_repository(
        name: str,
        description: Optional[str] = None,
        private: bool = False,
        auto_init: bool = False
    ) -> Dict[str, Any]:
        """
        Create a new GitHub repository in your account.

        Args:
            name: Repository name
            description: Repository description
            private: Whether the repository should be private
            auto_init: Initialize the repository with a README
        """
        return await execute_tool(
            "create_repository",
            repository_service.create_repository,
            name=name,
            description=description,
            private=private,
            auto_init=auto_init,
        )

    @mcp.tool()
    async def fork_repository(
        owner: str,
        repo: str,
        organization: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Fork a GitHub repository to your account or a specified organization.

        Args:
            owner: Repository owner (username or organization)
            repo: Repository name
            organization: Organization to fork into; defaults to your account
        """
        return await execute_tool(
            "fork_repository",
            repository_service.fork_repository,
            owner=owner,
            repo=repo,
            organization=organization,
        )
