"""
Issue tools for the GitHub MCP Server.
"""

from typing import Any, Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from ..services.issue_service import IssueService
from .responses import execute_tool


def register_issue_tools(mcp: FastMCP, issue_service: IssueService) -> None:
    """Register issue tools with the MCP server."""

    @mcp.tool()
    async def create_issue(
        owner: str,
        repo: str,
        title: str,
        body: Optional[str] = None,
        assignees: Optional[List[str]] = None,
        labels: Optional[List[str]] = None
    ) -> Dict[str, Any]:
        """
        Create a new issue in a GitHub repository.

        Args:
            owner: Repository owner
            repo: Repository name
            title: Issue title
            body: Issue body in Markdown
            assignees: Usernames to assign
            labels: Label names to apply
        """
        return await execute_tool(
            "create_issue",
            issue_service.create_issue,
            owner=owner,
            repo=repo,
            title=title,
            body=body,
            assignees=assignees,
            labels=labels,
        )

    @mcp.tool()
    async def get_issue(owner: str, repo: str, number: int) -> Dict[str, Any]:
        """Get details of a specific issue in a GitHub repository."""
        return await execute_tool(
            "get_issue",
            issue_service.get_issue,
            owner=owner,
            repo=repo,
            number=number,
        )

    @mcp.tool()
    async def list_issues(
        owner: str,
        repo: str,
        state: Optional[str] = None,
        sort: Optional[str] = None,
        direction: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        List issues in a GitHub repository.

        Args:
            owner: Repository owner
            repo: Repository name
            state: 'open', 'closed' or 'all'
            sort: 'created', 'updated' or 'comments'
            direction: 'asc' or 'desc'
            page: Page number for pagination (default 1)
            per_page: Number of results per page (default 30, max 100)
        """
        return await execute_tool(
            "list_issues",
            issue_service.list_issues,
            owner=owner,
            repo=repo,
            state=state,
            sort=sort,
            direction=direction,
            page=page,
            per_page=per_page,
        )

    @mcp.tool()
    async def update_issue(
        owner: str,
        repo: str,
        number: int,
        title: Optional[str] = None,
        body: Optional[str] = None,
        state: Optional[str] = None,
        assignees: Optional[List[str]] = None,
        labels: Optional[List[str]] = None
    ) -> Dict[str, Any]:
        """
        Update an existing issue. Only the given fields change.

        Args:
            owner: Repository owner
            repo: Repository name
            number: Issue number to update
            title: New title
            body: New body
            state: 'open' or 'closed'
            assignees: Replacement list of assignees; an empty list clears them
            labels: Replacement list of labels; an empty list clears them
        """
        return await execute_tool(
            "update_issue",
            issue_service.update_issue,
            owner=owner,
            repo=repo,
            number=number,
            title=title,
            body=body,
            state=state,
            assignees=assignees,
            labels=labels,
        )

    @mcp.tool()
    async def add_issue_comment(owner: str, repo: str, number: int, body: str) -> Dict[str, Any]:
        """Add a comment to an existing issue."""
        return await execute_tool(
            "add_issue_comment",
            issue_service.add_issue_comment,
            owner=owner,
            repo=repo,
            number=number,
            body=body,
        )
