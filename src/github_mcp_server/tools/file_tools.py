"""
File tools for the GitHub MCP Server.

Reading file contents, single-file writes and multi-file commits.
"""

from typing import Any, Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from ..services.file_service import FileService
from .responses import execute_tool


def register_file_tools(mcp: FastMCP, file_service: FileService) -> None:
    """
    Register file tools with the MCP server.

    Args:
        mcp: FastMCP server instance
        file_service: File service instance
    """

    @mcp.tool()
    async def get_file_contents(
        owner: str,
        repo: str,
        path: str,
        ref: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Get the contents of a file or directory from a GitHub repository.

        Text files are returned decoded; binary files keep their base64 content.

        Args:
            owner: Repository owner (username or organization)
            repo: Repository name
            path: Path to the file or directory
            ref: Branch, tag or commit SHA to read from
        """
        return await execute_tool(
            "get_file_contents",
            file_service.get_file_contents,
            owner=owner,
            repo=repo,
            path=path,
            ref=ref,
        )

    @mcp.tool()
    async def create_or_update_file(
        owner: str,
        repo: str,
        path: str,
        content: str,
        message: str,
        branch: Optional[str] = None,
        sha: Optional[str] = None,
        committer: Optional[Dict[str, str]] = None,
        author: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """
        Create or update a single file in a GitHub repository.

        Args:
            owner: Repository owner (username or organization)
            repo: Repository name
            path: Path where to create/update the file
            content: File content as plain text
            message: Commit message
            branch: Branch to write to; defaults to the default branch
            sha: SHA of the file being replaced; looked up when omitted
            committer: Optional {"name", "email"} of the committer
            author: Optional {"name", "email"} of the author
        """
        return await execute_tool(
            "create_or_update_file",
            file_service.create_or_update_file,
            owner=owner,
            repo=repo,
            path=path,
            message=message,
            content=content,
            branch=branch,
            sha=sha,
            committer=committer,
            author=author,
        )

    @mcp.tool()
    async def push_files(
        owner: str,
        repo: str,
        branch: str,
        files: List[Dict[str, Any]],
        message: str,
        base_sha: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Push multiple files to a GitHub repository in a single commit.

        Args:
            owner: Repository owner (username or organization)
            repo: Repository name
            branch: Branch to push to
            files: Entries of {"path", "content"}; set "delete": true to remove a path
            message: Commit message
            base_sha: Commit to build on; defaults to the branch head
        """
        return await execute_tool(
            "push_files",
            file_service.push_files,
            owner=owner,
            repo=repo,
            branch=branch,
            message=message,
            files=files,
            base_sha=base_sha,
        )
