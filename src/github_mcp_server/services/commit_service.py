"""
Commit service for the GitHub MCP Server.

Lists commits on a branch with optional path and date filters.
"""

import asyncio
from loguru import logger
from typing import List, Optional

from ..client import GitHubClient
from ..constants import PAGINATION
from ..models import Commit, parse_list
from ..validation import InputValidator


class CommitService:
    """Service for commit history operations."""

    def __init__(self, client: GitHubClient, default_per_page: int = PAGINATION.DEFAULT_PER_PAGE):
        self.client = client
        self.default_per_page = default_per_page

    async def list_commits(
        self,
        owner: str,
        repo: str,
        branch: Optional[str] = None,
        path: Optional[str] = None,
        since: Optional[str] = None,
        until: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> List[Commit]:
        """
        List commits, newest first.

        Args:
            owner: Repository owner
            repo: Repository name
            branch: Branch name to list from; defaults to the default branch
            path: Only commits touching this path
            since: Only commits after this ISO 8601 timestamp
            until: Only commits before this ISO 8601 timestamp
            page: Page number, 1-based
            per_page: Results per page (1-100)

        Raises:
            ValidationError: If a parameter is invalid
            GitHubAPIError: If the request fails
        """
        InputValidator.validate_repo_ref(owner, repo)
        if branch:
            InputValidator.validate_branch_name(branch)
        InputValidator.validate_timestamp(since, "since")
        InputValidator.validate_timestamp(until, "until")
        page, per_page = InputValidator.normalize_pagination(page, per_page, self.default_per_page)

        logger.info(f"Listing commits for {owner}/{repo}" + (f"@{branch}" if branch else ""))
        data = await asyncio.to_thread(
            self.client.request,
            "GET",
            f"/repos/{owner}/{repo}/commits",
            params={
                "sha": branch,
                "path": path,
                "since": since,
                "until": until,
                "page": page,
                "per_page": per_page,
            },
        )
        return parse_list(data, Commit.from_dict, "commits")
