"""
Branch service for the GitHub MCP Server.

Creates branches from existing ones, checks branch existence and lists tag
names from the repository's ``refs/tags`` namespace.
"""

import asyncio
from loguru import logger
from typing import List, Optional

from ..client import GitHubClient, encode_path
from ..constants import GIT, PAGINATION
from ..exceptions import GitHubAPIError, is_not_found
from ..models import Branch, GitRef, parse_list
from ..validation import InputValidator


class BranchService:
    """Service for branch and tag operations."""

    def __init__(self, client: GitHubClient, default_per_page: int = PAGINATION.DEFAULT_PER_PAGE):
        self.client = client
        self.default_per_page = default_per_page

    async def create_branch(self, owner: str, repo: str, branch: str, from_branch: str) -> Branch:
        """
        Create ``branch`` pointing at the head commit of ``from_branch``.

        Args:
            owner: Repository owner
            repo: Repository name
            branch: Name of the branch to create
            from_branch: Existing branch to start from

        Returns:
            The newly created branch, as read back from GitHub

        Raises:
            ValidationError: If any name is invalid
            GitHubAPIError: If a step fails; ``step`` names which one
        """
        InputValidator.validate_repo_ref(owner, repo)
        InputValidator.validate_branch_name(branch)
        InputValidator.validate_branch_name(from_branch, field="from_branch")

        logger.info(f"Creating branch {branch} from {from_branch} in {owner}/{repo}")
        return await asyncio.to_thread(self._create_branch_sync, owner, repo, branch, from_branch)

    def _create_branch_sync(self, owner: str, repo: str, branch: str, from_branch: str) -> Branch:
        """Synchronous branch creation for thread pool execution."""
        source_data = self.client.request(
            "GET",
            f"/repos/{owner}/{repo}/branches/{encode_path(from_branch)}",
            step="getting source branch",
        )
        source = Branch.from_dict(source_data)

        self.client.request(
            "POST",
            f"/repos/{owner}/{repo}/git/refs",
            body={"ref": f"refs/heads/{branch}", "sha": source.commit.sha},
            step="creating branch",
        )

        # Read the branch back so callers get the same shape as the source branch
        branch_data = self.client.request(
            "GET",
            f"/repos/{owner}/{repo}/branches/{encode_path(branch)}",
            step="verifying new branch",
        )
        return Branch.from_dict(branch_data)

    async def check_branch_exists(self, owner: str, repo: str, branch: str) -> bool:
        """
        Check whether a branch exists.

        Returns:
            False when GitHub answers 404, True otherwise

        Raises:
            GitHubAPIError: For any failure other than 404
        """
        InputValidator.validate_repo_ref(owner, repo)
        InputValidator.validate_branch_name(branch)
        try:
            await asyncio.to_thread(
                self.client.request,
                "GET",
                f"/repos/{owner}/{repo}/branches/{encode_path(branch)}",
            )
        except GitHubAPIError as e:
            if is_not_found(e):
                return False
            raise
        return True

    async def list_tags(
        self,
        owner: str,
        repo: str,
        search: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> List[str]:
        """
        List tag names, optionally filtered by a case-insensitive substring.

        The filter applies to the fetched page only.
        """
        InputValidator.validate_repo_ref(owner, repo)
        page, per_page = InputValidator.normalize_pagination(page, per_page, self.default_per_page)

        data = await asyncio.to_thread(
            self.client.request,
            "GET",
            f"/repos/{owner}/{repo}/git/refs/tags",
            params={"page": page, "per_page": per_page},
        )
        refs = parse_list(data, GitRef.from_dict, "tag refs")

        tags = [ref.short_name(GIT.REF_TAGS_PREFIX) for ref in refs]
        if search:
            needle = search.lower()
            tags = [tag for tag in tags if needle in tag.lower()]
        logger.debug(f"Found {len(tags)} tags in {owner}/{repo}")
        return tags
