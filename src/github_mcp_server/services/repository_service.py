"""
Repository service for the GitHub MCP Server.

Handles repository search, creation and forking, plus the user existence
check used by other callers.
"""

import asyncio
from loguru import logger
from typing import Optional

from ..client import GitHubClient, encode_path
from ..constants import PAGINATION
from ..exceptions import GitHubAPIError, is_not_found
from ..models import Repository, SearchResult
from ..validation import InputValidator


class RepositoryService:
    """Service for GitHub repository operations."""

    def __init__(self, client: GitHubClient, default_per_page: int = PAGINATION.DEFAULT_PER_PAGE):
        """
        Initialize repository service.

        Args:
            client: Authenticated GitHub client
            default_per_page: Page size used when the caller gives none
        """
        self.client = client
        self.default_per_page = default_per_page

    async def search_repositories(
        self,
        query: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> SearchResult[Repository]:
        """
        Search for repositories using GitHub's search syntax.

        Args:
            query: Search query (e.g. "language:python stars:>100")
            page: Page number, 1-based
            per_page: Results per page (1-100)

        Returns:
            One page of matching repositories

        Raises:
            ValidationError: If the query is empty
            GitHubAPIError: If the search fails
        """
        InputValidator.validate_query(query)
        page, per_page = InputValidator.normalize_pagination(page, per_page, self.default_per_page)

        logger.info(f"Searching repositories: {query!r} (page {page})")
        data = await asyncio.to_thread(
            self.client.request,
            "GET",
            "/search/repositories",
            params={"q": query, "page": page, "per_page": per_page},
        )
        return SearchResult.from_dict(data, Repository.from_dict)

    async def create_repository(
        self,
        name: str,
        description: Optional[str] = None,
        private: bool = False,
        auto_init: bool = False
    ) -> Repository:
        """
        Create a repository in the authenticated user's account.

        Raises:
            ValidationError: If the name is invalid
            GitHubAPIError: If creation fails (e.g. 422 when the name is taken)
        """
        InputValidator.validate_repository_name(name, field="name")

        body = {"name": name, "private": private, "auto_init": auto_init}
        if description:
            body["description"] = description

        logger.info(f"Creating repository: {name} (private={private})")
        data = await asyncio.to_thread(self.client.request, "POST", "/user/repos", body=body)
        repository = Repository.from_dict(data)
        logger.info(f"Repository created: {repository.full_name}")
        return repository

    async def fork_repository(
        self,
        owner: str,
        repo: str,
        organization: Optional[str] = None
    ) -> Repository:
        """
        Fork a repository to the authenticated user or to an organization.

        Raises:
            ValidationError: If owner, repo or organization is invalid
            GitHubAPIError: If the fork request fails
        """
        InputValidator.validate_repo_ref(owner, repo)
        body = None
        if organization:
            InputValidator.validate_owner_name(organization, field="organization")
            body = {"organization": organization}

        logger.info(f"Forking {owner}/{repo}" + (f" into {organization}" if organization else ""))
        data = await asyncio.to_thread(
            self.client.request,
            "POST",
            f"/repos/{owner}/{repo}/forks",
            body=body,
        )
        return Repository.from_dict(data)

    async def check_user_exists(self, username: str) -> bool:
        """
        Check whether a GitHub user or organization exists.

        Returns:
            False when GitHub answers 404, True otherwise

        Raises:
            GitHubAPIError: For any failure other than 404
        """
        InputValidator.validate_owner_name(username, field="username")
        try:
            await asyncio.to_thread(self.client.request, "GET", f"/users/{encode_path(username)}")
        except GitHubAPIError as e:
            if is_not_found(e):
                return False
            raise
        return True
