"""
Search service for the GitHub MCP Server.

Code, issue and user search through GitHub's query-string search syntax.
"""

import asyncio
from loguru import logger
from typing import Any, Callable, Optional

from ..client import GitHubClient
from ..constants import PAGINATION
from ..models import CodeResult, GitHubUser, Issue, SearchResult
from ..validation import InputValidator


class SearchService:
    """Service for GitHub search endpoints."""

    def __init__(self, client: GitHubClient, default_per_page: int = PAGINATION.DEFAULT_PER_PAGE):
        self.client = client
        self.default_per_page = default_per_page

    async def _search(
        self,
        kind: str,
        query: str,
        page: Optional[int],
        per_page: Optional[int],
        item_parser: Callable[[Any], Any]
    ) -> SearchResult:
        InputValidator.validate_query(query)
        page, per_page = InputValidator.normalize_pagination(page, per_page, self.default_per_page)

        logger.info(f"Searching {kind}: {query!r} (page {page})")
        data = await asyncio.to_thread(
            self.client.request,
            "GET",
            f"/search/{kind}",
            params={"q": query, "page": page, "per_page": per_page},
        )
        result = SearchResult.from_dict(data, item_parser)
        logger.debug(f"Search {kind} returned {len(result.items)} of {result.total_count}")
        return result

    async def search_code(
        self,
        query: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> SearchResult[CodeResult]:
        """Search code, e.g. ``"addClass repo:jquery/jquery"``."""
        return await self._search("code", query, page, per_page, CodeResult.from_dict)

    async def search_issues(
        self,
        query: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> SearchResult[Issue]:
        """Search issues and pull requests, e.g. ``"is:issue is:open label:bug"``."""
        return await self._search("issues", query, page, per_page, Issue.from_dict)

    async def search_users(
        self,
        query: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> SearchResult[GitHubUser]:
        """Search users, e.g. ``"type:user language:go location:japan"``."""
        return await self._search("users", query, page, per_page, GitHubUser.from_dict)
