"""
Issue service for the GitHub MCP Server.

Creates, reads, lists and updates issues and adds issue comments.
"""

import asyncio
from loguru import logger
from typing import Any, Dict, List, Optional

from ..client import GitHubClient
from ..constants import ISSUE_SORTS, ISSUE_STATES, ISSUE_UPDATE_STATES, PAGINATION, SORT_DIRECTIONS
from ..models import Issue, IssueComment, parse_list
from ..validation import InputValidator


class IssueService:
    """Service for GitHub issue operations."""

    def __init__(self, client: GitHubClient, default_per_page: int = PAGINATION.DEFAULT_PER_PAGE):
        self.client = client
        self.default_per_page = default_per_page

    async def create_issue(
        self,
        owner: str,
        repo: str,
        title: str,
        body: Optional[str] = None,
        assignees: Optional[List[str]] = None,
        labels: Optional[List[str]] = None
    ) -> Issue:
        """
        Create an issue.

        Raises:
            ValidationError: If owner, repo or title is invalid
            GitHubAPIError: If creation fails
        """
        InputValidator.validate_repo_ref(owner, repo)
        InputValidator.validate_required(title, "title is required", "title")

        payload: Dict[str, Any] = {"title": title, "body": body or ""}
        if assignees:
            payload["assignees"] = assignees
        if labels:
            payload["labels"] = labels

        logger.info(f"Creating issue in {owner}/{repo}: {title!r}")
        data = await asyncio.to_thread(
            self.client.request, "POST", f"/repos/{owner}/{repo}/issues", body=payload
        )
        issue = Issue.from_dict(data)
        logger.info(f"Created issue #{issue.number} in {owner}/{repo}")
        return issue

    async def get_issue(self, owner: str, repo: str, number: int) -> Issue:
        """Get a single issue by number."""
        InputValidator.validate_repo_ref(owner, repo)
        InputValidator.validate_issue_number(number)

        data = await asyncio.to_thread(
            self.client.request, "GET", f"/repos/{owner}/{repo}/issues/{number}"
        )
        return Issue.from_dict(data)

    async def list_issues(
        self,
        owner: str,
        repo: str,
        state: Optional[str] = None,
        sort: Optional[str] = None,
        direction: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> List[Issue]:
        """
        List issues with optional state, sort and direction filters.

        Raises:
            ValidationError: If a filter value is not one GitHub accepts
            GitHubAPIError: If the request fails
        """
        InputValidator.validate_repo_ref(owner, repo)
        state = InputValidator.validate_choice(state, ISSUE_STATES, "state")
        sort = InputValidator.validate_choice(sort, ISSUE_SORTS, "sort")
        direction = InputValidator.validate_choice(direction, SORT_DIRECTIONS, "direction")
        page, per_page = InputValidator.normalize_pagination(page, per_page, self.default_per_page)

        data = await asyncio.to_thread(
            self.client.request,
            "GET",
            f"/repos/{owner}/{repo}/issues",
            params={
                "state": state,
                "sort": sort,
                "direction": direction,
                "page": page,
                "per_page": per_page,
            },
        )
        return parse_list(data, Issue.from_dict, "issues")

    async def update_issue(
        self,
        owner: str,
        repo: str,
        number: int,
        title: Optional[str] = None,
        body: Optional[str] = None,
        state: Optional[str] = None,
        assignees: Optional[List[str]] = None,
        labels: Optional[List[str]] = None
    ) -> Issue:
        """
        Update an issue. Only given fields are sent.

        An empty ``assignees`` or ``labels`` list clears them; None leaves
        them untouched.
        """
        InputValidator.validate_repo_ref(owner, repo)
        InputValidator.validate_issue_number(number)
        state = InputValidator.validate_choice(state, ISSUE_UPDATE_STATES, "state")

        payload: Dict[str, Any] = {}
        if title:
            payload["title"] = title
        if body:
            payload["body"] = body
        if state:
            payload["state"] = state
        if assignees is not None:
            payload["assignees"] = assignees
        if labels is not None:
            payload["labels"] = labels

        logger.info(f"Updating issue #{number} in {owner}/{repo}: {sorted(payload)}")
        data = await asyncio.to_thread(
            self.client.request, "PATCH", f"/repos/{owner}/{repo}/issues/{number}", body=payload
        )
        return Issue.from_dict(data)

    async def add_issue_comment(self, owner: str, repo: str, number: int, body: str) -> IssueComment:
        """Add a comment to an issue."""
        InputValidator.validate_repo_ref(owner, repo)
        InputValidator.validate_issue_number(number)
        InputValidator.validate_required(body, "comment body is required", "body")

        data = await asyncio.to_thread(
            self.client.request,
            "POST",
            f"/repos/{owner}/{repo}/issues/{number}/comments",
            body={"body": body},
        )
        return IssueComment.from_dict(data)
