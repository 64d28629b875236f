"""Tests for issue operations."""

import unittest
from unittest.mock import MagicMock

from github_mcp_server.exceptions import ValidationError
from github_mcp_server.services.issue_service import IssueService


ISSUE = {"number": 7, "title": "Crash on start", "state": "open", "body": "Steps..."}


class TestIssueService(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.client = MagicMock()
        self.service = IssueService(self.client)

    async def test_create_issue(self):
        self.client.request.return_value = ISSUE

        issue = await self.service.create_issue(
            "octocat", "hello", "Crash on start", assignees=["octocat"], labels=[]
        )

        self.assertEqual(issue.number, 7)
        self.client.request.assert_called_once_with(
            "POST",
            "/repos/octocat/hello/issues",
            body={"title": "Crash on start", "body": "", "assignees": ["octocat"]},
        )

    async def test_create_issue_requires_title(self):
        with self.assertRaises(ValidationError) as ctx:
            await self.service.create_issue("octocat", "hello", "")
        self.assertEqual(ctx.exception.message, "title is required")
        self.client.request.assert_not_called()

    async def test_get_issue(self):
        self.client.request.return_value = ISSUE
        issue = await self.service.get_issue("octocat", "hello", 7)
        self.assertEqual(issue.title, "Crash on start")
        self.client.request.assert_called_once_with("GET", "/repos/octocat/hello/issues/7")

    async def test_get_issue_rejects_bad_number(self):
        with self.assertRaises(ValidationError):
            await self.service.get_issue("octocat", "hello", 0)

    async def test_list_issues(self):
        self.client.request.return_value = [ISSUE, dict(ISSUE, number=8)]

        issues = await self.service.list_issues("octocat", "hello", state="all", direction="asc")

        self.assertEqual([i.number for i in issues], [7, 8])
        self.assertEqual(self.client.request.call_args.kwargs["params"], {
            "state": "all",
            "sort": None,
            "direction": "asc",
            "page": 1,
            "per_page": 30,
        })

    async def test_list_issues_rejects_unknown_filters(self):
        for kwargs in [{"state": "merged"}, {"sort": "stars"}, {"direction": "up"}]:
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(ValidationError):
                    await self.service.list_issues("octocat", "hello", **kwargs)
        self.client.request.assert_not_called()

    async def test_update_issue_sends_only_given_fields(self):
        self.client.request.return_value = dict(ISSUE, state="closed")

        issue = await self.service.update_issue("octocat", "hello", 7, state="closed", labels=[])

        self.assertEqual(issue.state, "closed")
        self.client.request.assert_called_once_with(
            "PATCH",
            "/repos/octocat/hello/issues/7",
            body={"state": "closed", "labels": []},
        )

    async def test_update_issue_rejects_all_state(self):
        with self.assertRaises(ValidationError):
            await self.service.update_issue("octocat", "hello", 7, state="all")

    async def test_add_issue_comment(self):
        self.client.request.return_value = {"id": 99, "body": "Thanks!"}

        comment = await self.service.add_issue_comment("octocat", "hello", 7, "Thanks!")

        self.assertEqual(comment.id, 99)
        self.client.request.assert_called_once_with(
            "POST", "/repos/octocat/hello/issues/7/comments", body={"body": "Thanks!"}
        )

    async def test_add_issue_comment_requires_body(self):
        with self.assertRaises(ValidationError) as ctx:
            await self.service.add_issue_comment("octocat", "hello", 7, "")
        self.assertEqual(ctx.exception.message, "comment body is required")


if __name__ == "__main__":
    unittest.main()
