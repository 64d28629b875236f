"""Tests for repository search, creation, forking and user lookup."""

import unittest
from unittest.mock import MagicMock

from github_mcp_server.exceptions import GitHubAPIError, ValidationError, create_github_error
from github_mcp_server.services.repository_service import RepositoryService


OWNER = {"login": "octocat", "id": 1}
REPO = {"id": 10, "name": "hello", "full_name": "octocat/hello", "owner": OWNER}


class TestRepositoryService(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.client = MagicMock()
        self.service = RepositoryService(self.client, default_per_page=25)

    async def test_search_repositories(self):
        self.client.request.return_value = {"total_count": 1, "incomplete_results": False, "items": [REPO]}

        result = await self.service.search_repositories("language:python", page=0, per_page=500)

        self.assertEqual(result.total_count, 1)
        self.assertEqual(result.items[0].full_name, "octocat/hello")
        self.client.request.assert_called_once_with(
            "GET",
            "/search/repositories",
            params={"q": "language:python", "page": 1, "per_page": 25},
        )

    async def test_search_requires_query(self):
        with self.assertRaises(ValidationError):
            await self.service.search_repositories("  ")
        self.client.request.assert_not_called()

    async def test_create_repository(self):
        self.client.request.return_value = dict(REPO, private=True)

        repo = await self.service.create_repository("hello", description="Demo", private=True, auto_init=True)

        self.assertTrue(repo.private)
        self.client.request.assert_called_once_with(
            "POST",
            "/user/repos",
            body={"name": "hello", "private": True, "auto_init": True, "description": "Demo"},
        )

    async def test_create_repository_invalid_name(self):
        with self.assertRaises(ValidationError) as ctx:
            await self.service.create_repository(".hidden")
        self.assertEqual(ctx.exception.field, "name")

    async def test_fork_to_organization(self):
        self.client.request.return_value = dict(REPO, id=11, fork=True, full_name="my-org/hello", parent=REPO)

        fork = await self.service.fork_repository("octocat", "hello", organization="my-org")

        self.assertTrue(fork.fork)
        self.assertEqual(fork.parent.full_name, "octocat/hello")
        self.client.request.assert_called_once_with(
            "POST", "/repos/octocat/hello/forks", body={"organization": "my-org"}
        )

    async def test_fork_to_user(self):
        self.client.request.return_value = dict(REPO, fork=True)
        await self.service.fork_repository("octocat", "hello")
        self.assertIsNone(self.client.request.call_args.kwargs["body"])

    async def test_check_user_exists(self):
        self.client.request.return_value = OWNER
        self.assertTrue(await self.service.check_user_exists("octocat"))

        self.client.request.side_effect = create_github_error(404, {"message": "Not Found"})
        self.assertFalse(await self.service.check_user_exists("ghost-user"))

        self.client.request.side_effect = create_github_error(500, {"message": "Server Error"})
        with self.assertRaises(GitHubAPIError):
            await self.service.check_user_exists("octocat")


if __name__ == "__main__":
    unittest.main()
