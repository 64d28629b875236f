"""Tests for branch creation, branch existence and tag listing."""

import unittest
from unittest.mock import MagicMock, call

from github_mcp_server.exceptions import GitHubAPIError, GitHubErrorKind, ValidationError, create_github_error
from github_mcp_server.services.branch_service import BranchService


def branch_payload(name: str, sha: str) -> dict:
    return {"name": name, "commit": {"sha": sha, "url": f"https://api.github.com/commits/{sha}"}, "protected": False}


def tag_ref(name: str) -> dict:
    return {"ref": f"refs/tags/{name}", "object": {"sha": f"sha-{name}", "type": "commit"}}


class TestCreateBranch(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.client = MagicMock()
        self.service = BranchService(self.client)

    async def test_creates_from_source_head(self):
        self.client.request.side_effect = [
            branch_payload("main", "abc123"),
            {"ref": "refs/heads/feature/x", "object": {"sha": "abc123"}},
            branch_payload("feature/x", "abc123"),
        ]

        branch = await self.service.create_branch("octocat", "hello", "feature/x", "main")

        self.assertEqual(branch.name, "feature/x")
        self.assertEqual(branch.commit.sha, "abc123")
        self.assertEqual(self.client.request.call_args_list, [
            call("GET", "/repos/octocat/hello/branches/main", step="getting source branch"),
            call(
                "POST",
                "/repos/octocat/hello/git/refs",
                body={"ref": "refs/heads/feature/x", "sha": "abc123"},
                step="creating branch",
            ),
            call("GET", "/repos/octocat/hello/branches/feature/x", step="verifying new branch"),
        ])

    async def test_existing_branch_conflict(self):
        self.client.request.side_effect = [
            branch_payload("main", "abc123"),
            create_github_error(422, {"message": "Reference already exists"}, step="creating branch"),
        ]

        with self.assertRaises(GitHubAPIError) as ctx:
            await self.service.create_branch("octocat", "hello", "dev", "main")
        self.assertEqual(ctx.exception.kind, GitHubErrorKind.VALIDATION)
        self.assertEqual(ctx.exception.step, "creating branch")

    async def test_invalid_names(self):
        with self.assertRaises(ValidationError) as ctx:
            await self.service.create_branch("octocat", "hello", "dev", "ma..in")
        self.assertEqual(ctx.exception.field, "from_branch")
        self.client.request.assert_not_called()


class TestCheckBranchExists(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.client = MagicMock()
        self.service = BranchService(self.client)

    async def test_exists(self):
        self.client.request.return_value = branch_payload("main", "abc")
        self.assertTrue(await self.service.check_branch_exists("octocat", "hello", "main"))

    async def test_not_found_is_false(self):
        self.client.request.side_effect = create_github_error(404, {"message": "Branch not found"})
        self.assertFalse(await self.service.check_branch_exists("octocat", "hello", "gone"))

    async def test_other_errors_propagate(self):
        self.client.request.side_effect = create_github_error(401, {"message": "Bad credentials"})
        with self.assertRaises(GitHubAPIError) as ctx:
            await self.service.check_branch_exists("octocat", "hello", "main")
        self.assertEqual(ctx.exception.kind, GitHubErrorKind.AUTHENTICATION)


class TestListTags(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.client = MagicMock()
        self.service = BranchService(self.client, default_per_page=30)
        self.client.request.return_value = [tag_ref("v1.0.0"), tag_ref("V2.0.0-beta"), tag_ref("nightly")]

    async def test_lists_names(self):
        tags = await self.service.list_tags("octocat", "hello")

        self.assertEqual(tags, ["v1.0.0", "V2.0.0-beta", "nightly"])
        self.client.request.assert_called_once_with(
            "GET", "/repos/octocat/hello/git/refs/tags", params={"page": 1, "per_page": 30}
        )

    async def test_case_insensitive_filter(self):
        tags = await self.service.list_tags("octocat", "hello", search="v", page=2, per_page=10)

        self.assertEqual(tags, ["v1.0.0", "V2.0.0-beta"])
        self.assertEqual(self.client.request.call_args.kwargs["params"], {"page": 2, "per_page": 10})

    async def test_not_found_propagates(self):
        self.client.request.side_effect = create_github_error(404, {"message": "Not Found"})
        with self.assertRaises(GitHubAPIError):
            await self.service.list_tags("octocat", "empty")


if __name__ == "__main__":
    unittest.main()
