"""Tests for server wiring and tool response payloads."""

import unittest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from github_mcp_server.exceptions import ValidationError, create_github_error
from github_mcp_server.models import Label, Model
from github_mcp_server.server import GitHubMCPServer
from github_mcp_server.tools.responses import error_response, execute_tool, serialize


EXPECTED_TOOLS = {
    "search_repositories",
    "create_repository",
    "fork_repository",
    "create_branch",
    "list_tags",
    "get_file_contents",
    "create_or_update_file",
    "push_files",
    "create_issue",
    "get_issue",
    "list_issues",
    "update_issue",
    "add_issue_comment",
    "list_commits",
    "search_code",
    "search_issues",
    "search_users",
}


def make_config(**overrides):
    values = dict(
        github_token="ghp_test",
        github_api_url="https://api.github.com",
        request_timeout=30,
        default_per_page=30,
        server_name="github",
        log_level="INFO",
    )
    values.update(overrides)
    return SimpleNamespace(**values)


class TestGitHubMCPServer(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.client = MagicMock()
        self.server = GitHubMCPServer(config=make_config(default_per_page=40), client=self.client)

    async def test_registers_all_tools(self):
        tools = await self.server.mcp.list_tools()
        self.assertEqual({tool.name for tool in tools}, EXPECTED_TOOLS)

    def test_services_share_client_and_page_size(self):
        for name, service in self.server.services.items():
            with self.subTest(service=name):
                self.assertIs(service.client, self.client)
        self.assertEqual(self.server.services["issue"].default_per_page, 40)

    def test_client_built_from_config(self):
        server = GitHubMCPServer(config=make_config(request_timeout=5))
        self.assertEqual(server.client.timeout, 5)
        self.assertEqual(server.client.base_url, "https://api.github.com")


class TestToolResponses(unittest.IsolatedAsyncioTestCase):

    async def test_success_payload_serializes_models(self):
        operation = AsyncMock(return_value=[Label(name="bug")])

        response = await execute_tool("list_labels", operation, owner="octocat")

        operation.assert_awaited_once_with(owner="octocat")
        self.assertTrue(response["success"])
        self.assertEqual(response["data"][0]["name"], "bug")

    async def test_plain_values_pass_through(self):
        response = await execute_tool("list_tags", AsyncMock(return_value=["v1", "v2"]))
        self.assertEqual(response, {"success": True, "data": ["v1", "v2"]})

    async def test_validation_error_payload(self):
        operation = AsyncMock(side_effect=ValidationError("query is required", field="query"))

        response = await execute_tool("search_code", operation, query="")

        self.assertFalse(response["success"])
        self.assertEqual(response["error"], "query is required")
        self.assertEqual(response["error_type"], "ValidationError")
        self.assertEqual(response["details"], {"field": "query"})

    async def test_github_error_payload(self):
        error = create_github_error(404, {"message": "Not Found"}, step="getting commit")
        response = await execute_tool("push_files", AsyncMock(side_effect=error))

        self.assertFalse(response["success"])
        self.assertEqual(response["error"], "error getting commit: Not Found: Not Found")
        self.assertEqual(response["error_type"], "GitHubAPIError")
        self.assertEqual(response["error_kind"], "not_found")
        self.assertEqual(response["details"]["status"], 404)

    async def test_unexpected_error_payload(self):
        response = await execute_tool("get_issue", AsyncMock(side_effect=RuntimeError("boom")))

        self.assertFalse(response["success"])
        self.assertEqual(response["error"], "Unexpected error: boom")
        self.assertEqual(response["error_type"], "RuntimeError")

    def test_serialize(self):
        self.assertIsInstance(Label(name="a"), Model)
        self.assertTrue(serialize(True))
        self.assertEqual(serialize((Label(name="a"),))[0]["name"], "a")
        self.assertEqual(error_response(KeyError("x"))["error_type"], "KeyError")


if __name__ == "__main__":
    unittest.main()
