"""Tests for code, issue and user search."""

import unittest
from unittest.mock import MagicMock

from github_mcp_server.exceptions import ValidationError
from github_mcp_server.services.search_service import SearchService


class TestSearchService(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.client = MagicMock()
        self.service = SearchService(self.client)

    async def test_search_code(self):
        self.client.request.return_value = {
            "total_count": 1,
            "items": [{"name": "app.js", "path": "src/app.js", "sha": "1"}],
        }

        result = await self.service.search_code("addClass repo:jquery/jquery", per_page=10)

        self.assertEqual(result.items[0].path, "src/app.js")
        self.client.request.assert_called_once_with(
            "GET", "/search/code", params={"q": "addClass repo:jquery/jquery", "page": 1, "per_page": 10}
        )

    async def test_search_issues(self):
        self.client.request.return_value = {
            "total_count": 2,
            "incomplete_results": True,
            "items": [{"number": 1, "title": "Bug", "state": "open"}],
        }

        result = await self.service.search_issues("is:issue label:bug")

        self.assertTrue(result.incomplete_results)
        self.assertEqual(result.items[0].number, 1)
        self.assertEqual(self.client.request.call_args.args, ("GET", "/search/issues"))

    async def test_search_users(self):
        self.client.request.return_value = {"total_count": 1, "items": [{"login": "octocat", "id": 1}]}

        result = await self.service.search_users("location:japan", page=3)

        self.assertEqual(result.items[0].login, "octocat")
        self.assertEqual(self.client.request.call_args.kwargs["params"]["page"], 3)

    async def test_empty_query_makes_no_request(self):
        for search in (self.service.search_code, self.service.search_issues, self.service.search_users):
            with self.subTest(search=search.__name__):
                with self.assertRaises(ValidationError):
                    await search("")
        self.client.request.assert_not_called()


if __name__ == "__main__":
    unittest.main()
