"""Tests for parsing GitHub payloads into models."""

import unittest

from github_mcp_server.exceptions import MalformedResponseError, ValidationError
from github_mcp_server.models import (
    Branch,
    Commit,
    CommitterInfo,
    GitRef,
    GitHubUser,
    Issue,
    PushFileEntry,
    Repository,
    SearchResult,
    parse_list,
)


USER = {"login": "octocat", "id": 1, "type": "User"}

REPOSITORY = {
    "id": 1296269,
    "name": "Hello-World",
    "full_name": "octocat/Hello-World",
    "owner": USER,
    "private": False,
    "default_branch": "main",
    "stargazers_count": 80,
}


class TestResourceModels(unittest.TestCase):

    def test_repository_round_trip_to_dict(self):
        repo = Repository.from_dict(REPOSITORY)
        self.assertEqual(repo.full_name, "octocat/Hello-World")
        self.assertEqual(repo.owner.login, "octocat")
        self.assertIsNone(repo.parent)

        data = repo.to_dict()
        self.assertEqual(data["owner"]["login"], "octocat")
        self.assertEqual(data["stargazers_count"], 80)

    def test_fork_keeps_parent(self):
        fork = Repository.from_dict(dict(REPOSITORY, id=2, fork=True, parent=REPOSITORY))
        self.assertTrue(fork.fork)
        self.assertEqual(fork.parent.id, 1296269)

    def test_missing_required_field(self):
        payload = dict(REPOSITORY)
        del payload["full_name"]
        with self.assertRaises(MalformedResponseError) as ctx:
            Repository.from_dict(payload)
        self.assertEqual(ctx.exception.details["field"], "full_name")

    def test_wrong_shape(self):
        with self.assertRaises(MalformedResponseError):
            GitHubUser.from_dict(["octocat"])
        with self.assertRaises(MalformedResponseError):
            parse_list({"items": []}, Issue.from_dict, "issues")

    def test_issue_and_pull_request(self):
        issue = Issue.from_dict({
            "number": 5,
            "title": "Bug",
            "state": "open",
            "labels": [{"name": "bug"}],
            "assignees": [USER],
        })
        self.assertEqual(issue.labels[0].name, "bug")
        self.assertEqual(issue.assignees[0].login, "octocat")
        self.assertFalse(issue.is_pull_request)

        pr = Issue.from_dict({"number": 6, "title": "PR", "state": "open", "pull_request": {"url": "u"}})
        self.assertTrue(pr.is_pull_request)

    def test_branch_and_ref(self):
        branch = Branch.from_dict({"name": "main", "commit": {"sha": "abc"}, "protected": True})
        self.assertEqual(branch.commit.sha, "abc")
        self.assertTrue(branch.protected)

        ref = GitRef.from_dict({"ref": "refs/tags/v1.0", "object": {"sha": "def", "type": "commit"}})
        self.assertEqual(ref.short_name("refs/tags/"), "v1.0")
        self.assertEqual(ref.sha, "def")

    def test_commit(self):
        commit = Commit.from_dict({
            "sha": "abc",
            "commit": {"message": "Initial", "author": {"name": "Octo", "email": "o@example.com"}},
            "parents": [{"sha": "000"}],
        })
        self.assertEqual(commit.commit.message, "Initial")
        self.assertEqual(commit.commit.author.name, "Octo")
        self.assertEqual(commit.parents[0].sha, "000")

    def test_search_result(self):
        result = SearchResult.from_dict(
            {"total_count": 1, "incomplete_results": False, "items": [USER]},
            GitHubUser.from_dict,
        )
        self.assertEqual(result.total_count, 1)
        self.assertEqual(result.items[0].login, "octocat")
        self.assertEqual(result.to_dict()["items"][0]["login"], "octocat")

    def test_search_result_requires_total(self):
        with self.assertRaises(MalformedResponseError):
            SearchResult.from_dict({"items": []}, GitHubUser.from_dict)


class TestInputModels(unittest.TestCase):

    def test_committer_info(self):
        self.assertIsNone(CommitterInfo.from_input(None, "author"))
        info = CommitterInfo.from_input({"name": "Octo", "email": "o@example.com"}, "author")
        self.assertEqual(info.to_dict(), {"name": "Octo", "email": "o@example.com"})
        with self.assertRaises(ValidationError) as ctx:
            CommitterInfo.from_input({"name": "Octo"}, "committer")
        self.assertEqual(ctx.exception.field, "committer")

    def test_push_file_entry(self):
        entry = PushFileEntry.from_input({"path": "a.txt", "content": "hi"}, 0)
        self.assertEqual(entry, PushFileEntry(path="a.txt", content="hi"))

        deleted = PushFileEntry.from_input({"path": "old.txt", "delete": True}, 1)
        self.assertTrue(deleted.delete)
        self.assertIsNone(deleted.content)

    def test_push_file_entry_errors(self):
        with self.assertRaises(ValidationError) as ctx:
            PushFileEntry.from_input({"content": "hi"}, 2)
        self.assertEqual(ctx.exception.message, "path is required for file at index 2")

        with self.assertRaises(ValidationError) as ctx:
            PushFileEntry.from_input({"path": "a.txt"}, 0)
        self.assertIn("content is required", ctx.exception.message)

        with self.assertRaises(ValidationError):
            PushFileEntry.from_input("a.txt", 0)


if __name__ == "__main__":
    unittest.main()
