"""
File service for the GitHub MCP Server.

Reads files and directories through the contents API, writes single files,
and composes multi-file commits directly from Git data objects
(ref -> commit -> tree -> commit -> ref).
"""

import asyncio
import base64
import binascii
from contextlib import contextmanager
from dataclasses import replace
from loguru import logger
from typing import Any, Dict, Iterator, List, Optional, Sequence, Union

from ..client import GitHubClient, encode_path
from ..constants import GIT
from ..exceptions import GitHubAPIError, MalformedResponseError, ValidationError, is_not_found
from ..models import CommitterInfo, FileContent, GitCommit, GitRef, PushFileEntry, parse_list
from ..validation import InputValidator


def decode_file_content(content: FileContent) -> FileContent:
    """
    Decode a base64 file payload into text.

    Binary files that are not valid UTF-8 are returned unchanged, still
    base64 encoded.

    Raises:
        MalformedResponseError: If the payload is not valid base64
    """
    if content.encoding != "base64" or content.content is None:
        return content

    try:
        raw = base64.b64decode(content.content.replace("\n", ""), validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedResponseError(
            f"Invalid base64 content for {content.path}",
            resource="content",
            cause=e
        )

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug(f"{content.path} is binary, leaving content base64 encoded")
        return content

    return replace(content, content=text, encoding="utf-8")


@contextmanager
def malformed_step(step: str) -> Iterator[None]:
    """Tag a MalformedResponseError raised inside the block with the failing step."""
    try:
        yield
    except MalformedResponseError as e:
        raise MalformedResponseError(
            f"error {step}: {e.message}",
            resource=e.resource,
            details={**e.details, "step": step},
            cause=e
        ) from e


class FileService:
    """Service for repository file operations."""

    def __init__(self, client: GitHubClient):
        self.client = client

    async def get_file_contents(
        self,
        owner: str,
        repo: str,
        path: str,
        ref: Optional[str] = None
    ) -> Union[FileContent, List[FileContent]]:
        """
        Get a file (decoded) or a directory listing.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Path inside the repository
            ref: Branch, tag or commit SHA; defaults to the default branch

        Returns:
            FileContent for a file, list of FileContent for a directory

        Raises:
            ValidationError: If parameters are invalid
            GitHubAPIError: If the request fails
            MalformedResponseError: If the response has an unexpected shape
        """
        InputValidator.validate_repo_ref(owner, repo)
        InputValidator.validate_required(path, "path is required", "path")

        logger.info(f"Getting contents of {owner}/{repo}/{path}" + (f"@{ref}" if ref else ""))
        data = await asyncio.to_thread(self._get_contents_sync, owner, repo, path, ref)
        return self._parse_contents(data)

    def _get_contents_sync(self, owner: str, repo: str, path: str, ref: Optional[str]) -> Any:
        return self.client.request(
            "GET",
            f"/repos/{owner}/{repo}/contents/{encode_path(path)}",
            params={"ref": ref},
        )

    @staticmethod
    def _parse_contents(data: Any) -> Union[FileContent, List[FileContent]]:
        if isinstance(data, list):
            return parse_list(data, FileContent.from_dict, "directory listing")
        if isinstance(data, dict):
            return decode_file_content(FileContent.from_dict(data))
        raise MalformedResponseError(
            f"Unexpected contents response type: {type(data).__name__}",
            resource="content"
        )

    async def create_or_update_file(
        self,
        owner: str,
        repo: str,
        path: str,
        message: str,
        content: str,
        branch: Optional[str] = None,
        sha: Optional[str] = None,
        committer: Optional[Dict[str, str]] = None,
        author: Optional[Dict[str, str]] = None
    ) -> FileContent:
        """
        Create or update a single file in one commit.

        When ``sha`` is not given, the current blob SHA is looked up so an
        existing file is updated rather than rejected; a 404 means the file
        is new.

        Returns:
            The written file's metadata

        Raises:
            ValidationError: If parameters are invalid
            GitHubAPIError: If the lookup or the write fails
        """
        InputValidator.validate_repo_ref(owner, repo)
        InputValidator.validate_required(path, "path is required", "path")
        InputValidator.validate_required(message, "commit message is required", "message")
        InputValidator.validate_required(content, "content is required", "content")
        if branch:
            InputValidator.validate_branch_name(branch)
        committer_info = CommitterInfo.from_input(committer, "committer")
        author_info = CommitterInfo.from_input(author, "author")

        logger.info(f"Writing {owner}/{repo}/{path}" + (f" on {branch}" if branch else ""))
        return await asyncio.to_thread(
            self._create_or_update_file_sync,
            owner, repo, path, message, content, branch, sha, committer_info, author_info,
        )

    def _create_or_update_file_sync(
        self,
        owner: str,
        repo: str,
        path: str,
        message: str,
        content: str,
        branch: Optional[str],
        sha: Optional[str],
        committer: Optional[CommitterInfo],
        author: Optional[CommitterInfo]
    ) -> FileContent:
        if not sha:
            sha = self._existing_blob_sha(owner, repo, path, branch)

        body: Dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
        }
        if branch:
            body["branch"] = branch
        if sha:
            body["sha"] = sha
        if committer:
            body["committer"] = committer.to_dict()
        if author:
            body["author"] = author.to_dict()

        data = self.client.request(
            "PUT",
            f"/repos/{owner}/{repo}/contents/{encode_path(path)}",
            body=body,
        )
        if not isinstance(data, dict) or data.get("content") is None:
            raise MalformedResponseError("content not found in file write response", resource="content")
        return FileContent.from_dict(data["content"])

    def _existing_blob_sha(self, owner: str, repo: str, path: str, branch: Optional[str]) -> Optional[str]:
        try:
            data = self._get_contents_sync(owner, repo, path, branch)
        except GitHubAPIError as e:
            if is_not_found(e):
                return None
            raise
        if isinstance(data, dict) and data.get("sha"):
            logger.debug(f"Updating existing file {path} (blob {data['sha'][:7]})")
            return data["sha"]
        return None

    async def push_files(
        self,
        owner: str,
        repo: str,
        branch: str,
        message: str,
        files: Sequence[Union[PushFileEntry, Dict[str, Any]]],
        base_sha: Optional[str] = None
    ) -> GitCommit:
        """
        Create, update and delete several files in a single commit.

        Call sequence: get branch ref (skipped when ``base_sha`` is given),
        get base commit, create tree, create commit, update branch ref.
        Objects created before a failing step are left in place.

        Returns:
            The new commit

        Raises:
            ValidationError: If parameters are invalid (checked before any request)
            GitHubAPIError: If a step fails; ``step`` names which one
        """
        InputValidator.validate_repo_ref(owner, repo)
        InputValidator.validate_branch_name(branch)
        InputValidator.validate_required(message, "commit message is required", "message")
        if base_sha:
            InputValidator.validate_sha(base_sha, "base_sha")
        if not files:
            raise ValidationError("at least one file is required", field="files")
        entries = [PushFileEntry.from_input(item, index) for index, item in enumerate(files)]

        logger.info(f"Pushing {len(entries)} file(s) to {owner}/{repo}@{branch}")
        commit = await asyncio.to_thread(
            self._push_files_sync, owner, repo, branch, message, entries, base_sha
        )
        logger.info(f"Pushed commit {commit.sha} to {owner}/{repo}@{branch}")
        return commit

    def _push_files_sync(
        self,
        owner: str,
        repo: str,
        branch: str,
        message: str,
        entries: List[PushFileEntry],
        base_sha: Optional[str]
    ) -> GitCommit:
        """Synchronous multi-file commit for thread pool execution."""
        repo_path = f"/repos/{owner}/{repo}"
        ref_path = f"{repo_path}/git/refs/{GIT.HEADS_PREFIX}{encode_path(branch)}"

        if not base_sha:
            with malformed_step("getting branch reference"):
                ref_data = self.client.request("GET", ref_path, step="getting branch reference")
                base_sha = GitRef.from_dict(ref_data).sha

        with malformed_step("getting commit"):
            base_commit = GitCommit.from_dict(
                self.client.request("GET", f"{repo_path}/git/commits/{base_sha}", step="getting commit")
            )
            if base_commit.tree is None:
                raise MalformedResponseError("tree not found in commit response", resource="git commit")

        with malformed_step("creating tree"):
            tree_data = self.client.request(
                "POST",
                f"{repo_path}/git/trees",
                body={"base_tree": base_commit.tree.sha, "tree": self._tree_entries(entries)},
                step="creating tree",
            )
            if not isinstance(tree_data, dict) or not tree_data.get("sha"):
                raise MalformedResponseError("new tree sha not found in response", resource="git tree")

        with malformed_step("creating commit"):
            commit_data = self.client.request(
                "POST",
                f"{repo_path}/git/commits",
                body={"message": message, "tree": tree_data["sha"], "parents": [base_sha]},
                step="creating commit",
            )
            commit = GitCommit.from_dict(commit_data)
            if not commit.sha:
                raise MalformedResponseError("new commit sha not found in response", resource="git commit")

        self.client.request("PATCH", ref_path, body={"sha": commit.sha}, step="updating reference")
        return commit

    @staticmethod
    def _tree_entries(entries: List[PushFileEntry]) -> List[Dict[str, Any]]:
        tree = []
        for entry in entries:
            item: Dict[str, Any] = {
                "path": entry.path,
                "mode": GIT.BLOB_MODE,
                "type": GIT.BLOB_TYPE,
            }
            if entry.delete:
                # A null blob reference removes the path from the tree
                item["sha"] = None
            else:
                item["content"] = entry.content
            tree.append(item)
        return tree
