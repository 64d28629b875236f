"""
GitHub API client for the GitHub MCP Server.

A thin, credential-bound wrapper around PyGithub. Requests go through the
PyGithub requester so authentication, base URL handling and HTTP error
decoding are shared, while every operation still sees the exact JSON payload
GitHub returned. GithubException failures are translated into GitHubAPIError.
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional
from urllib.parse import quote

from github import Auth, Github, GithubException
from loguru import logger

from .constants import API, USER_AGENT
from .exceptions import ConfigurationError, GitHubAPIError, create_github_error


def translate_github_exception(error: GithubException, step: Optional[str] = None) -> GitHubAPIError:
    """Convert a PyGithub exception into a classified GitHubAPIError."""
    return create_github_error(error.status, error.data, step=step, cause=error)


@contextmanager
def github_errors(step: Optional[str] = None) -> Iterator[None]:
    """Translate GithubException raised inside the block, tagging the failing step."""
    try:
        yield
    except GithubException as e:
        raise translate_github_exception(e, step) from e


def encode_path(path: str) -> str:
    """URL-encode a repository path or ref name, keeping '/' separators."""
    return quote(path.strip("/"), safe="/")


class GitHubClient:
    """Authenticated access to the GitHub REST API."""

    def __init__(
        self,
        token: str,
        base_url: str = API.BASE_URL,
        timeout: int = API.DEFAULT_TIMEOUT,
        github: Optional[Github] = None
    ):
        """
        Initialize the client.

        Args:
            token: GitHub personal access token sent as bearer credential
            base_url: REST API root URL
            timeout: Request timeout in seconds
            github: Pre-built PyGithub instance (mainly for tests)

        Raises:
            ConfigurationError: If no token is given
        """
        if not token:
            raise ConfigurationError(
                "A GitHub token is required to create a GitHub client",
                missing_vars=[API.TOKEN_ENV_VAR]
            )
        self._token = token
        self.base_url = base_url
        self.timeout = timeout
        self._github: Optional[Github] = github

    @property
    def github(self) -> Github:
        """Get or create the PyGithub client."""
        if self._github is None:
            # No automatic retries or request throttling: failures surface immediately
            self._github = Github(
                auth=Auth.Token(self._token),
                base_url=self.base_url,
                timeout=self.timeout,
                user_agent=USER_AGENT,
                retry=None,
                seconds_between_requests=None,
                seconds_between_writes=None,
            )
            logger.debug(f"Created GitHub client for {self.base_url}")
        return self._github

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Any = None,
        step: Optional[str] = None
    ) -> Any:
        """
        Send a request to the GitHub API and return the decoded JSON.

        Blocking; services call this from a worker thread.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            path: API path starting with '/' (e.g. "/repos/{owner}/{repo}")
            params: Query parameters; None values are dropped
            body: JSON body
            step: Name of the calling step, attached to any error

        Returns:
            Parsed JSON response

        Raises:
            GitHubAPIError: If GitHub answers with an error status
        """
        if params:
            params = {k: v for k, v in params.items() if v is not None and v != ""}
        logger.debug(f"GitHub API {method} {path} params={params or {}}")
        with github_errors(step):
            _, data = self.github.requester.requestJsonAndCheck(
                method,
                path,
                parameters=params or None,
                input=body,
            )
        return data

    def __repr__(self) -> str:
        return f"GitHubClient(base_url={self.base_url}, timeout={self.timeout})"
