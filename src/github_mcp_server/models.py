"""
Data models for the GitHub MCP Server.

Typed, immutable snapshots of the GitHub resources the tools return, plus the
small input structures some tools accept. Every resource model is built from
the raw JSON payload with ``from_dict`` and serialized with ``to_dict``; a
payload with the wrong shape raises MalformedResponseError instead of being
coerced.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from .exceptions import MalformedResponseError, ValidationError


T = TypeVar("T")


def _expect_dict(data: Any, resource: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Expected a JSON object for {resource}, got {type(data).__name__}",
            resource=resource
        )
    return data


def _expect_list(data: Any, resource: str) -> List[Any]:
    if not isinstance(data, list):
        raise MalformedResponseError(
            f"Expected a JSON array for {resource}, got {type(data).__name__}",
            resource=resource
        )
    return data


def _required(data: Dict[str, Any], key: str, resource: str) -> Any:
    value = data.get(key)
    if value is None:
        raise MalformedResponseError(
            f"Field '{key}' missing from {resource} response",
            resource=resource,
            details={"field": key}
        )
    return value


def _optional(data: Dict[str, Any], key: str, parser: Callable[[Any], T]) -> Optional[T]:
    value = data.get(key)
    return parser(value) if value is not None else None


def _many(data: Dict[str, Any], key: str, parser: Callable[[Any], T], resource: str) -> List[T]:
    value = data.get(key)
    if value is None:
        return []
    return [parser(item) for item in _expect_list(value, f"{resource}.{key}")]


class Model:
    """Serialization shared by all models."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)


@dataclass(frozen=True)
class GitHubUser(Model):
    """A GitHub user or organization."""
    login: str
    id: int
    type: Optional[str] = None
    site_admin: bool = False
    html_url: Optional[str] = None
    avatar_url: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "GitHubUser":
        data = _expect_dict(data, "user")
        return cls(
            login=_required(data, "login", "user"),
            id=_required(data, "id", "user"),
            type=data.get("type"),
            site_admin=bool(data.get("site_admin", False)),
            html_url=data.get("html_url"),
            avatar_url=data.get("avatar_url"),
            name=data.get("name"),
            email=data.get("email"),
            company=data.get("company"),
            location=data.get("location"),
            bio=data.get("bio"),
        )


@dataclass(frozen=True)
class Label(Model):
    """A label attached to an issue or pull request."""
    name: str
    id: Optional[int] = None
    color: Optional[str] = None
    description: Optional[str] = None
    default: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Label":
        data = _expect_dict(data, "label")
        return cls(
            name=_required(data, "name", "label"),
            id=data.get("id"),
            color=data.get("color"),
            description=data.get("description"),
            default=bool(data.get("default", False)),
        )


@dataclass(frozen=True)
class Milestone(Model):
    """A repository milestone."""
    number: int
    title: str
    state: Optional[str] = None
    id: Optional[int] = None
    description: Optional[str] = None
    html_url: Optional[str] = None
    open_issues: int = 0
    closed_issues: int = 0
    due_on: Optional[str] = None
    created_at: Optional[str] = None
    closed_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Milestone":
        data = _expect_dict(data, "milestone")
        return cls(
            number=_required(data, "number", "milestone"),
            title=_required(data, "title", "milestone"),
            state=data.get("state"),
            id=data.get("id"),
            description=data.get("description"),
            html_url=data.get("html_url"),
            open_issues=data.get("open_issues", 0),
            closed_issues=data.get("closed_issues", 0),
            due_on=data.get("due_on"),
            created_at=data.get("created_at"),
            closed_at=data.get("closed_at"),
        )


@dataclass(frozen=True)
class PullRequestRef(Model):
    """Links present on issues that are actually pull requests."""
    url: Optional[str] = None
    html_url: Optional[str] = None
    diff_url: Optional[str] = None
    patch_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "PullRequestRef":
        data = _expect_dict(data, "pull_request")
        return cls(
            url=data.get("url"),
            html_url=data.get("html_url"),
            diff_url=data.get("diff_url"),
            patch_url=data.get("patch_url"),
        )


@dataclass(frozen=True)
class Repository(Model):
    """A GitHub repository."""
    id: int
    name: str
    full_name: str
    owner: GitHubUser
    private: bool = False
    fork: bool = False
    description: Optional[str] = None
    html_url: Optional[str] = None
    clone_url: Optional[str] = None
    ssh_url: Optional[str] = None
    homepage: Optional[str] = None
    default_branch: Optional[str] = None
    language: Optional[str] = None
    stargazers_count: int = 0
    watchers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    archived: bool = False
    disabled: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    pushed_at: Optional[str] = None
    permissions: Optional[Dict[str, bool]] = None
    parent: Optional["Repository"] = None
    source: Optional["Repository"] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Repository":
        data = _expect_dict(data, "repository")
        return cls(
            id=_required(data, "id", "repository"),
            name=_required(data, "name", "repository"),
            full_name=_required(data, "full_name", "repository"),
            owner=GitHubUser.from_dict(_required(data, "owner", "repository")),
            private=bool(data.get("private", False)),
            fork=bool(data.get("fork", False)),
            description=data.get("description"),
            html_url=data.get("html_url"),
            clone_url=data.get("clone_url"),
            ssh_url=data.get("ssh_url"),
            homepage=data.get("homepage"),
            default_branch=data.get("default_branch"),
            language=data.get("language"),
            stargazers_count=data.get("stargazers_count", 0),
            watchers_count=data.get("watchers_count", 0),
            forks_count=data.get("forks_count", 0),
            open_issues_count=data.get("open_issues_count", 0),
            archived=bool(data.get("archived", False)),
            disabled=bool(data.get("disabled", False)),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            pushed_at=data.get("pushed_at"),
            permissions=data.get("permissions"),
            parent=_optional(data, "parent", Repository.from_dict),
            source=_optional(data, "source", Repository.from_dict),
        )


@dataclass(frozen=True)
class CommitRef(Model):
    """A pointer to a commit or tree object."""
    sha: str
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "CommitRef":
        data = _expect_dict(data, "commit reference")
        return cls(sha=_required(data, "sha", "commit reference"), url=data.get("url"))


@dataclass(frozen=True)
class Branch(Model):
    """A branch and the commit it points at."""
    name: str
    commit: CommitRef
    protected: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Branch":
        data = _expect_dict(data, "branch")
        return cls(
            name=_required(data, "name", "branch"),
            commit=CommitRef.from_dict(_required(data, "commit", "branch")),
            protected=bool(data.get("protected", False)),
        )


@dataclass(frozen=True)
class GitRef(Model):
    """A named Git reference such as ``refs/heads/main`` or ``refs/tags/v1.0``."""
    ref: str
    sha: str
    object_type: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "GitRef":
        data = _expect_dict(data, "ref")
        target = _expect_dict(_required(data, "object", "ref"), "ref.object")
        return cls(
            ref=_required(data, "ref", "ref"),
            sha=_required(target, "sha", "ref.object"),
            object_type=target.get("type"),
            url=data.get("url"),
        )

    def short_name(self, prefix: str) -> str:
        """Return the ref name with ``prefix`` removed, e.g. the tag name."""
        if self.ref.startswith(prefix):
            return self.ref[len(prefix):]
        return self.ref


@dataclass(frozen=True)
class FileContent(Model):
    """A file or directory entry from the contents API."""
    type: str
    name: str
    path: str
    sha: str
    size: int = 0
    encoding: Optional[str] = None
    content: Optional[str] = None
    url: Optional[str] = None
    git_url: Optional[str] = None
    html_url: Optional[str] = None
    download_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "FileContent":
        data = _expect_dict(data, "content")
        return cls(
            type=_required(data, "type", "content"),
            name=_required(data, "name", "content"),
            path=_required(data, "path", "content"),
            sha=_required(data, "sha", "content"),
            size=data.get("size", 0),
            encoding=data.get("encoding"),
            content=data.get("content"),
            url=data.get("url"),
            git_url=data.get("git_url"),
            html_url=data.get("html_url"),
            download_url=data.get("download_url"),
        )


@dataclass(frozen=True)
class Issue(Model):
    """An issue (or a pull request seen through the issues API)."""
    number: int
    title: str
    state: str
    id: Optional[int] = None
    body: Optional[str] = None
    user: Optional[GitHubUser] = None
    labels: List[Label] = field(default_factory=list)
    assignee: Optional[GitHubUser] = None
    assignees: List[GitHubUser] = field(default_factory=list)
    milestone: Optional[Milestone] = None
    comments: int = 0
    locked: bool = False
    author_association: Optional[str] = None
    html_url: Optional[str] = None
    url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    closed_at: Optional[str] = None
    pull_request: Optional[PullRequestRef] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Issue":
        data = _expect_dict(data, "issue")
        return cls(
            number=_required(data, "number", "issue"),
            title=_required(data, "title", "issue"),
            state=_required(data, "state", "issue"),
            id=data.get("id"),
            body=data.get("body"),
            user=_optional(data, "user", GitHubUser.from_dict),
            labels=_many(data, "labels", Label.from_dict, "issue"),
            assignee=_optional(data, "assignee", GitHubUser.from_dict),
            assignees=_many(data, "assignees", GitHubUser.from_dict, "issue"),
            milestone=_optional(data, "milestone", Milestone.from_dict),
            comments=data.get("comments", 0),
            locked=bool(data.get("locked", False)),
            author_association=data.get("author_association"),
            html_url=data.get("html_url"),
            url=data.get("url"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            closed_at=data.get("closed_at"),
            pull_request=_optional(data, "pull_request", PullRequestRef.from_dict),
        )

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request is not None


@dataclass(frozen=True)
class IssueComment(Model):
    """A comment on an issue."""
    id: int
    body: Optional[str] = None
    user: Optional[GitHubUser] = None
    html_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "IssueComment":
        data = _expect_dict(data, "issue comment")
        return cls(
            id=_required(data, "id", "issue comment"),
            body=data.get("body"),
            user=_optional(data, "user", GitHubUser.from_dict),
            html_url=data.get("html_url"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


@dataclass(frozen=True)
class CommitAuthor(Model):
    """Git author or committer identity."""
    name: Optional[str] = None
    email: Optional[str] = None
    date: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "CommitAuthor":
        data = _expect_dict(data, "commit author")
        return cls(name=data.get("name"), email=data.get("email"), date=data.get("date"))


@dataclass(frozen=True)
class GitCommit(Model):
    """
    A Git commit object.

    Returned directly by the Git data API, and nested under ``commit`` in the
    commits API (where it has no ``sha`` of its own).
    """
    message: str
    sha: Optional[str] = None
    tree: Optional[CommitRef] = None
    parents: List[CommitRef] = field(default_factory=list)
    author: Optional[CommitAuthor] = None
    committer: Optional[CommitAuthor] = None
    comment_count: int = 0
    url: Optional[str] = None
    html_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "GitCommit":
        data = _expect_dict(data, "git commit")
        return cls(
            message=_required(data, "message", "git commit"),
            sha=data.get("sha"),
            tree=_optional(data, "tree", CommitRef.from_dict),
            parents=_many(data, "parents", CommitRef.from_dict, "git commit"),
            author=_optional(data, "author", CommitAuthor.from_dict),
            committer=_optional(data, "committer", CommitAuthor.from_dict),
            comment_count=data.get("comment_count", 0),
            url=data.get("url"),
            html_url=data.get("html_url"),
        )


@dataclass(frozen=True)
class Commit(Model):
    """A commit as listed by the repository commits API."""
    sha: str
    commit: GitCommit
    html_url: Optional[str] = None
    url: Optional[str] = None
    author: Optional[GitHubUser] = None
    committer: Optional[GitHubUser] = None
    parents: List[CommitRef] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Commit":
        data = _expect_dict(data, "commit")
        return cls(
            sha=_required(data, "sha", "commit"),
            commit=GitCommit.from_dict(_required(data, "commit", "commit")),
            html_url=data.get("html_url"),
            url=data.get("url"),
            author=_optional(data, "author", GitHubUser.from_dict),
            committer=_optional(data, "committer", GitHubUser.from_dict),
            parents=_many(data, "parents", CommitRef.from_dict, "commit"),
        )


@dataclass(frozen=True)
class CodeResult(Model):
    """A single code search hit."""
    name: str
    path: str
    sha: Optional[str] = None
    html_url: Optional[str] = None
    repository: Optional[Repository] = None

    @classmethod
    def from_dict(cls, data: Any) -> "CodeResult":
        data = _expect_dict(data, "code result")
        return cls(
            name=_required(data, "name", "code result"),
            path=_required(data, "path", "code result"),
            sha=data.get("sha"),
            html_url=data.get("html_url"),
            repository=_optional(data, "repository", Repository.from_dict),
        )


@dataclass(frozen=True)
class SearchResult(Model, Generic[T]):
    """One page of search results."""
    total_count: int
    items: List[T] = field(default_factory=list)
    incomplete_results: bool = False

    @classmethod
    def from_dict(cls, data: Any, item_parser: Callable[[Any], T]) -> "SearchResult[T]":
        data = _expect_dict(data, "search result")
        return cls(
            total_count=_required(data, "total_count", "search result"),
            items=_many(data, "items", item_parser, "search result"),
            incomplete_results=bool(data.get("incomplete_results", False)),
        )


def parse_list(data: Any, parser: Callable[[Any], T], resource: str) -> List[T]:
    """Parse a JSON array response into a list of models."""
    return [parser(item) for item in _expect_list(data, resource)]


@dataclass(frozen=True)
class CommitterInfo(Model):
    """Author or committer identity supplied by the caller."""
    name: str
    email: str

    @classmethod
    def from_input(cls, data: Optional[Dict[str, Any]], field_name: str) -> Optional["CommitterInfo"]:
        if data is None:
            return None
        if not isinstance(data, dict) or not data.get("name") or not data.get("email"):
            raise ValidationError(
                f"{field_name} requires both 'name' and 'email'",
                field=field_name
            )
        return cls(name=data["name"], email=data["email"])


@dataclass(frozen=True)
class PushFileEntry(Model):
    """A file to create, update or delete as part of a multi-file commit."""
    path: str
    content: Optional[str] = None
    delete: bool = False

    @classmethod
    def from_input(cls, data: Any, index: int) -> "PushFileEntry":
        if isinstance(data, PushFileEntry):
            entry = data
        elif isinstance(data, dict):
            entry = cls(
                path=data.get("path") or "",
                content=data.get("content"),
                delete=bool(data.get("delete", False)),
            )
        else:
            raise ValidationError(f"file at index {index} must be an object", field="files")

        if not entry.path:
            raise ValidationError(f"path is required for file at index {index}", field="files")
        if not entry.delete and not entry.content:
            raise ValidationError(
                f"content is required for non-deleted file at index {index}",
                field="files"
            )
        return entry
