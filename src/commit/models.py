"""Request-scoped data types for committing through the GitHub API."""

from enum import Enum

from pydantic import BaseModel, Field

from src.github import DEFAULT_API_URL


class FileMode(str, Enum):
    """Tree entry modes supported for committed files."""

    REGULAR = "100644"
    EXECUTABLE = "100755"


class FileEntry(BaseModel):
    """A local file read at call time."""

    path: str  # repo-relative, POSIX separators
    mode: FileMode
    content: bytes

    model_config = {"frozen": True}


class BlobRef(BaseModel):
    """An uploaded blob and the mode it will be committed with."""

    sha: str
    mode: FileMode


class CommitRef(BaseModel):
    """A commit and the tree it points at."""

    sha: str
    tree_sha: str
    parent_shas: list[str] = Field(default_factory=list)


class CommitOptions(BaseModel):
    """Input for commit_via_api."""

    token: str = Field(repr=False)
    owner: str
    repo: str
    branch: str
    message: str
    file_paths: list[str]
    base_sha: str | None = None  # skip the branch lookup and build on this commit
    api_url: str = DEFAULT_API_URL


class CommitResult(BaseModel):
    """Outcome of a successful commit."""

    commit_sha: str
    tree_sha: str
    files_committed: int
