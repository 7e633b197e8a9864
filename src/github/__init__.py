"""GitHub Git Data API client.

Thin async wrapper over the REST endpoints needed to build a commit
remotely: refs, commits, blobs and trees.

Example:
    >>> from src.github import GitHubAPIClient, RefUpdate
    >>>
    >>> async with GitHubAPIClient(token) as client:
    ...     ref = await client.get_ref("octocat", "hello-world", "heads/main")
    ...     commit = await client.get_commit("octocat", "hello-world", ref.object.sha)
    ...     print(commit.tree.sha)
"""

from .api import (
    DEFAULT_API_URL,
    GitHubAPIClient,
    NotFoundError,
    RemoteAPIError,
    RemoteConflictError,
)
from .models import (
    BlobCreate,
    CommitCreate,
    GitCommit,
    GitObject,
    GitRef,
    RefObject,
    RefUpdate,
    TreeCreate,
    TreeEntry,
)

__all__ = [
    # API Client
    "DEFAULT_API_URL",
    "GitHubAPIClient",
    # Errors
    "RemoteAPIError",
    "NotFoundError",
    "RemoteConflictError",
    # Models - Request
    "BlobCreate",
    "TreeEntry",
    "TreeCreate",
    "CommitCreate",
    "RefUpdate",
    # Models - Response
    "GitObject",
    "RefObject",
    "GitRef",
    "GitCommit",
]
