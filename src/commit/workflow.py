"""Complete workflow for committing files through the GitHub API.

Runs the five remote steps in order:
1. Resolve the base commit and tree (branch tip, or the given base sha)
2. Upload every file as a blob
3. Create a tree layered on the base tree
4. Create a commit with the base commit as its only parent
5. Fast-forward the branch to the new commit

Any failure aborts the run. Blobs and trees created before the failure
are left unreferenced on the remote.
"""

import asyncio
import logging
from typing import Optional

from src.github import GitHubAPIClient

from .history import create_commit
from .models import CommitOptions, CommitResult
from .refs import resolve_base, update_branch
from .tree import create_tree

logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """Raised when there are no files to commit."""

    pass


async def commit_via_api(
    options: CommitOptions,
    client: Optional[GitHubAPIClient] = None,
) -> CommitResult:
    """Commit options.file_paths to options.branch as one signed commit.

    Args:
        options: Target repository, branch, message and files
        client: Client to use; if omitted one is opened from options.token
            and options.api_url and closed when done

    Returns:
        CommitResult with the new commit and tree shas

    Raises:
        EmptyInputError: If options.file_paths is empty (before any request)
        FileNotFoundError: If a file is missing locally
        NotFoundError: If the branch or base commit does not exist
        RemoteConflictError: If the branch moved and the update is rejected
        RemoteAPIError: For any other API or transport failure
    """
    if not options.file_paths:
        raise EmptyInputError("No files to commit")

    if client is None:
        async with GitHubAPIClient(options.token, base_url=options.api_url) as owned_client:
            return await _run(owned_client, options)
    return await _run(client, options)


async def _run(client: GitHubAPIClient, options: CommitOptions) -> CommitResult:
    owner, repo = options.owner, options.repo
    logger.info(
        f"Committing {len(options.file_paths)} file(s) to {owner}/{repo}@{options.branch}"
    )

    base = await resolve_base(client, owner, repo, options.branch, options.base_sha)

    tree_sha = await create_tree(client, owner, repo, base.tree_sha, options.file_paths)

    commit_sha = await create_commit(client, owner, repo, tree_sha, base.sha, options.message)
    logger.info(f"Created commit {commit_sha} (parent {base.sha})")

    await update_branch(client, owner, repo, options.branch, commit_sha, force=False)
    logger.info(f"Updated {options.branch} to {commit_sha}")

    return CommitResult(
        commit_sha=commit_sha,
        tree_sha=tree_sha,
        files_committed=len(options.file_paths),
    )


def commit_via_api_sync(options: CommitOptions) -> CommitResult:
    """Blocking wrapper around commit_via_api."""
    return asyncio.run(commit_via_api(options))
