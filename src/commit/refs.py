"""Branch lookup and branch update.

Resolving the base commit and moving the branch are the only two steps
that touch refs, so both live here.
"""

import logging
from typing import Optional

from src.github import GitHubAPIClient, RefUpdate

from .models import CommitRef

HEADS_PREFIX = "refs/heads/"

logger = logging.getLogger(__name__)


def normalize_branch(branch: str) -> str:
    """Accept either "refs/heads/main" or "main".

    Only the full "refs/heads/" prefix is stripped, so a branch called
    "heads/x" stays "heads/x".
    """
    if branch.startswith(HEADS_PREFIX):
        return branch[len(HEADS_PREFIX):]
    return branch


def branch_ref(branch: str) -> str:
    """Return the API ref name for a branch ("main" -> "heads/main")."""
    return f"heads/{normalize_branch(branch)}"


async def get_branch_info(
    client: GitHubAPIClient,
    owner: str,
    repo: str,
    branch: str,
) -> CommitRef:
    """Get the tip commit of a branch and its tree.

    Args:
        client: API client
        owner: Repository owner
        repo: Repository name
        branch: Branch name

    Returns:
        CommitRef for the branch tip

    Raises:
        NotFoundError: If the branch or its tip commit does not exist
    """
    ref = await client.get_ref(owner, repo, branch_ref(branch))
    commit = await client.get_commit(owner, repo, ref.object.sha)
    return CommitRef(
        sha=ref.object.sha,
        tree_sha=commit.tree.sha,
        parent_shas=[p.sha for p in commit.parents],
    )


async def resolve_base(
    client: GitHubAPIClient,
    owner: str,
    repo: str,
    branch: str,
    base_sha: Optional[str] = None,
) -> CommitRef:
    """Resolve the commit the new commit will be built on.

    With base_sha the branch ref is never read; only that commit is
    fetched to learn its tree.
    """
    if base_sha:
        logger.info(f"Using provided base commit {base_sha}")
        commit = await client.get_commit(owner, repo, base_sha)
        return CommitRef(
            sha=base_sha,
            tree_sha=commit.tree.sha,
            parent_shas=[p.sha for p in commit.parents],
        )

    info = await get_branch_info(client, owner, repo, branch)
    logger.info(f"Branch {branch} is at {info.sha} (tree {info.tree_sha})")
    return info


async def update_branch(
    client: GitHubAPIClient,
    owner: str,
    repo: str,
    branch: str,
    commit_sha: str,
    force: bool = False,
) -> None:
    """Point a branch at commit_sha.

    Without force the remote only accepts a fast forward, so a push that
    landed after resolve_base makes this fail with RemoteConflictError.
    """
    await client.update_ref(
        owner,
        repo,
        branch_ref(branch),
        RefUpdate(sha=commit_sha, force=force),
    )
