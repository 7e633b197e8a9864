"""Build a new tree on top of a base tree."""

import logging
import os
from typing import Sequence

from src.github import GitHubAPIClient, TreeCreate, TreeEntry

from .blob import create_blob, tree_path

logger = logging.getLogger(__name__)


async def create_tree(
    client: GitHubAPIClient,
    owner: str,
    repo: str,
    base_tree_sha: str,
    file_paths: Sequence[str | os.PathLike],
) -> str:
    """Upload each file as a blob and layer them onto base_tree_sha.

    Blobs are written one at a time in input order and the entry list
    keeps that order. GitHub merges server-side: paths not listed are
    inherited from the base tree, listed paths are added or replaced.

    Args:
        client: API client
        owner: Repository owner
        repo: Repository name
        base_tree_sha: Tree of the parent commit
        file_paths: Local repo-relative paths to commit

    Returns:
        sha of the new tree

    Raises:
        ValueError: If two inputs name the same tree path (e.g. "a.txt"
            and "./a.txt"); checked before any blob is uploaded
    """
    seen: set[str] = set()
    for file_path in file_paths:
        path = tree_path(file_path)
        if path in seen:
            raise ValueError(f"Duplicate path in commit: {path}")
        seen.add(path)

    entries: list[TreeEntry] = []

    for file_path in file_paths:
        blob = await create_blob(client, owner, repo, file_path)
        entries.append(
            TreeEntry(
                path=tree_path(file_path),
                mode=blob.mode.value,
                type="blob",
                sha=blob.sha,
            )
        )

    tree = await client.create_tree(owner, repo, TreeCreate(base_tree=base_tree_sha, tree=entries))
    logger.info(f"Created tree {tree.sha} ({len(entries)} files on {base_tree_sha})")
    return tree.sha
