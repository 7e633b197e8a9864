"""Create commit objects."""

from src.github import CommitCreate, GitHubAPIClient


async def create_commit(
    client: GitHubAPIClient,
    owner: str,
    repo: str,
    tree_sha: str,
    parent_sha: str,
    message: str,
) -> str:
    """Create a single-parent commit and return its sha.

    GitHub signs commits created through the API with its own key, so no
    signing material is ever handled here.
    """
    commit = await client.create_commit(
        owner,
        repo,
        CommitCreate(message=message, tree=tree_sha, parents=[parent_sha]),
    )
    return commit.sha
