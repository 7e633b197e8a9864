"""Read local files and upload them as blobs."""

import base64
import logging
import os
import stat
from pathlib import Path

from src.github import BlobCreate, GitHubAPIClient

from .models import BlobRef, FileEntry, FileMode

logger = logging.getLogger(__name__)

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH  # 0o111


def file_mode_for(st_mode: int) -> FileMode:
    """Classify permission bits: any execute bit makes a file executable."""
    if st_mode & EXECUTE_BITS:
        return FileMode.EXECUTABLE
    return FileMode.REGULAR


def tree_path(file_path: str | os.PathLike) -> str:
    """Convert a local relative path to the form used in tree entries.

    Path() already drops "./" segments; as_posix() fixes separators.
    """
    return Path(file_path).as_posix()


def read_file_entry(file_path: str | os.PathLike) -> FileEntry:
    """Read a file's bytes and mode.

    Raises:
        FileNotFoundError: If the path does not exist
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    content = path.read_bytes()
    mode = file_mode_for(path.stat().st_mode)
    return FileEntry(path=tree_path(file_path), mode=mode, content=content)


async def create_blob(
    client: GitHubAPIClient,
    owner: str,
    repo: str,
    file_path: str | os.PathLike,
) -> BlobRef:
    """Upload one local file as a blob.

    The file is read before any request is made, so a missing file never
    leaves anything behind remotely.

    Args:
        client: API client
        owner: Repository owner
        repo: Repository name
        file_path: Local path of the file to upload

    Returns:
        BlobRef with the blob sha and the file's mode

    Raises:
        FileNotFoundError: If the file does not exist locally
        RemoteAPIError: If the upload fails
    """
    entry = read_file_entry(file_path)
    encoded = base64.b64encode(entry.content).decode("ascii")

    blob = await client.create_blob(owner, repo, BlobCreate(content=encoded, encoding="base64"))
    logger.debug(f"Blob {blob.sha} for {entry.path} ({entry.mode.value})")
    return BlobRef(sha=blob.sha, mode=entry.mode)
