"""Commit module for signed-commit.

Builds a commit remotely (blob -> tree -> commit -> ref) so that GitHub
signs it, instead of pushing a locally created commit.
"""

from .blob import create_blob, file_mode_for, read_file_entry
from .history import create_commit
from .models import (
    BlobRef,
    CommitOptions,
    CommitRef,
    CommitResult,
    FileEntry,
    FileMode,
)
from .refs import get_branch_info, normalize_branch, resolve_base, update_branch
from .tree import create_tree
from .workflow import EmptyInputError, commit_via_api, commit_via_api_sync

__all__ = [
    # Models
    "FileMode",
    "FileEntry",
    "BlobRef",
    "CommitRef",
    "CommitOptions",
    "CommitResult",
    # Steps
    "normalize_branch",
    "get_branch_info",
    "resolve_base",
    "read_file_entry",
    "file_mode_for",
    "create_blob",
    "create_tree",
    "create_commit",
    "update_branch",
    # Workflow
    "EmptyInputError",
    "commit_via_api",
    "commit_via_api_sync",
]
