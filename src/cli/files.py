"""Select the local files to commit."""

import re
import subprocess
from pathlib import Path
from typing import Iterable, Optional

# "XY path": only entries staged as added or modified in the index column
_STATUS_RE = re.compile(r"^[AM]\s+(.+)$")


class ChangeDetectionError(RuntimeError):
    """git status could not be run."""

    pass


def split_file_list(value: Optional[str]) -> list[str]:
    """Split a comma-separated FILE_PATHS value, dropping blanks."""
    if not value:
        return []
    return [p.strip() for p in value.split(",") if p.strip()]


def _walk_files(directory: Path) -> list[str]:
    files = []
    for entry in sorted(directory.iterdir()):
        if entry.is_dir():
            files.extend(_walk_files(entry))
        elif entry.is_file():
            files.append(str(entry))
    return files


def expand_paths(paths: Iterable[str]) -> list[str]:
    """Expand directories to the files under them.

    Paths that do not exist are skipped. Directory contents are sorted so
    the result is deterministic; a file listed twice is kept once.
    """
    files: list[str] = []
    for item in paths:
        path = Path(item)
        if not path.exists():
            continue
        if path.is_dir():
            files.extend(_walk_files(path))
        else:
            files.append(item)
    return list(dict.fromkeys(files))


def parse_git_status(output: str, cwd: Optional[Path] = None) -> list[str]:
    """Extract added/modified paths from `git status --porcelain` output."""
    base = Path(cwd) if cwd else Path.cwd()
    changed = []
    for line in output.splitlines():
        if not line.strip():
            continue
        match = _STATUS_RE.match(line)
        if match and (base / match.group(1)).exists():
            changed.append(match.group(1))
    return changed


def detect_changed_files(cwd: Optional[Path] = None) -> list[str]:
    """List changed files from git status in cwd.

    Raises:
        ChangeDetectionError: If git is missing or the command fails
    """
    try:
        result = subprocess.run(
            ["git", "status", "--porcelain"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        detail = getattr(e, "stderr", None) or str(e)
        raise ChangeDetectionError(
            f"Failed to detect changed files from git status: {detail.strip()}"
        ) from e
    return parse_git_status(result.stdout, cwd)
