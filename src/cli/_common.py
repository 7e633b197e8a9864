"""Common utilities and constants for CLI commands."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional

from rich.console import Console
from rich.logging import RichHandler

from src.commit import CommitOptions, normalize_branch
from src.github import DEFAULT_API_URL

# Console for rich output
console = Console()

DEFAULT_COMMIT_MESSAGE = "chore: update files"
HEADS_PREFIX = "refs/heads/"


@dataclass
class ActionDefaults:
    """Fallback values read from the platform's run context."""

    repository: Optional[str] = None
    branch: Optional[str] = None


DefaultsResolver = Callable[[Mapping[str, str]], ActionDefaults]


def resolve_action_defaults(environ: Mapping[str, str]) -> ActionDefaults:
    """Read repository and branch from a GitHub Actions environment.

    GITHUB_REF is only used when it names a branch; on pull_request
    events it is refs/pull/N/merge and GITHUB_HEAD_REF holds the branch.
    """
    branch = None
    ref = environ.get("GITHUB_REF", "")
    if ref.startswith(HEADS_PREFIX):
        branch = ref[len(HEADS_PREFIX):]
    elif environ.get("GITHUB_HEAD_REF"):
        branch = environ["GITHUB_HEAD_REF"]

    return ActionDefaults(
        repository=environ.get("GITHUB_REPOSITORY") or None,
        branch=branch,
    )


def parse_repository(repository: str) -> tuple[str, str]:
    """Split "owner/repo".

    Raises:
        ValueError: If the value is not exactly owner/repo
    """
    parts = repository.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValueError(f'Invalid repository format: {repository}. Expected "owner/repo"')
    return parts[0], parts[1]


def build_commit_options(
    *,
    token: Optional[str],
    repository: Optional[str],
    branch: Optional[str],
    message: Optional[str],
    file_paths: list[str],
    base_sha: Optional[str] = None,
    api_url: Optional[str] = None,
    resolve_defaults: DefaultsResolver = resolve_action_defaults,
    environ: Optional[Mapping[str, str]] = None,
) -> CommitOptions:
    """Combine explicit values with run-context defaults.

    Explicit arguments win; resolve_defaults(environ) fills in the
    repository and branch when they are not given.

    Raises:
        ValueError: If the token, repository or branch cannot be determined
    """
    if not token:
        raise ValueError("GITHUB_TOKEN or GH_TOKEN environment variable is required")

    defaults = resolve_defaults(os.environ if environ is None else environ)

    repository = repository or defaults.repository
    if not repository:
        raise ValueError("Repository is required (--repository or GITHUB_REPOSITORY)")
    owner, repo = parse_repository(repository)

    branch = branch or defaults.branch
    if not branch:
        raise ValueError("Branch is required (--branch or GITHUB_REF)")

    return CommitOptions(
        token=token,
        owner=owner,
        repo=repo,
        branch=normalize_branch(branch),
        message=message or DEFAULT_COMMIT_MESSAGE,
        file_paths=file_paths,
        base_sha=base_sha or None,
        api_url=api_url or DEFAULT_API_URL,
    )


def write_outputs(outputs: Mapping[str, str], output_file: Optional[str] = None) -> bool:
    """Append step outputs to the GITHUB_OUTPUT file.

    Returns:
        True if outputs were written, False when no output file is set
    """
    output_file = output_file or os.environ.get("GITHUB_OUTPUT")
    if not output_file:
        return False
    with open(Path(output_file), "a") as f:
        for name, value in outputs.items():
            f.write(f"{name}={value}\n")
    return True


def setup_logging(verbose: bool = False) -> None:
    """Route library logging through rich.

    Only warnings and errors are shown unless verbose is set.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
