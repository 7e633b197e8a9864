"""Push command - commit local files through the GitHub API."""

import asyncio
from typing import Annotated, Optional

import typer

from src.commit import commit_via_api
from src.github import RemoteAPIError

from ._common import build_commit_options, console, write_outputs
from .files import ChangeDetectionError, detect_changed_files, expand_paths, split_file_list


def push(
    paths: Annotated[
        Optional[list[str]], typer.Argument(help="Files or directories to commit (default: FILE_PATHS, then git status)")
    ] = None,
    token: Annotated[
        Optional[str], typer.Option("--token", envvar=["GITHUB_TOKEN", "GH_TOKEN"], help="GitHub token", show_default=False)
    ] = None,
    repository: Annotated[
        Optional[str], typer.Option("--repository", "-r", help="Target repository as owner/repo (default: GITHUB_REPOSITORY)")
    ] = None,
    branch: Annotated[
        Optional[str], typer.Option("--branch", "-b", help="Target branch (default: branch in GITHUB_REF)")
    ] = None,
    message: Annotated[
        Optional[str], typer.Option("--message", "-m", envvar="COMMIT_MESSAGE", help="Commit message")
    ] = None,
    file_list: Annotated[
        Optional[str], typer.Option("--files", envvar="FILE_PATHS", help="Comma-separated files or directories")
    ] = None,
    base_sha: Annotated[
        Optional[str], typer.Option("--base-sha", envvar="BASE_SHA", help="Build on this commit instead of the branch tip")
    ] = None,
    api_url: Annotated[
        Optional[str], typer.Option("--api-url", envvar="GITHUB_API_URL", help="GitHub API URL")
    ] = None,
):
    """Commit files to a branch as a commit signed by GitHub.

    Files are uploaded through the Git Data API and the branch is
    fast-forwarded to the new commit. If no files are given, files staged
    as added or modified in `git status` are used.
    """
    requested = list(paths or []) + split_file_list(file_list)
    try:
        if requested:
            file_paths = expand_paths(requested)
        else:
            file_paths = detect_changed_files()
    except ChangeDetectionError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if not file_paths:
        console.print("No files to commit")
        raise typer.Exit(0)

    try:
        options = build_commit_options(
            token=token,
            repository=repository,
            branch=branch,
            message=message,
            file_paths=file_paths,
            base_sha=base_sha,
            api_url=api_url,
        )
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(f"Committing {len(file_paths)} file(s) to branch [bold]{options.branch}[/bold]")
    console.print(f"[dim]Files: {', '.join(file_paths)}[/dim]")

    # OSError covers missing or unreadable files; ValueError covers EmptyInputError
    try:
        result = asyncio.run(commit_via_api(options))
    except (RemoteAPIError, OSError, ValueError) as e:
        console.print(f"[red]Commit failed:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]Created signed commit {result.commit_sha} via GitHub API[/green]")
    write_outputs({
        "commit-sha": result.commit_sha,
        "tree-sha": result.tree_sha,
        "files-committed": str(result.files_committed),
    })
