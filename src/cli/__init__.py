"""
CLI interface for signed-commit.

Usage:
    python -m src.cli push [PATHS...]
    signed-commit push [PATHS...]

Most options fall back to the environment a GitHub Actions job provides
(GITHUB_TOKEN, GITHUB_REPOSITORY, GITHUB_REF, ...).
"""

from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv

# Load .env from the working directory (local runs outside Actions)
load_dotenv(Path.cwd() / ".env")

import typer

from .commit import push
from ._common import setup_logging

# Create main app
app = typer.Typer(
    name="signed-commit",
    help="Commit files to GitHub through the API so the commit is signed by GitHub",
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show API calls and debug logging")
    ] = False,
):
    """Commit files to GitHub through the API so the commit is signed by GitHub."""
    setup_logging(verbose)


# Register standalone commands
app.command("push")(push)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
