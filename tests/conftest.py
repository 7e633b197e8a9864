"""Shared fixtures for signed-commit tests.

This module provides:
- mock_github: Mocked GitHub Git Data API using respx
- client: GitHubAPIClient pointed at the mocked API
- workdir: Temporary working directory with sample files
"""

import json
import re

import httpx
import pytest
import respx

from src.github import GitHubAPIClient

API_URL = "https://api.github.com"
OWNER = "owner"
REPO = "repo"
REPO_PATH = f"/repos/{OWNER}/{REPO}/git"


# =============================================================================
# Mock GitHub Fixtures
# =============================================================================


@pytest.fixture
def mock_github():
    """Mock GitHub Git Data API responses without network access.

    Uses respx to intercept HTTP requests. Defaults mirror a branch "dev"
    at commit "base-sha" whose tree is "base-tree-sha"; every blob gets
    "blob-sha", the new tree is "new-tree-sha" and the new commit is
    "commit-sha".

    Yields a dict of respx routes keyed by operation, plus:
    - requests: list of (step, json body) for every write, in order
    """
    requests: list[tuple[str, dict]] = []

    def get_commit(request):
        sha = re.search(r"/git/commits/([^/]+)$", request.url.path).group(1)
        return httpx.Response(200, json={
            "sha": sha,
            "tree": {"sha": "base-tree-sha", "url": f"{API_URL}{REPO_PATH}/trees/base-tree-sha"},
            "parents": [{"sha": "grandparent-sha"}],
            "message": "previous commit",
        })

    def recorder(step, response_json, status=201):
        def handler(request):
            requests.append((step, json.loads(request.content)))
            return httpx.Response(status, json=response_json)
        return handler

    with respx.mock(base_url=API_URL, assert_all_called=False) as respx_mock:
        routes = {
            "get_ref": respx_mock.get(path__regex=rf"{REPO_PATH}/ref/heads/.+").mock(
                return_value=httpx.Response(200, json={
                    "ref": "refs/heads/dev",
                    "object": {"sha": "base-sha", "type": "commit"},
                })
            ),
            "get_commit": respx_mock.get(path__regex=rf"{REPO_PATH}/commits/[^/]+$").mock(
                side_effect=get_commit
            ),
            "create_blob": respx_mock.post(f"{REPO_PATH}/blobs").mock(
                side_effect=recorder("create-blob", {"sha": "blob-sha"})
            ),
            "create_tree": respx_mock.post(f"{REPO_PATH}/trees").mock(
                side_effect=recorder("create-tree", {"sha": "new-tree-sha"})
            ),
            "create_commit": respx_mock.post(f"{REPO_PATH}/commits").mock(
                side_effect=recorder("create-commit", {
                    "sha": "commit-sha",
                    "tree": {"sha": "new-tree-sha"},
                    "parents": [{"sha": "base-sha"}],
                    "verification": {"verified": True, "reason": "valid"},
                })
            ),
            "update_ref": respx_mock.patch(path__regex=rf"{REPO_PATH}/refs/heads/.+").mock(
                side_effect=recorder("update-ref", {
                    "ref": "refs/heads/dev",
                    "object": {"sha": "commit-sha", "type": "commit"},
                }, status=200)
            ),
        }
        yield {**routes, "requests": requests, "base_url": API_URL}


@pytest.fixture
async def client():
    """Create an API client for testing."""
    async with GitHubAPIClient("test-token", base_url=API_URL) as c:
        yield c


# =============================================================================
# Local File Fixtures
# =============================================================================


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Temporary working directory holding file1.txt, file2.txt and run.sh."""
    (tmp_path / "file1.txt").write_text("first file\n")
    (tmp_path / "file2.txt").write_text("second file\n")
    script = tmp_path / "run.sh"
    script.write_text("#!/bin/sh\necho hi\n")
    script.chmod(0o755)
    (tmp_path / "file1.txt").chmod(0o644)
    (tmp_path / "file2.txt").chmod(0o644)

    monkeypatch.chdir(tmp_path)
    return tmp_path
