"""Async HTTP client for the GitHub Git Data REST API."""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .models import (
    BlobCreate,
    CommitCreate,
    GitCommit,
    GitObject,
    GitRef,
    RefUpdate,
    TreeCreate,
)

DEFAULT_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = logging.getLogger(__name__)


class RemoteAPIError(Exception):
    """Base exception for GitHub API and transport failures."""

    def __init__(self, message: str, status_code: int | None = None, step: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.step = step


class NotFoundError(RemoteAPIError):
    """The branch, commit or repository does not exist remotely."""

    pass


class RemoteConflictError(RemoteAPIError):
    """The remote rejected the update, e.g. a non-fast-forward ref move."""

    pass


class GitHubAPIClient:
    """Async HTTP client for the GitHub Git Data API.

    Each method maps to exactly one REST call. There is no retry logic:
    any failure is raised to the caller as a RemoteAPIError subclass.

    Args:
        token: Bearer credential (app installation token or PAT)
        base_url: Base URL for the API (default: https://api.github.com)
        timeout: Request timeout in seconds (default: 30)
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "User-Agent": "signed-commit",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers=headers,
        )

    async def __aenter__(self) -> "GitHubAPIClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def _request(self, step: str, method: str, url: str, **kwargs: Any) -> Any:
        """Send a request and return the parsed JSON body.

        Args:
            step: Name of the remote operation, used in error messages
            method: HTTP method
            url: Path relative to base_url

        Raises:
            NotFoundError: On HTTP 404
            RemoteConflictError: On HTTP 409, or 422 from a ref update
            RemoteAPIError: On any other HTTP or transport failure
        """
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            error_msg = f"{step} failed: {e.__class__.__name__}: {e}"
            logger.error(error_msg)
            raise RemoteAPIError(error_msg, step=step) from e
        return self._handle_response(step, response)

    def _handle_response(self, step: str, response: httpx.Response) -> Any:
        """Handle HTTP response and raise errors if needed.

        Args:
            step: Name of the remote operation
            response: HTTP response from the API

        Returns:
            Parsed JSON response data

        Raises:
            RemoteAPIError: If the API returns an error status
        """
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            error_msg = f"{step} failed: {status} {e.request.method} {e.request.url.path}"
            try:
                error_data = e.response.json()
            except ValueError:
                error_msg += f" - {e.response.text}"
            else:
                if isinstance(error_data, dict):
                    error_data = error_data.get("message", error_data)
                error_msg += f" - {error_data}"
            logger.error(error_msg)

            if status == 404:
                raise NotFoundError(error_msg, status, step) from e
            if status == 409 or (status == 422 and step == "update-ref"):
                raise RemoteConflictError(error_msg, status, step) from e
            raise RemoteAPIError(error_msg, status, step) from e

        try:
            return response.json()
        except ValueError as e:
            error_msg = f"{step} failed: {response.status_code} response is not JSON - {response.text[:200]}"
            logger.error(error_msg)
            raise RemoteAPIError(error_msg, response.status_code, step) from e

    def _validate(self, step: str, model: type[ModelT], data: Any) -> ModelT:
        """Parse a response body into model.

        Raises:
            RemoteAPIError: If the body does not have the expected shape
        """
        try:
            return model.model_validate(data)
        except ValidationError as e:
            error_msg = f"{step} failed: unexpected response for {model.__name__}: {e}"
            logger.error(error_msg)
            raise RemoteAPIError(error_msg, step=step) from e

    # Refs

    async def get_ref(self, owner: str, repo: str, ref: str) -> GitRef:
        """Look up a single reference.

        Args:
            owner: Repository owner
            repo: Repository name
            ref: Reference without the refs/ prefix (e.g. "heads/main")

        Returns:
            The reference and the object it points at

        Raises:
            NotFoundError: If the reference does not exist
        """
        logger.debug(f"Fetching ref {ref} in {owner}/{repo}")
        data = await self._request("get-ref", "GET", f"/repos/{owner}/{repo}/git/ref/{ref}")
        return self._validate("get-ref", GitRef, data)

    async def update_ref(self, owner: str, repo: str, ref: str, update: RefUpdate) -> GitRef:
        """Move a reference to a new object.

        Args:
            owner: Repository owner
            repo: Repository name
            ref: Reference without the refs/ prefix (e.g. "heads/main")
            update: Target sha and force flag

        Raises:
            RemoteConflictError: If the update is not a fast forward and not forced
        """
        logger.info(f"Updating ref {ref} in {owner}/{repo} to {update.sha} (force={update.force})")
        data = await self._request(
            "update-ref",
            "PATCH",
            f"/repos/{owner}/{repo}/git/refs/{ref}",
            json=update.model_dump(mode="json"),
        )
        return self._validate("update-ref", GitRef, data)

    # Objects

    async def get_commit(self, owner: str, repo: str, sha: str) -> GitCommit:
        """Get a commit object by sha.

        Raises:
            NotFoundError: If the commit does not exist
        """
        logger.debug(f"Fetching commit {sha} in {owner}/{repo}")
        data = await self._request("get-commit", "GET", f"/repos/{owner}/{repo}/git/commits/{sha}")
        return self._validate("get-commit", GitCommit, data)

    async def create_blob(self, owner: str, repo: str, blob: BlobCreate) -> GitObject:
        """Upload file content as a blob."""
        logger.info(f"Creating blob in {owner}/{repo} ({len(blob.content)} encoded bytes)")
        data = await self._request(
            "create-blob",
            "POST",
            f"/repos/{owner}/{repo}/git/blobs",
            json=blob.model_dump(mode="json"),
        )
        return self._validate("create-blob", GitObject, data)

    async def create_tree(self, owner: str, repo: str, tree: TreeCreate) -> GitObject:
        """Create a tree layered on top of tree.base_tree."""
        logger.info(f"Creating tree in {owner}/{repo} with {len(tree.tree)} entries on {tree.base_tree}")
        data = await self._request(
            "create-tree",
            "POST",
            f"/repos/{owner}/{repo}/git/trees",
            json=tree.model_dump(exclude_none=True, mode="json"),
        )
        return self._validate("create-tree", GitObject, data)

    async def create_commit(self, owner: str, repo: str, commit: CommitCreate) -> GitCommit:
        """Create a commit object. GitHub signs it with its own key."""
        logger.info(f"Creating commit in {owner}/{repo} on tree {commit.tree}")
        data = await self._request(
            "create-commit",
            "POST",
            f"/repos/{owner}/{repo}/git/commits",
            json=commit.model_dump(mode="json"),
        )
        return self._validate("create-commit", GitCommit, data)
