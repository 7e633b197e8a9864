"""Pydantic models for GitHub Git Data API requests and responses."""

from typing import Literal

from pydantic import BaseModel, Field


class GitObject(BaseModel):
    """Any object response that is only needed for its sha."""

    sha: str
    url: str | None = None

    model_config = {"extra": "allow"}


class RefObject(BaseModel):
    """Object a reference points at."""

    sha: str
    type: str = "commit"

    model_config = {"extra": "allow"}


class GitRef(BaseModel):
    """Reference response model."""

    ref: str
    object: RefObject

    model_config = {"extra": "allow"}


class GitCommit(BaseModel):
    """Commit response model."""

    sha: str
    tree: GitObject
    parents: list[GitObject] = Field(default_factory=list)
    message: str = ""

    model_config = {"extra": "allow"}


class BlobCreate(BaseModel):
    """Request model for creating a blob."""

    content: str
    encoding: Literal["base64", "utf-8"] = "base64"


class TreeEntry(BaseModel):
    """A single entry layered onto the base tree."""

    path: str
    mode: Literal["100644", "100755"]
    type: Literal["blob"] = "blob"
    sha: str


class TreeCreate(BaseModel):
    """Request model for creating a tree."""

    base_tree: str | None = None
    tree: list[TreeEntry]


class CommitCreate(BaseModel):
    """Request model for creating a commit."""

    message: str
    tree: str
    parents: list[str]


class RefUpdate(BaseModel):
    """Request model for moving a reference."""

    sha: str
    force: bool = False
