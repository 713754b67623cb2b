"""Records exchanged with the bot collaborator."""

from typing import Any

from pydantic import BaseModel


class RecordRef(BaseModel):
    """Reference to a repository record created by a follow or block."""

    uri: str
    cid: str | None = None


class PostsPage(BaseModel):
    """One page of a user's posts or liked posts."""

    cursor: str | None = None
    posts: list[Any] = []


class ListsPage(BaseModel):
    """One page of a user's lists."""

    cursor: str | None = None
    lists: list[Any] = []
