"""Boundary contract with the bot session that performs network actions."""

from typing import Protocol, TypedDict

from skyprofile.models.records import ListsPage, PostsPage, RecordRef

# Page size requested when the caller does not pass one; the bot enforces the bound
DEFAULT_PAGE_LIMIT = 100


class PageOptions(TypedDict, total=False):
    """Pagination options for user post, like and list queries."""

    limit: int
    cursor: str


class BotActions(Protocol):
    """
    Actions a Profile delegates to the authenticated bot.

    Implementations own authentication, rate limiting and retries. Errors
    they raise reach the Profile caller unchanged.
    """

    async def follow(self, did: str) -> RecordRef: ...

    async def unfollow(self, did: str) -> None: ...

    async def mute(self, did: str) -> None: ...

    async def unmute(self, did: str) -> None: ...

    async def block(self, did: str) -> RecordRef: ...

    async def unblock(self, did: str) -> None: ...

    async def get_user_posts(self, did: str, options: PageOptions) -> PostsPage: ...

    async def get_user_likes(self, did: str, options: PageOptions) -> PostsPage: ...

    async def get_user_lists(self, did: str, options: PageOptions) -> ListsPage: ...


def page_options(options: PageOptions | None) -> PageOptions:
    """Merge caller options over the default page size."""
    return {"limit": DEFAULT_PAGE_LIMIT, **(options or {})}
