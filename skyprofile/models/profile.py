"""Profile data model."""

from collections.abc import Awaitable, Mapping
from datetime import datetime
from typing import Annotated, Any, TypeVar

from pydantic import (
    BaseModel,
    Field,
    PrivateAttr,
    computed_field,
    field_validator,
)

from skyprofile.core.actions import BotActions, PageOptions, page_options
from skyprofile.exceptions import DetachedProfileError
from skyprofile.logging import get_logger
from skyprofile.models.records import ListsPage, PostsPage

T = TypeVar("T")

# Counters must arrive as real numbers; "42" is a malformed payload, not 42
Count = Annotated[int, Field(strict=True, ge=0)]


class ProfileData(BaseModel):
    """Attributes used to construct a Profile."""

    did: str
    handle: str
    display_name: str | None = None
    description: str | None = None
    avatar: str | None = None
    banner: str | None = None

    follower_count: Count | None = None
    following_count: Count | None = None
    posts_count: Count | None = None

    labels: list[Any] | None = None
    indexed_at: datetime | None = None

    # Relationship between the bot and the user
    follow_uri: str | None = None
    followed_by_uri: str | None = None
    is_muted: bool | None = None
    block_uri: str | None = None
    is_blocked_by: bool | None = None

    @field_validator(
        "display_name", "description", "avatar", "banner",
        "follow_uri", "followed_by_uri", "block_uri",
    )
    @classmethod
    def _blank_is_absent(cls, value: str | None) -> str | None:
        return value or None


class Profile(ProfileData):
    """
    A Bluesky user profile as seen by the bot.

    The relationship predicates are computed from the stored URIs, so a
    successful follow() or block() shows up in is_following / is_blocking
    without refetching the profile.

    Example:
        profile = Profile.from_view(view, bot)
        if not profile.is_following:
            await profile.follow()
    """

    labels: list[Any] = Field(default_factory=list)

    _bot: BotActions | None = PrivateAttr(default=None)

    @field_validator("labels", mode="before")
    @classmethod
    def _labels_default(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def from_data(cls, data: ProfileData, bot: BotActions) -> "Profile":
        """
        Construct a Profile bound to a bot session.

        Args:
            data: Profile attributes
            bot: Bot session used for follow/block/mute and paginated queries
        """
        profile = cls(**{name: value for name, value in data if value is not None})
        profile.attach(bot)
        return profile

    def attach(self, bot: BotActions) -> None:
        """Set the bot session the profile acts through."""
        self._bot = bot

    @property
    def bot(self) -> BotActions:
        """Bot session; raises DetachedProfileError if none was attached."""
        if self._bot is None:
            raise DetachedProfileError(f"Profile {self.did} has no bot attached")
        return self._bot

    @computed_field
    @property
    def is_following(self) -> bool:
        """Whether the bot is following the user."""
        return self.follow_uri is not None

    @computed_field
    @property
    def followed_by(self) -> bool:
        """Whether the user is following the bot."""
        return self.followed_by_uri is not None

    @computed_field
    @property
    def is_blocking(self) -> bool:
        """Whether the bot is blocking the user."""
        return self.block_uri is not None

    @computed_field
    @property
    def is_mutual(self) -> bool:
        """Whether the bot and the user follow each other."""
        return self.is_following and self.followed_by

    async def _perform(self, event: str, call: Awaitable[T]) -> T:
        try:
            result = await call
        except Exception as e:
            get_logger("profile").warning(f"{event}_failed", did=self.did, error=str(e))
            raise
        get_logger("profile").debug(event, did=self.did)
        return result

    async def follow(self) -> str:
        """
        Follow the user.

        Returns:
            AT URI of the follow record
        """
        ref = await self._perform("profile_follow", self.bot.follow(self.did))
        self.follow_uri = ref.uri
        return ref.uri

    async def unfollow(self) -> None:
        """Unfollow the user. follow_uri is kept until the profile is refetched."""
        await self._perform("profile_unfollow", self.bot.unfollow(self.did))

    async def mute(self) -> None:
        """Mute the user."""
        await self._perform("profile_mute", self.bot.mute(self.did))

    async def unmute(self) -> None:
        """Unmute the user."""
        await self._perform("profile_unmute", self.bot.unmute(self.did))

    async def block(self) -> str:
        """
        Block the user.

        Returns:
            AT URI of the block record
        """
        ref = await self._perform("profile_block", self.bot.block(self.did))
        self.block_uri = ref.uri
        return ref.uri

    async def unblock(self) -> None:
        """Unblock the user. block_uri is kept until the profile is refetched."""
        await self._perform("profile_unblock", self.bot.unblock(self.did))

    async def get_posts(self, options: PageOptions | None = None) -> PostsPage:
        """
        Fetch the user's posts (up to 100 at a time, default 100).

        Args:
            options: limit and cursor, merged over the default page size

        Returns:
            Page of posts with a cursor for the next page
        """
        return await self._perform(
            "profile_get_posts",
            self.bot.get_user_posts(self.did, page_options(options)),
        )

    async def get_liked_posts(self, options: PageOptions | None = None) -> PostsPage:
        """Fetch posts the user has liked (up to 100 at a time, default 100)."""
        return await self._perform(
            "profile_get_liked_posts",
            self.bot.get_user_likes(self.did, page_options(options)),
        )

    async def get_lists(self, options: PageOptions | None = None) -> ListsPage:
        """Fetch the user's lists (up to 100 at a time, default 100)."""
        return await self._perform(
            "profile_get_lists",
            self.bot.get_user_lists(self.did, page_options(options)),
        )

    @classmethod
    def from_view(cls, view: Mapping[str, Any], bot: BotActions) -> "Profile":
        """
        Construct a Profile from an app.bsky.actor.defs profile view.

        Args:
            view: Raw profileView / profileViewBasic / profileViewDetailed payload
            bot: Bot session the profile acts through
        """
        from skyprofile.core.normalizer import profile_from_view

        return profile_from_view(view, bot)
