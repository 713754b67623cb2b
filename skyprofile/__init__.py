"""skyprofile - Bluesky user profiles and bot relationship state."""

from skyprofile.config import ProfileConfig
from skyprofile.models.records import RecordRef, PostsPage, ListsPage
from skyprofile.models.profile import Profile, ProfileData
from skyprofile.core.actions import BotActions, PageOptions, DEFAULT_PAGE_LIMIT
from skyprofile.core.normalizer import profile_from_view
from skyprofile.core.exporter import to_json, to_dict
from skyprofile.exceptions import SkyProfileError, InvalidViewError, ConfigError

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "Profile",
    "ProfileData",
    "profile_from_view",
    "BotActions",
    "PageOptions",
    "DEFAULT_PAGE_LIMIT",
    "ProfileConfig",
    # Records
    "RecordRef",
    "PostsPage",
    "ListsPage",
    # Export utilities
    "to_json",
    "to_dict",
    # Errors
    "SkyProfileError",
    "InvalidViewError",
    "ConfigError",
    "__version__",
]
