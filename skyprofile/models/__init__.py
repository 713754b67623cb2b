"""Pydantic models for skyprofile."""

from skyprofile.models.records import RecordRef, PostsPage, ListsPage
from skyprofile.models.profile import Profile, ProfileData

__all__ = [
    "Profile",
    "ProfileData",
    "RecordRef",
    "PostsPage",
    "ListsPage",
]
