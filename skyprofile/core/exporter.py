"""Export utilities for profile snapshots."""

from skyprofile.models.profile import Profile


def to_json(profile: Profile, indent: int = 2) -> str:
    """
    Convert a Profile to a JSON string.

    Args:
        profile: Profile to serialize
        indent: JSON indentation level

    Returns:
        JSON string, including the relationship predicates
    """
    return profile.model_dump_json(indent=indent)


def to_dict(profile: Profile) -> dict:
    """
    Convert a Profile to a JSON-compatible dictionary.

    The bot session reference is never included.
    """
    return profile.model_dump(mode="json")
