"""Normalization of raw app.bsky.actor.defs profile views into Profile entities."""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from skyprofile.core.actions import BotActions
from skyprofile.exceptions import InvalidViewError
from skyprofile.logging import get_logger
from skyprofile.models.profile import Profile, ProfileData

# View key -> ProfileData field
DISPLAY_FIELDS = {
    "displayName": "display_name",
    "description": "description",
    "avatar": "avatar",
    "banner": "banner",
}

COUNT_FIELDS = {
    "followersCount": "follower_count",
    "followsCount": "following_count",
    "postsCount": "posts_count",
}

VIEWER_REFS = {
    "following": "follow_uri",
    "followedBy": "followed_by_uri",
    "blocking": "block_uri",
}

VIEWER_FLAGS = {
    "muted": "is_muted",
    "blockedBy": "is_blocked_by",
}


def parse_indexed_at(value: Any) -> datetime | None:
    """
    Parse an indexedAt timestamp.

    Examples:
        "2024-02-01T12:30:00.000Z" -> datetime(2024, 2, 1, 12, 30, tzinfo=UTC)
        "2024-02-01T12:30:00" -> datetime(2024, 2, 1, 12, 30, tzinfo=UTC)
        "yesterday" -> None
        None -> None
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def coerce_count(value: Any) -> int | None:
    """
    Accept a counter only when the view carries it as a number.

    Examples:
        42 -> 42
        42.0 -> 42
        "42" -> None
        True -> None
        -1 -> None
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if isinstance(value, int) and value >= 0:
        return value
    return None


def flatten_viewer(viewer: Any) -> dict:
    """
    Flatten the viewer state sub-object into relationship fields.

    Args:
        viewer: The view's "viewer" value, if any

    Returns:
        Dict of ProfileData relationship fields that were present and well-typed
    """
    if not isinstance(viewer, Mapping):
        return {}

    log = get_logger("normalizer")
    fields: dict = {}
    for key, name in VIEWER_REFS.items():
        ref = viewer.get(key)
        if isinstance(ref, str) and ref:
            fields[name] = ref
        elif ref is not None:
            log.debug("view_field_dropped", field=f"viewer.{key}", value=repr(ref))

    for key, name in VIEWER_FLAGS.items():
        flag = viewer.get(key)
        if isinstance(flag, bool):
            fields[name] = flag
        elif flag is not None:
            log.debug("view_field_dropped", field=f"viewer.{key}", value=repr(flag))

    return fields


def profile_from_view(view: Mapping[str, Any], bot: BotActions) -> Profile:
    """
    Transform a raw profile view into a Profile.

    Malformed optional values are dropped rather than rejected, so a
    partially-typed view still yields a usable snapshot.

    Args:
        view: profileView / profileViewBasic / profileViewDetailed payload
        bot: Bot session the profile acts through

    Returns:
        Profile snapshot

    Raises:
        InvalidViewError: If the view has no string did or handle
    """
    did = view.get("did")
    handle = view.get("handle")
    if not isinstance(did, str) or not isinstance(handle, str):
        raise InvalidViewError(f"Profile view is missing did or handle: did={did!r}")

    log = get_logger("normalizer").bind(did=did)
    data: dict = {"did": did, "handle": handle}

    for key, name in DISPLAY_FIELDS.items():
        value = view.get(key)
        if isinstance(value, str):
            data[name] = value

    labels = view.get("labels")
    data["labels"] = list(labels) if isinstance(labels, list) else []

    raw_indexed_at = view.get("indexedAt")
    data["indexed_at"] = parse_indexed_at(raw_indexed_at)
    if raw_indexed_at is not None and data["indexed_at"] is None:
        log.debug("view_field_dropped", field="indexedAt", value=repr(raw_indexed_at))

    for key, name in COUNT_FIELDS.items():
        raw = view.get(key)
        data[name] = coerce_count(raw)
        if raw is not None and data[name] is None:
            log.debug("view_field_dropped", field=key, value=repr(raw))

    data.update(flatten_viewer(view.get("viewer")))

    return Profile.from_data(ProfileData(**data), bot)
