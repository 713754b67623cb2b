"""Unit tests for skyprofile log output - captured stdout, no network."""

import json
from unittest.mock import AsyncMock

import pytest
import structlog

from skyprofile.config import LogFormat, ProfileConfig
from skyprofile.core.normalizer import profile_from_view
from skyprofile.logging import configure_logging
from skyprofile.models.profile import Profile, ProfileData


MALFORMED_VIEW = {"did": "did:plc:alice", "handle": "alice.bsky.social", "followersCount": "42"}


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def json_events(out: str) -> list[dict]:
    return [json.loads(line) for line in out.splitlines() if line.strip()]


class TestLogLevel:
    """Test the configured level applies to package events."""

    def test_debug_events_filtered_at_info(self, capsys):
        configure_logging(ProfileConfig(log_level="INFO"))

        profile_from_view(MALFORMED_VIEW, AsyncMock())

        assert "view_field_dropped" not in capsys.readouterr().out

    def test_debug_events_shown_at_debug(self, capsys):
        configure_logging(ProfileConfig(log_level="DEBUG"))

        profile_from_view(MALFORMED_VIEW, AsyncMock())

        assert "view_field_dropped" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_failure_warning_shown_at_info(self, capsys):
        configure_logging(ProfileConfig(log_level="INFO"))
        bot = AsyncMock()
        bot.mute.side_effect = RuntimeError("rate limited")
        profile = Profile.from_data(ProfileData(did="did:plc:alice", handle="a"), bot)

        with pytest.raises(RuntimeError):
            await profile.mute()

        assert "profile_mute_failed" in capsys.readouterr().out


class TestLogFormat:
    """Test the configured format applies to package events."""

    def test_json_format(self, capsys):
        configure_logging(ProfileConfig(log_level="DEBUG", log_format=LogFormat.JSON))

        profile_from_view(MALFORMED_VIEW, AsyncMock())

        events = json_events(capsys.readouterr().out)
        assert events == [
            {
                "event": "view_field_dropped",
                "logger_name": "normalizer",
                "did": "did:plc:alice",
                "field": "followersCount",
                "value": "'42'",
                "level": "debug",
                "timestamp": events[0]["timestamp"],
            }
        ]

    @pytest.mark.asyncio
    async def test_json_failure_event(self, capsys):
        configure_logging(ProfileConfig(log_format=LogFormat.JSON))
        bot = AsyncMock()
        bot.block.side_effect = PermissionError("not authorized")
        profile = Profile.from_data(ProfileData(did="did:plc:alice", handle="a"), bot)

        with pytest.raises(PermissionError):
            await profile.block()

        [event] = json_events(capsys.readouterr().out)
        assert event["event"] == "profile_block_failed"
        assert event["level"] == "warning"
        assert event["error"] == "not authorized"

    def test_reconfigure_takes_effect(self, capsys):
        configure_logging(ProfileConfig(log_level="DEBUG", log_format=LogFormat.CONSOLE))
        profile_from_view(MALFORMED_VIEW, AsyncMock())
        capsys.readouterr()

        configure_logging(ProfileConfig(log_level="DEBUG", log_format=LogFormat.JSON))
        profile_from_view(MALFORMED_VIEW, AsyncMock())

        assert json_events(capsys.readouterr().out)[0]["event"] == "view_field_dropped"
