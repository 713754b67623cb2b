"""Custom exception hierarchy for skyprofile."""


class SkyProfileError(Exception):
    """Base exception for all skyprofile errors."""


class InvalidViewError(SkyProfileError):
    """Profile view payload is missing its identity fields."""


class ConfigError(SkyProfileError):
    """Invalid configuration."""


class DetachedProfileError(SkyProfileError):
    """Profile has no bot session to act through."""
