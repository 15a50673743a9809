"""Configuration - API connection config and application settings."""

from .client import (
    API_KEY_LENGTH,
    DEFAULT_HOST,
    DEFAULT_PATH,
    DEFAULT_PORT,
    DEFAULT_RATE_LIMIT,
    DEFAULT_SCHEME,
    DEFAULT_TIMEOUT,
    ClientConfig,
)
from .settings import Environment, LogLevel, Settings, build_settings

__all__ = [
    "ClientConfig",
    "API_KEY_LENGTH",
    "DEFAULT_SCHEME",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_PATH",
    "DEFAULT_TIMEOUT",
    "DEFAULT_RATE_LIMIT",
    "Environment",
    "LogLevel",
    "Settings",
    "build_settings",
]
