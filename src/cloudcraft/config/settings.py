"""Application settings shared by the library and the CLI."""

from dataclasses import dataclass, fields
from enum import Enum


class Environment(Enum):
    """Runtime environment for the application.

    Kept small and explicit to support simple environment-driven behavior
    without introducing configuration dependencies.
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class Settings:
    """Application settings used to bootstrap logging and the CLI.

    API connection settings live in ClientConfig; this container only holds
    cross-cutting concerns.
    """

    environment: Environment = Environment.PRODUCTION
    log_level: LogLevel = LogLevel.INFO


def build_settings(**overrides: object) -> Settings:
    """Build Settings from keyword overrides, ignoring None values.

    Lets CLI options that were not supplied fall through to the defaults.

    Raises:
        TypeError: If an override does not name a Settings field
    """
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")

    values = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**values)  # type: ignore[arg-type]
