"""Logging setup built on loguru.

Components receive a logger through their constructor and default to
``get_logger(__name__)``. Configuration is global to the process because
loguru keeps a single handler registry.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
_PLAIN_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name} - {message}"

_configured = False


def configure_logger(
    level: LogLevel = LogLevel.INFO,
    environment: Environment = Environment.PRODUCTION,
) -> None:
    """Replace all loguru handlers with one suited to the environment.

    - development: coloured, with source location and diagnostics
    - production: one JSON object per line
    - testing: plain text on stderr

    Args:
        level: Minimum level to emit
        environment: Runtime environment deciding the output format
    """
    global _configured

    logger.remove()

    match environment:
        case Environment.DEVELOPMENT:
            logger.add(
                sys.stderr,
                level=level.value,
                format=_DEVELOPMENT_FORMAT,
                colorize=True,
                backtrace=True,
                diagnose=True,
            )
        case Environment.PRODUCTION:
            logger.add(
                sys.stderr,
                level=level.value,
                serialize=True,
                backtrace=False,
                diagnose=False,
            )
        case Environment.TESTING:
            logger.add(
                sys.stderr,
                level=level.value,
                format=_PLAIN_FORMAT,
                colorize=False,
                diagnose=False,
            )

    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str | None = None) -> "loguru.Logger":
    """Return the shared loguru logger, configuring defaults on first use.

    Args:
        name: Optional component name bound into the record's extra dict
    """
    if not _configured:
        configure_logger()
    if name is None:
        return logger
    return logger.bind(component=name)


def is_configured() -> bool:
    """Whether configure_logger has run since the last reset."""
    return _configured


def reset_logging() -> None:
    """Remove every handler and mark logging as unconfigured."""
    global _configured

    logger.remove()
    _configured = False
