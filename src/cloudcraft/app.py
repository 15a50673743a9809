"""Application wiring."""

from dataclasses import dataclass

from .config.settings import Settings
from .infrastructure.logging import setup_logging


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds the cross-cutting Settings. API connection settings are not part of
    it: each Client gets its own ClientConfig.
    """

    settings: Settings


def create_app(settings: Settings | None = None) -> App:
    """Create an App and configure logging from its settings."""
    settings = settings or Settings()
    setup_logging(settings)
    return App(settings=settings)
