from cloudcraft.app import App, create_app
from cloudcraft.config.settings import Environment, LogLevel, Settings
from cloudcraft.infrastructure.logging import get_logger, is_configured


def test_defaults_to_production_settings():
    app = create_app()

    assert isinstance(app, App)
    assert app.settings == Settings()
    assert app.settings.environment == Environment.PRODUCTION
    assert app.settings.log_level == LogLevel.INFO


def test_keeps_given_settings(test_settings):
    app = create_app(settings=test_settings)

    assert app.settings is test_settings


def test_logging_is_configured_on_creation():
    """The autouse fixture resets logging, so only create_app configures it."""
    assert not is_configured()

    create_app(Settings(environment=Environment.TESTING))

    assert is_configured()


def test_module_loggers_work_after_setup(test_app):
    logger = get_logger("cloudcraft.client")

    logger.critical("visible at CRITICAL")
    logger.debug("filtered out at CRITICAL")

    assert is_configured()
