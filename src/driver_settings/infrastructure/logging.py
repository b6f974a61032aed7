"""Loguru configuration for the package.

Modules obtain a logger through ``get_logger(__name__)``, which only binds
the name. Package records are disabled until ``setup_logging`` or
``configure_logger`` runs, or the host application calls
``logger.enable("driver_settings")``. Sinks installed by the host are never
touched unless one of the configure functions is called.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    from loguru import Logger

PACKAGE_NAME: t.Final = "driver_settings"

_DEVELOPMENT_FORMAT: t.Final = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)

_configured = False


def configure_logger(
    level: LogLevel | str = LogLevel.INFO,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace all loguru sinks with a single stderr sink.

    Production output is serialized to JSON, other environments get a
    readable line format (coloured only in development).
    """
    global _configured

    logger.remove()
    logger.configure(extra={"name": PACKAGE_NAME})
    if environment is Environment.PRODUCTION:
        logger.add(sys.stderr, level=str(level), serialize=True)
    else:
        logger.add(
            sys.stderr,
            level=str(level),
            format=_DEVELOPMENT_FORMAT,
            colorize=environment is Environment.DEVELOPMENT,
        )
    logger.enable(PACKAGE_NAME)
    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from library settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "Logger":
    """Return a logger bound to ``name``."""
    return logger.bind(name=name)


def is_configured() -> bool:
    """Whether configure_logger has run since the last reset."""
    return _configured


def reset_logging() -> None:
    """Remove all sinks and disable package records again."""
    global _configured

    logger.remove()
    logger.disable(PACKAGE_NAME)
    _configured = False


logger.disable(PACKAGE_NAME)
