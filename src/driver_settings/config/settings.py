import enum
import os
import typing as t
from dataclasses import dataclass
from enum import Enum

ENVIRONMENT_VARIABLE: t.Final = "DRIVER_SETTINGS_ENV"
LOG_LEVEL_VARIABLE: t.Final = "DRIVER_SETTINGS_LOG_LEVEL"


class Environment(Enum):
    """Runtime environment the library is embedded in.

    Only affects how log output is rendered.
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(enum.StrEnum):
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
    """Library level settings, kept apart from the driver settings models.

    Holds only what the ambient infrastructure (logging) needs.
    """

    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel = LogLevel.INFO

    @classmethod
    def from_env(cls, environ: t.Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables, ignoring unset ones."""
        environ = os.environ if environ is None else environ
        environment = environ.get(ENVIRONMENT_VARIABLE)
        log_level = environ.get(LOG_LEVEL_VARIABLE)
        return build_settings(
            environment=Environment(environment.lower()) if environment else None,
            log_level=LogLevel(log_level.upper()) if log_level else None,
        )


def build_settings(**overrides: t.Any) -> Settings:
    """Create Settings, skipping overrides that are None."""
    return Settings(
        **{key: value for key, value in overrides.items() if value is not None}
    )
