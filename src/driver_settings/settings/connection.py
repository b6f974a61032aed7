"""Per-connection settings."""

import typing as t
from dataclasses import dataclass
from datetime import timedelta

from ..domain import ensure
from ..domain.compression import CompressorConfiguration
from ..domain.handles import BaseAuthenticator
from ..domain.optional import UNSET, Settable, resolve_argument
from .base import BaseSettings, construction_guard, freeze_sequence

MAX_APPLICATION_NAME_LENGTH: t.Final = 128
DEFAULT_MAX_IDLE_TIME: t.Final = timedelta(minutes=10)
DEFAULT_MAX_LIFE_TIME: t.Final = timedelta(minutes=30)


@dataclass(frozen=True, init=False)
class ConnectionSettings(BaseSettings):
    """Settings applied to every connection opened to a server.

    Instances are immutable and valid by construction. Use ``with_`` to get
    a copy with some values replaced. They compare by value but are not
    hashable.

    Examples:
        >>> settings = ConnectionSettings(application_name="app1")
        >>> settings.with_(application_name="app2").application_name
        'app2'
        >>> settings.max_idle_time
        datetime.timedelta(seconds=600)
    """

    application_name: str | None
    authenticators: tuple[BaseAuthenticator, ...]
    compressors: tuple[CompressorConfiguration, ...]
    max_idle_time: timedelta
    max_life_time: timedelta

    # Unhashable: equality is field-wise, and fields may hold dicts
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        *,
        application_name: Settable[str | None] = UNSET,
        authenticators: Settable[t.Iterable[BaseAuthenticator]] = UNSET,
        compressors: Settable[t.Iterable[CompressorConfiguration]] = UNSET,
        max_idle_time: Settable[timedelta] = UNSET,
        max_life_time: Settable[timedelta] = UNSET,
    ) -> None:
        """Create connection settings.

        Args:
            application_name: Name sent to the server in the handshake,
                at most 128 characters
            authenticators: Authenticators run on each new connection
            compressors: Compressors offered to the server, in preference order
            max_idle_time: How long a pooled connection may sit unused
            max_life_time: How long a pooled connection may live in total

        Raises:
            ArgumentNullError: authenticators or compressors is None
            InvalidArgumentError: a value is out of range or of the wrong type
        """
        with construction_guard(type(self).__name__):
            values = {
                "application_name": ensure.is_none_or_not_longer_than(
                    resolve_argument(application_name, None),
                    MAX_APPLICATION_NAME_LENGTH,
                    "application_name",
                ),
                "authenticators": freeze_sequence(
                    resolve_argument(authenticators, ()),
                    "authenticators",
                    BaseAuthenticator,
                ),
                "compressors": freeze_sequence(
                    resolve_argument(compressors, ()),
                    "compressors",
                    CompressorConfiguration,
                ),
                "max_idle_time": _positive_duration(
                    resolve_argument(max_idle_time, DEFAULT_MAX_IDLE_TIME),
                    "max_idle_time",
                ),
                "max_life_time": _positive_duration(
                    resolve_argument(max_life_time, DEFAULT_MAX_LIFE_TIME),
                    "max_life_time",
                ),
            }
        self._freeze(values)

    def with_(
        self,
        *,
        application_name: Settable[str | None] = UNSET,
        authenticators: Settable[t.Iterable[BaseAuthenticator]] = UNSET,
        compressors: Settable[t.Iterable[CompressorConfiguration]] = UNSET,
        max_idle_time: Settable[timedelta] = UNSET,
        max_life_time: Settable[timedelta] = UNSET,
    ) -> "ConnectionSettings":
        """Return a new instance with the given values replaced.

        Omitted arguments keep this instance's values. The result is
        validated from scratch and this instance is left untouched.
        """
        return self._derive(
            application_name=application_name,
            authenticators=authenticators,
            compressors=compressors,
            max_idle_time=max_idle_time,
            max_life_time=max_life_time,
        )


def _positive_duration(value: t.Any, param_name: str) -> timedelta:
    ensure.is_instance_of(value, timedelta, param_name)
    return ensure.is_greater_than_zero(value, param_name)
