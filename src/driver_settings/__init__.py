"""Immutable, validated settings for a database client's cluster and connections."""

from .domain import (
    DEFAULT_PORT,
    UNSET,
    ArgumentError,
    ArgumentNullError,
    BaseAuthenticator,
    BaseServerSelector,
    ClusterConnectionMode,
    CompressorConfiguration,
    CompressorType,
    ConnectionStringScheme,
    EndPoint,
    InvalidArgumentError,
    OptionalValue,
    SettingsError,
)
from .settings import ClusterSettings, ConnectionSettings

__all__ = [
    # Settings
    "ClusterSettings",
    "ConnectionSettings",
    # Optional values
    "UNSET",
    "OptionalValue",
    # Value types
    "DEFAULT_PORT",
    "EndPoint",
    "CompressorConfiguration",
    "CompressorType",
    "ClusterConnectionMode",
    "ConnectionStringScheme",
    # Collaborator interfaces
    "BaseAuthenticator",
    "BaseServerSelector",
    # Exceptions
    "SettingsError",
    "ArgumentError",
    "ArgumentNullError",
    "InvalidArgumentError",
]
