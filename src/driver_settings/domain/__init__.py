"""Domain layer - value types, validation checks and exceptions."""

from .compression import CompressorConfiguration, CompressorType
from .endpoint import DEFAULT_PORT, EndPoint
from .enums import ClusterConnectionMode, ConnectionStringScheme
from .exceptions import (
    ArgumentError,
    ArgumentNullError,
    InvalidArgumentError,
    SettingsError,
)
from .handles import BaseAuthenticator, BaseServerSelector
from .optional import UNSET, OptionalValue, Settable

__all__ = [
    # Optional values
    "UNSET",
    "OptionalValue",
    "Settable",
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
