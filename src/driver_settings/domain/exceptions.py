"""Exceptions raised while building settings objects."""


class SettingsError(Exception):
    """Base exception for driver settings errors."""

    pass


class ArgumentError(SettingsError, ValueError):
    """Raised when a settings argument fails validation.

    The offending parameter is exposed as ``param_name`` so callers can
    report or correct it without parsing the message.
    """

    def __init__(self, param_name: str, message: str) -> None:
        self.param_name = param_name
        super().__init__(f"{message} (parameter '{param_name}')")


class ArgumentNullError(ArgumentError):
    """Raised when a required collection is explicitly supplied as None."""

    def __init__(self, param_name: str) -> None:
        super().__init__(param_name, "Value cannot be None")


class InvalidArgumentError(ArgumentError):
    """Raised when a value violates a range, length or type constraint."""

    pass
