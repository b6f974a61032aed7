"""Precondition checks for settings arguments.

Each check returns its value unchanged on success so it can wrap the
expression being assigned, and raises an ArgumentError subclass naming the
parameter otherwise.
"""

import enum
import operator
import typing as t

from .exceptions import ArgumentNullError, InvalidArgumentError

T = t.TypeVar("T")
E = t.TypeVar("E", bound=enum.Enum)


def is_not_none(value: T | None, param_name: str) -> T:
    """Reject an explicit None."""
    if value is None:
        raise ArgumentNullError(param_name)
    return value


def is_instance_of(value: t.Any, expected_type: type[T], param_name: str) -> T:
    """Reject values that are not instances of ``expected_type``."""
    if not isinstance(value, expected_type):
        raise InvalidArgumentError(
            param_name,
            f"Expected {expected_type.__name__}, got {type(value).__name__}",
        )
    return value


def is_member_of(value: t.Any, enum_type: type[E], param_name: str) -> E:
    """Coerce ``value`` to a member of ``enum_type``.

    Members pass through; raw values are looked up by value.
    """
    try:
        return enum_type(value)
    except ValueError as exc:
        allowed = ", ".join(str(member.value) for member in enum_type)
        raise InvalidArgumentError(
            param_name,
            f"Invalid {enum_type.__name__} {value!r}, expected one of: {allowed}",
        ) from exc


def _compare_with_zero(
    value: t.Any, compare: t.Callable[[t.Any, t.Any], bool], param_name: str
) -> bool:
    # type(value)() is the zero of int, float and timedelta alike
    try:
        return compare(value, type(value)())
    except TypeError as exc:
        raise InvalidArgumentError(
            param_name, f"Value {value!r} is not comparable with zero"
        ) from exc


def is_greater_than_zero(value: T, param_name: str) -> T:
    """Reject values less than or equal to zero."""
    if not _compare_with_zero(value, operator.gt, param_name):
        raise InvalidArgumentError(
            param_name, f"Value must be greater than zero, got {value!r}"
        )
    return value


def is_greater_than_or_equal_to_zero(value: T, param_name: str) -> T:
    """Reject negative values."""
    if not _compare_with_zero(value, operator.ge, param_name):
        raise InvalidArgumentError(
            param_name,
            f"Value must be greater than or equal to zero, got {value!r}",
        )
    return value


def is_none_or_not_longer_than(
    value: str | None, max_length: int, param_name: str
) -> str | None:
    """Allow None, otherwise reject strings longer than ``max_length``."""
    if value is None:
        return value
    is_instance_of(value, str, param_name)
    if len(value) > max_length:
        raise InvalidArgumentError(
            param_name,
            f"Value must be at most {max_length} characters, got {len(value)}",
        )
    return value
