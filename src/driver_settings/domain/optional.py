"""Optional-value wrapper separating "not supplied" from "supplied".

Settings constructors take every argument as keyword-only with ``UNSET`` as
the default. An explicit ``None`` is therefore a supplied value, which lets
``with_()`` clear a nullable field while an omitted argument keeps the
current one.
"""

import typing as t
from dataclasses import dataclass

T = t.TypeVar("T")


class _Unset:
    """Marker type for arguments the caller did not pass."""

    _instance: t.ClassVar["_Unset | None"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: t.Final = _Unset()


@dataclass(frozen=True)
class OptionalValue(t.Generic[T]):
    """A value that is either present (possibly None) or absent.

    ``value`` is None when absent; use ``is_present`` to tell the two apart.
    """

    is_present: bool
    value: T | None = None

    @classmethod
    def of(cls, value: T) -> "OptionalValue[T]":
        """Wrap a supplied value, including None or a default-equal value."""
        return cls(is_present=True, value=value)

    @classmethod
    def absent(cls) -> "OptionalValue[t.Any]":
        """Return the shared absent instance."""
        return _ABSENT

    @classmethod
    def from_argument(cls, argument: t.Any) -> "OptionalValue[t.Any]":
        """Adapt a keyword argument into an OptionalValue.

        ``UNSET`` becomes absent, an OptionalValue is passed through, and any
        other object is wrapped as present.
        """
        if argument is UNSET:
            return _ABSENT
        if isinstance(argument, OptionalValue):
            return argument
        return cls.of(argument)

    def resolve(self, fallback: T) -> T:
        """Return the wrapped value if present, otherwise ``fallback``."""
        if self.is_present:
            return t.cast(T, self.value)
        return fallback


_ABSENT: t.Final[OptionalValue[t.Any]] = OptionalValue(is_present=False)

# Accepted type for a settings keyword argument.
Settable = t.Union[T, OptionalValue[T], _Unset]


def resolve_argument(argument: t.Any, fallback: T) -> T:
    """Resolve a raw keyword argument against ``fallback``."""
    return OptionalValue.from_argument(argument).resolve(fallback)
