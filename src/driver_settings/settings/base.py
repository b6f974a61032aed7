"""Construction and derivation plumbing shared by the settings classes."""

import dataclasses
import typing as t
from collections.abc import Iterable, Mapping, Set
from contextlib import contextmanager
from types import MappingProxyType

from ..domain import ensure
from ..domain.exceptions import ArgumentError, InvalidArgumentError
from ..domain.optional import UNSET, OptionalValue
from ..infrastructure.logging import get_logger

SettingsT = t.TypeVar("SettingsT", bound="BaseSettings")

_logger = get_logger(__name__)


class BaseSettings:
    """Base for frozen settings dataclasses.

    Subclasses are declared with ``@dataclass(frozen=True, init=False)`` and
    write their own keyword-only ``__init__``: resolve every argument against
    its default, validate it, then hand the results to ``_freeze``. Their
    ``with_`` passes its arguments straight to ``_derive``, which feeds the
    current values back through that same ``__init__``.
    """

    def _freeze(self, values: Mapping[str, t.Any]) -> None:
        for name, value in values.items():
            object.__setattr__(self, name, value)

    def _derive(self: SettingsT, **overrides: t.Any) -> SettingsT:
        arguments: dict[str, OptionalValue[t.Any]] = {}
        overridden: list[str] = []
        for field in dataclasses.fields(self):  # type: ignore[arg-type]
            override = OptionalValue.from_argument(overrides.get(field.name, UNSET))
            if override.is_present:
                overridden.append(field.name)
            arguments[field.name] = OptionalValue.of(
                override.resolve(getattr(self, field.name))
            )
        _logger.debug(
            "Deriving {settings_type} with overrides: {overridden}",
            settings_type=type(self).__name__,
            overridden=overridden,
        )
        return type(self)(**arguments)


@contextmanager
def construction_guard(settings_type: str) -> t.Iterator[None]:
    """Log a rejected construction before letting the error propagate."""
    try:
        yield
    except ArgumentError as exc:
        _logger.debug(
            "Rejected {settings_type}: {error}",
            settings_type=settings_type,
            error=str(exc),
            param_name=exc.param_name,
        )
        raise


def freeze_sequence(
    value: t.Any, param_name: str, item_type: type | None = None
) -> tuple[t.Any, ...]:
    """Copy a required sequence argument into a tuple.

    Strings, sets and mappings are not accepted as sequences. With
    ``item_type`` every element must be an instance of it.
    """
    ensure.is_not_none(value, param_name)
    if isinstance(value, (str, bytes, Set, Mapping)) or not isinstance(
        value, Iterable
    ):
        raise InvalidArgumentError(
            param_name, f"Expected a sequence, got {type(value).__name__}"
        )
    items = tuple(value)
    if item_type is not None:
        for item in items:
            ensure.is_instance_of(item, item_type, param_name)
    return items


def freeze_mapping(
    value: t.Any, param_name: str, *, nested: bool = False
) -> Mapping[str, t.Any] | None:
    """Copy an optional mapping argument into a read-only view.

    With ``nested`` every value must itself be a mapping and is copied the
    same way, one level down.
    """
    if value is None:
        return None
    ensure.is_instance_of(value, Mapping, param_name)
    if not nested:
        return MappingProxyType(dict(value))

    snapshot = {}
    for key, inner in value.items():
        ensure.is_instance_of(inner, Mapping, param_name)
        snapshot[key] = MappingProxyType(dict(inner))
    return MappingProxyType(snapshot)
