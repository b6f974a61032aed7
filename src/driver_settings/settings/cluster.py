"""Cluster topology settings."""

import typing as t
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta

from ..domain import ensure
from ..domain.endpoint import DEFAULT_PORT, EndPoint
from ..domain.enums import ClusterConnectionMode, ConnectionStringScheme
from ..domain.exceptions import InvalidArgumentError
from ..domain.handles import BaseServerSelector
from ..domain.optional import UNSET, Settable, resolve_argument
from .base import BaseSettings, construction_guard, freeze_mapping, freeze_sequence

DEFAULT_END_POINTS: t.Final = (EndPoint(host="localhost", port=DEFAULT_PORT),)
DEFAULT_MAX_SERVER_SELECTION_WAIT_QUEUE_SIZE: t.Final = 500
DEFAULT_SERVER_SELECTION_TIMEOUT: t.Final = timedelta(seconds=30)

KmsProviders = Mapping[str, Mapping[str, t.Any]]
SchemaMap = Mapping[str, Mapping[str, t.Any]]


@dataclass(frozen=True, init=False)
class ClusterSettings(BaseSettings):
    """Settings describing which servers make up a cluster and how to pick one.

    Selectors, KMS provider options and schema documents are carried for the
    cluster and encryption layers; nothing here interprets them. Instances
    compare by value but are not hashable.
    """

    connection_mode: ClusterConnectionMode
    end_points: tuple[EndPoint, ...]
    kms_providers: KmsProviders | None
    max_server_selection_wait_queue_size: int
    replica_set_name: str | None
    schema_map: SchemaMap | None
    scheme: ConnectionStringScheme
    server_selection_timeout: timedelta
    pre_server_selector: BaseServerSelector | None
    post_server_selector: BaseServerSelector | None

    # Unhashable: equality is field-wise, and fields may hold mappings
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        *,
        connection_mode: Settable[ClusterConnectionMode | str] = UNSET,
        end_points: Settable[t.Iterable[EndPoint]] = UNSET,
        kms_providers: Settable[KmsProviders | None] = UNSET,
        max_server_selection_wait_queue_size: Settable[int] = UNSET,
        replica_set_name: Settable[str | None] = UNSET,
        schema_map: Settable[SchemaMap | None] = UNSET,
        scheme: Settable[ConnectionStringScheme | str] = UNSET,
        server_selection_timeout: Settable[timedelta] = UNSET,
        pre_server_selector: Settable[BaseServerSelector | None] = UNSET,
        post_server_selector: Settable[BaseServerSelector | None] = UNSET,
    ) -> None:
        """Create cluster settings.

        Args:
            connection_mode: Topology discovery mode
            end_points: Seed list of servers
            kms_providers: Options per KMS provider name, for client side
                encryption
            max_server_selection_wait_queue_size: Maximum number of operations
                waiting for a server to be selected
            replica_set_name: Required replica set name, if any
            schema_map: JSON schema documents keyed by namespace, for client
                side encryption
            scheme: Scheme of the connection string these settings came from
            server_selection_timeout: How long to wait for a suitable server
            pre_server_selector: Selector applied before the built-in ones
            post_server_selector: Selector applied after the built-in ones

        Raises:
            ArgumentNullError: end_points is None
            InvalidArgumentError: a value is out of range or of the wrong type
        """
        with construction_guard(type(self).__name__):
            values = {
                "connection_mode": ensure.is_member_of(
                    resolve_argument(connection_mode, ClusterConnectionMode.AUTOMATIC),
                    ClusterConnectionMode,
                    "connection_mode",
                ),
                "end_points": freeze_sequence(
                    resolve_argument(end_points, DEFAULT_END_POINTS),
                    "end_points",
                    EndPoint,
                ),
                "kms_providers": freeze_mapping(
                    resolve_argument(kms_providers, None),
                    "kms_providers",
                    nested=True,
                ),
                "max_server_selection_wait_queue_size": _non_negative_int(
                    resolve_argument(
                        max_server_selection_wait_queue_size,
                        DEFAULT_MAX_SERVER_SELECTION_WAIT_QUEUE_SIZE,
                    ),
                    "max_server_selection_wait_queue_size",
                ),
                "replica_set_name": _optional_str(
                    resolve_argument(replica_set_name, None), "replica_set_name"
                ),
                "schema_map": freeze_mapping(
                    resolve_argument(schema_map, None), "schema_map", nested=True
                ),
                "scheme": ensure.is_member_of(
                    resolve_argument(scheme, ConnectionStringScheme.MONGODB),
                    ConnectionStringScheme,
                    "scheme",
                ),
                "server_selection_timeout": _non_negative_duration(
                    resolve_argument(
                        server_selection_timeout, DEFAULT_SERVER_SELECTION_TIMEOUT
                    ),
                    "server_selection_timeout",
                ),
                "pre_server_selector": resolve_argument(pre_server_selector, None),
                "post_server_selector": resolve_argument(post_server_selector, None),
            }
        self._freeze(values)

    def with_(
        self,
        *,
        connection_mode: Settable[ClusterConnectionMode | str] = UNSET,
        end_points: Settable[t.Iterable[EndPoint]] = UNSET,
        kms_providers: Settable[KmsProviders | None] = UNSET,
        max_server_selection_wait_queue_size: Settable[int] = UNSET,
        replica_set_name: Settable[str | None] = UNSET,
        schema_map: Settable[SchemaMap | None] = UNSET,
        scheme: Settable[ConnectionStringScheme | str] = UNSET,
        server_selection_timeout: Settable[timedelta] = UNSET,
        pre_server_selector: Settable[BaseServerSelector | None] = UNSET,
        post_server_selector: Settable[BaseServerSelector | None] = UNSET,
    ) -> "ClusterSettings":
        """Return a new instance with the given values replaced.

        Pass None explicitly to clear a nullable value; omitted arguments
        keep this instance's values.
        """
        return self._derive(
            connection_mode=connection_mode,
            end_points=end_points,
            kms_providers=kms_providers,
            max_server_selection_wait_queue_size=max_server_selection_wait_queue_size,
            replica_set_name=replica_set_name,
            schema_map=schema_map,
            scheme=scheme,
            server_selection_timeout=server_selection_timeout,
            pre_server_selector=pre_server_selector,
            post_server_selector=post_server_selector,
        )


def _non_negative_int(value: t.Any, param_name: str) -> int:
    # bool is an int subclass but never a sensible size
    if isinstance(value, bool):
        raise InvalidArgumentError(param_name, "Expected int, got bool")
    ensure.is_instance_of(value, int, param_name)
    return ensure.is_greater_than_or_equal_to_zero(value, param_name)


def _non_negative_duration(value: t.Any, param_name: str) -> timedelta:
    ensure.is_instance_of(value, timedelta, param_name)
    return ensure.is_greater_than_or_equal_to_zero(value, param_name)


def _optional_str(value: t.Any, param_name: str) -> str | None:
    if value is None:
        return None
    return ensure.is_instance_of(value, str, param_name)
