"""Pytest configuration and fixtures for driver_settings tests."""

import typing as t

import loguru
import pytest

from driver_settings.config.settings import Environment, LogLevel, Settings
from driver_settings.domain import (
    BaseAuthenticator,
    BaseServerSelector,
    CompressorConfiguration,
    CompressorType,
    EndPoint,
)
from driver_settings.infrastructure.logging import reset_logging, setup_logging


@pytest.fixture(autouse=True)
def quiet_logging() -> t.Iterator[None]:
    """Keep log output minimal during tests and leave a clean state behind."""
    reset_logging()
    setup_logging(
        Settings(environment=Environment.TESTING, log_level=LogLevel.CRITICAL)
    )
    yield
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger that captures log calls."""
    return mocker.Mock(spec=loguru.logger)


@pytest.fixture
def make_authenticator(mocker):
    """Factory for opaque authenticator handles."""

    def _make(name: str = "SCRAM-SHA-256"):
        authenticator = mocker.Mock(spec=BaseAuthenticator)
        authenticator.name = name
        return authenticator

    return _make


@pytest.fixture
def make_server_selector(mocker):
    """Factory for opaque server selector handles."""

    def _make():
        return mocker.Mock(spec=BaseServerSelector)

    return _make


@pytest.fixture
def zlib_compressor():
    """A zlib compressor configuration."""
    return CompressorConfiguration(type=CompressorType.ZLIB, properties={"level": 6})


@pytest.fixture
def snappy_compressor():
    """A snappy compressor configuration."""
    return CompressorConfiguration(type=CompressorType.SNAPPY)


@pytest.fixture
def replica_set_end_points():
    """Seed list for a three member replica set."""
    return [
        EndPoint(host="db1.example.com", port=27017),
        EndPoint(host="db2.example.com", port=27017),
        EndPoint(host="db3.example.com", port=27018),
    ]
