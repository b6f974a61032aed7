"""Immutable driver settings models."""

from .cluster import ClusterSettings
from .connection import ConnectionSettings

__all__ = ["ClusterSettings", "ConnectionSettings"]
