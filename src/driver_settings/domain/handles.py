"""Interfaces for collaborators referenced by settings.

Settings store these objects by reference and never call them; the
interfaces only document what cluster and connection code expects.
"""

import typing as t
from abc import ABC, abstractmethod


class BaseAuthenticator(ABC):
    """Authenticates a freshly opened connection."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Mechanism name, e.g. ``SCRAM-SHA-256``."""
        pass


class BaseServerSelector(ABC):
    """Narrows the servers eligible for an operation."""

    @abstractmethod
    def select_servers(
        self, cluster: t.Any, servers: t.Sequence[t.Any]
    ) -> t.Sequence[t.Any]:
        """Return the subset of ``servers`` that remain eligible.

        Args:
            cluster: Description of the cluster being selected from
            servers: Candidate server descriptions
        """
        pass
