"""Enumerations shared by the settings models."""

import enum


class ClusterConnectionMode(enum.StrEnum):
    """How the client discovers and treats the servers it is given."""

    AUTOMATIC = "automatic"
    DIRECT = "direct"
    REPLICA_SET = "replica_set"
    SHARDED = "sharded"
    STANDALONE = "standalone"


class ConnectionStringScheme(enum.StrEnum):
    """Connection string scheme the cluster settings were built from."""

    MONGODB = "mongodb"
    MONGODB_SRV = "mongodb+srv"  # seed list resolved through DNS SRV records
