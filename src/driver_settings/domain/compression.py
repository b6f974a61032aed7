"""Wire compressor configuration."""

import enum
import typing as t

from pydantic import BaseModel, ConfigDict, Field


class CompressorType(enum.StrEnum):
    """Compressors a connection can negotiate with the server."""

    NOOP = "noop"
    SNAPPY = "snappy"
    ZLIB = "zlib"
    ZSTANDARD = "zstd"


class CompressorConfiguration(BaseModel):
    """A compressor to offer during the handshake plus its options.

    Options are passed through to the codec untouched, e.g. ``{"level": 6}``
    for zlib.
    """

    model_config = ConfigDict(frozen=True)

    type: CompressorType = Field(description="Compressor to negotiate")
    properties: dict[str, t.Any] = Field(
        default_factory=dict,
        description="Codec specific options",
    )
