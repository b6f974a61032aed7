"""Network end point model."""

import typing as t

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PORT: t.Final = 27017


class EndPoint(BaseModel):
    """A server address: host name or IP literal plus port."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1, description="Host name or IP address")
    port: int = Field(
        default=DEFAULT_PORT,
        ge=0,
        le=65535,
        description="TCP port",
    )

    @field_validator("host")
    @classmethod
    def _normalize_host(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError("Host cannot be empty")
        return normalized

    def __str__(self) -> str:
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"

    @classmethod
    def parse(cls, value: str) -> "EndPoint":
        """Create an end point from ``host``, ``host:port`` or ``[ipv6]:port``.

        Bare IPv6 literals without brackets are accepted and use the
        default port.

        Examples:
            >>> EndPoint.parse("db1.example.com:27018")
            EndPoint(host='db1.example.com', port=27018)
            >>> str(EndPoint.parse("[::1]"))
            '[::1]:27017'
        """
        text = value.strip()
        if not text:
            raise ValueError("End point cannot be empty")

        port_part: str | None = None
        if text.startswith("["):
            host, closed, rest = text[1:].partition("]")
            if not closed or (rest and not rest.startswith(":")):
                raise ValueError(f"Invalid end point '{value}'")
            if rest:
                port_part = rest[1:]
        elif text.count(":") == 1:
            host, port_part = text.split(":")
        else:
            host = text

        port = DEFAULT_PORT
        if port_part is not None:
            if not port_part.isdigit():
                raise ValueError(f"Invalid port in end point '{value}'")
            port = int(port_part)

        return cls(host=host, port=port)
