"""Tests for the EndPoint model."""

import pytest
from pydantic import ValidationError

from driver_settings.domain.endpoint import DEFAULT_PORT, EndPoint


class TestEndPointValidation:
    """Field validation."""

    def test_defaults_to_standard_port(self):
        """Port defaults to the standard server port."""
        assert EndPoint(host="localhost").port == DEFAULT_PORT == 27017

    def test_host_is_normalized(self):
        """Host is stripped and lowercased."""
        assert EndPoint(host="  DB1.Example.COM ").host == "db1.example.com"

    @pytest.mark.parametrize("host", ["", "   "])
    def test_rejects_empty_host(self, host):
        """Empty hosts raise ValidationError."""
        with pytest.raises(ValidationError):
            EndPoint(host=host)

    @pytest.mark.parametrize("port", [-1, 65536])
    def test_rejects_out_of_range_port(self, port):
        """Ports outside 0..65535 raise ValidationError."""
        with pytest.raises(ValidationError):
            EndPoint(host="localhost", port=port)

    def test_frozen_model(self):
        """EndPoint is immutable."""
        end_point = EndPoint(host="localhost")
        with pytest.raises(ValidationError):
            end_point.port = 1


class TestEndPointFormatting:
    """String rendering."""

    def test_str_host_and_port(self):
        """DNS hosts render as host:port."""
        assert str(EndPoint(host="localhost", port=27018)) == "localhost:27018"

    def test_str_ipv6_is_bracketed(self):
        """IPv6 hosts are wrapped in brackets."""
        assert str(EndPoint(host="::1")) == "[::1]:27017"


class TestEndPointParse:
    """Parsing the textual host[:port] form."""

    @pytest.mark.parametrize(
        ("text", "host", "port"),
        [
            ("localhost", "localhost", 27017),
            ("db1.example.com:27018", "db1.example.com", 27018),
            ("10.0.0.1:1", "10.0.0.1", 1),
            ("[::1]", "::1", 27017),
            ("[fe80::1]:27019", "fe80::1", 27019),
            ("fe80::1", "fe80::1", 27017),
        ],
    )
    def test_parses_valid_forms(self, text, host, port):
        """Supported forms produce the expected host and port."""
        assert EndPoint.parse(text) == EndPoint(host=host, port=port)

    def test_round_trips_through_str(self):
        """str() output parses back to an equal end point."""
        end_point = EndPoint(host="::1", port=27020)
        assert EndPoint.parse(str(end_point)) == end_point

    @pytest.mark.parametrize("text", ["", "host:", "host:abc", "[::1", "[::1]x"])
    def test_rejects_malformed(self, text):
        """Malformed input raises ValueError."""
        with pytest.raises(ValueError):
            EndPoint.parse(text)

    def test_rejects_out_of_range_port(self):
        """Out of range ports surface as ValidationError."""
        with pytest.raises(ValidationError):
            EndPoint.parse("localhost:70000")
