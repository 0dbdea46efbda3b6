from typing import Any

import pytest
from pydantic import ValidationError

from location_provider.models.request_models import IPLookupRequest


def _build_request(ip: Any) -> IPLookupRequest:
    """Helper to construct IPLookupRequest, used to keep tests small."""
    return IPLookupRequest(ip=ip)


def test_ip_lookup_request_allows_valid_ipv4() -> None:
    """Explicit valid IPv4 address is accepted as-is."""
    req = _build_request("8.8.8.8")
    assert req.ip == "8.8.8.8"


def test_ip_lookup_request_allows_valid_ipv6() -> None:
    """Explicit valid IPv6 address is accepted as-is."""
    req = _build_request("2001:4860:4860::8888")
    assert req.ip == "2001:4860:4860::8888"


def test_ip_lookup_request_normalizes_blank_to_none() -> None:
    """Blank string is treated as None (client IP lookup, no validation error)."""
    req = _build_request("   ")
    assert req.ip is None


def test_ip_lookup_request_allows_none() -> None:
    """None is allowed and used to trigger client IP lookup."""
    req = _build_request(None)
    assert req.ip is None


def test_ip_lookup_request_rejects_invalid_ip() -> None:
    """Non-empty, non-IP strings are rejected by validation."""
    with pytest.raises(ValidationError):
        _build_request("qwerty")


def test_ip_lookup_request_strips_surrounding_whitespace() -> None:
    req = _build_request(" 8.8.4.4 ")
    assert req.ip == "8.8.4.4"


def test_ip_lookup_request_error_message_names_ip_versions() -> None:
    with pytest.raises(ValidationError) as exc_info:
        _build_request("999.1.1.1")

    assert "valid IPv4 or IPv6 address" in str(exc_info.value)


def test_ip_lookup_request_compresses_ipv6() -> None:
    req = _build_request("2001:4860:4860:0000:0000:0000:0000:8888")
    assert req.ip == "2001:4860:4860::8888"
