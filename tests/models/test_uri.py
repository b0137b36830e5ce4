"""Tests for the structured URI model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from oidc_discovery.models.uri import NON_HTTP_SCHEMES, StructuredURI, UriScheme


def test_scheme_pattern_prefers_https_over_http() -> None:
    assert UriScheme.pattern() == "https|http|acct|mailto|tel|device"


@pytest.mark.parametrize(
    ("scheme", "expected"),
    [
        ("acct", True),
        (UriScheme.TEL, True),
        ("device", True),
        ("mailto", True),
        ("https", False),
        (UriScheme.HTTP, False),
        ("ftp", False),
        (None, False),
    ],
)
def test_is_non_http(scheme, expected: bool) -> None:
    assert UriScheme.is_non_http(scheme) is expected


def test_non_http_schemes_are_recognised_tokens() -> None:
    assert NON_HTTP_SCHEMES < {member.value for member in UriScheme}


def test_structured_uri_is_frozen() -> None:
    uri = StructuredURI(scheme="https", host="example.com")
    with pytest.raises(ValidationError):
        uri.host = "other.example.com"


def test_structured_uri_rejects_negative_port_and_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        StructuredURI(host="example.com", port=-1)
    with pytest.raises(ValidationError):
        StructuredURI(host="example.com", userinfo="bob")


def test_components_drop_unset_fields() -> None:
    uri = StructuredURI(scheme="acct", user_info="bob", host="example.com")
    assert uri.components() == {"scheme": "acct", "user_info": "bob", "host": "example.com"}
    assert uri.is_non_http


def test_is_normalized_requires_scheme_without_fragment() -> None:
    assert StructuredURI(scheme="https", host="example.com").is_normalized
    assert not StructuredURI(scheme=" ", host="example.com").is_normalized
    assert not StructuredURI(scheme="https", host="example.com", fragment="x").is_normalized


def test_is_non_http_property_follows_scheme() -> None:
    assert StructuredURI(scheme="tel", host="+15551234").is_non_http
    assert not StructuredURI(scheme="https", host="example.com").is_non_http
    assert not StructuredURI(host="example.com").is_non_http
