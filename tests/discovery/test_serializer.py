"""Tests for structured identifier serialization."""

from __future__ import annotations

import pytest

from oidc_discovery.discovery.normalizer import normalize_resource
from oidc_discovery.discovery.serializer import serialize_url, to_uri_string
from oidc_discovery.models.uri import StructuredURI


def test_serialize_none_returns_none() -> None:
    assert serialize_url(None) is None


@pytest.mark.parametrize("scheme", ["acct", "mailto", "tel", "device"])
def test_non_http_schemes_omit_authority_slashes(scheme: str) -> None:
    uri = StructuredURI(scheme=scheme, host="example.com")
    rendered = serialize_url(uri)
    assert rendered == f"{scheme}:example.com"
    assert "://" not in rendered


def test_non_http_serialization_includes_all_components() -> None:
    uri = StructuredURI(
        scheme="mailto",
        user_info="bob",
        host="example.com",
        port=25,
        path="inbox",
        query="subject=hi",
        fragment="top",
    )
    assert serialize_url(uri) == "mailto:bob@example.com:25/inbox?subject=hi#top"


def test_non_http_serialization_skips_blank_components() -> None:
    uri = StructuredURI(scheme="acct", user_info="  ", host="example.com", path=" ", query="", fragment="")
    assert serialize_url(uri) == "acct:example.com"


def test_non_http_path_with_leading_slash_is_not_doubled() -> None:
    uri = StructuredURI(scheme="device", host="p1.example.com", port=8443, path="/x")
    assert serialize_url(uri) == "device:p1.example.com:8443/x"


def test_https_uses_hierarchical_form() -> None:
    uri = StructuredURI(
        scheme="https", user_info="alice", host="example.com", port=8443, path="/a", query="b=c"
    )
    assert serialize_url(uri) == "https://alice@example.com:8443/a?b=c"


def test_hierarchical_form_inserts_path_delimiter() -> None:
    uri = StructuredURI(scheme="https", host="example.com", path="bob")
    assert serialize_url(uri) == "https://example.com/bob"


def test_unknown_and_missing_schemes_use_hierarchical_form() -> None:
    assert serialize_url(StructuredURI(scheme="ftp", host="files.example.com")) == (
        "ftp://files.example.com"
    )
    assert serialize_url(StructuredURI(host="example.com", path="/x")) == "//example.com/x"


def test_to_uri_string_keeps_empty_query_and_fragment() -> None:
    uri = StructuredURI(scheme="http", host="example.com", query="", fragment="")
    assert to_uri_string(uri) == "http://example.com?#"


def test_to_uri_string_renders_port_zero() -> None:
    assert to_uri_string(StructuredURI(scheme="http", host="example.com", port=0)) == (
        "http://example.com:0"
    )


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("bob@example.com", "acct:bob@example.com"),
        ("acct://bob@example.com", "acct:bob@example.com"),
        ("example.com", "https://example.com"),
        ("https://example.com/bob#frag", "https://example.com/bob"),
        ("example.com:8080/x?y=1", "https://example.com:8080/x?y=1"),
        ("tel:+15551234", "tel:+15551234"),
        ("mailto:bob@example.com#sig", "mailto:bob@example.com"),
    ],
)
def test_normalized_identifiers_serialize_canonically(identifier: str, expected: str) -> None:
    assert serialize_url(normalize_resource(identifier)) == expected
