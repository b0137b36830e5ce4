"""Data models exposed by the discovery normalization layer."""

from .uri import NON_HTTP_SCHEMES, StructuredURI, UriScheme


__all__ = ["NON_HTTP_SCHEMES", "StructuredURI", "UriScheme"]
