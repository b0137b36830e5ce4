"""Identifier normalization and serialization for discovery protocols."""

from .normalizer import normalize_resource, parse_identifier
from .serializer import serialize_url, to_uri_string


__all__ = ["normalize_resource", "parse_identifier", "serialize_url", "to_uri_string"]
