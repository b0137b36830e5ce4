"""Identifier normalization for WebFinger and OpenID Connect Discovery.

Key Responsibilities:
    - Turn informal identifiers typed by users into structured URIs
    - Render structured URIs back into canonical strings

Collaborators:
    - Upstream: Discovery clients and web layers accepting user identifiers
    - Downstream: :mod:`oidc_discovery.discovery` and :mod:`oidc_discovery.models`

Example:
    >>> from oidc_discovery import normalize_resource, serialize_url
    >>> serialize_url(normalize_resource("bob@example.com"))
    'acct:bob@example.com'
"""

from .discovery import normalize_resource, parse_identifier, serialize_url, to_uri_string
from .models import StructuredURI, UriScheme
from .utils import IdentifierNotNormalizableError, NormalizationFailure


__all__ = [
    "IdentifierNotNormalizableError",
    "NormalizationFailure",
    "StructuredURI",
    "UriScheme",
    "normalize_resource",
    "parse_identifier",
    "serialize_url",
    "to_uri_string",
]
