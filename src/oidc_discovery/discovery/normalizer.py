"""Normalization of user supplied identifiers for WebFinger / OIDC Discovery.

Key Responsibilities:
    - Split a raw identifier (``bob@example.com``, ``example.com/bob``,
      ``tel:+15551234``) into URI components using a permissive grammar
    - Infer the scheme when none was typed (``acct`` for bare accounts,
      ``https`` for everything else)
    - Drop fragments so normalised identifiers are stable cache keys

Collaborators:
    - Upstream: Discovery clients pass identifiers typed by end users
    - Downstream: :mod:`oidc_discovery.discovery.serializer` renders results

Side Effects:
    - Emits a warning log event for every identifier that is rejected

Thread Safety:
    - Thread-safe; relies only on a compiled regular expression

Example:
    >>> normalize_resource("bob@example.com").scheme
    'acct'
"""

from __future__ import annotations

import re
from re import Pattern

import structlog

from oidc_discovery.models.uri import StructuredURI, UriScheme, has_text
from oidc_discovery.utils.errors import IdentifierNotNormalizableError, NormalizationFailure

logger = structlog.get_logger(__name__)

# ==============================================================================
# GRAMMAR
# ==============================================================================

MAX_PORT = 65535

# Applied with fullmatch; partial matches are rejected. The fragment stops at
# any line terminator, so a line break after "#" fails the match.
IDENTIFIER_PATTERN: Pattern[str] = re.compile(
    r"(?:(?P<scheme>" + UriScheme.pattern() + r"):(?://)?)?"
    r"(?:(?P<user_info>[^@]+)@)?"
    r"(?P<host>[^?#:/]+)"
    r"(?::(?P<port>[0-9]*))?"
    r"(?P<path>[^?#]+)?"
    r"(?:\?(?P<query>[^#]+))?"
    r"(?:#(?P<fragment>[^\n\r\x85\u2028\u2029]*))?"
)


def _parse_port(identifier: str, raw: str | None) -> int | None:
    """Return the numeric port, ``None`` for an absent or empty capture."""
    if not raw:
        return None
    digits = raw.lstrip("0") or "0"
    if len(digits) > len(str(MAX_PORT)) or int(digits) > MAX_PORT:
        raise IdentifierNotNormalizableError(identifier, NormalizationFailure.PORT_OUT_OF_RANGE)
    return int(digits)


def _infer_scheme(
    user_info: str | None, port: int | None, path: str | None, query: str | None
) -> UriScheme:
    # A bare ``user@host`` is an account identifier
    if has_text(user_info) and not has_text(path) and not has_text(query) and port is None:
        return UriScheme.ACCT
    return UriScheme.HTTPS


# ==============================================================================
# PUBLIC API
# ==============================================================================


def parse_identifier(identifier: str | None) -> StructuredURI:
    """Normalise ``identifier`` or raise when it cannot be normalised.

    Args:
        identifier: Raw identifier supplied by an end user.

    Returns:
        Structured URI with a scheme always set and the fragment removed.

    Raises:
        IdentifierNotNormalizableError: If the identifier is blank, does not
            match the identifier grammar, or carries a port above 65535.
    """
    if identifier is None or not identifier.strip():
        raise IdentifierNotNormalizableError(identifier, NormalizationFailure.BLANK)

    match = IDENTIFIER_PATTERN.fullmatch(identifier)
    if match is None:
        raise IdentifierNotNormalizableError(identifier, NormalizationFailure.GRAMMAR_MISMATCH)

    user_info = match.group("user_info")
    port = _parse_port(identifier, match.group("port"))
    path = match.group("path")
    query = match.group("query")

    scheme = match.group("scheme")
    if not has_text(scheme):
        scheme = _infer_scheme(user_info, port, path, query).value

    # The fragment group is matched but never carried over.
    return StructuredURI(
        scheme=scheme,
        user_info=user_info,
        host=match.group("host"),
        port=port,
        path=path,
        query=query,
    )


def normalize_resource(identifier: str | None) -> StructuredURI | None:
    """Normalise the resource identifier as per OpenID Connect Discovery.

    Rejected input is routine user error, so failures are logged and reported
    as ``None`` instead of raising.
    """
    try:
        return parse_identifier(identifier)
    except IdentifierNotNormalizableError as exc:
        logger.warning(
            f"discovery.normalize.{exc.reason.value}",
            identifier=identifier,
            detail=exc.problem.detail,
        )
        return None


__all__ = ["IDENTIFIER_PATTERN", "MAX_PORT", "normalize_resource", "parse_identifier"]
