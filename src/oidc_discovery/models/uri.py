"""Structured URI model shared by the discovery parser and serializer.

Key Responsibilities:
    - Enumerate the scheme tokens recognised in discovery identifiers
    - Represent a normalised identifier as an immutable component record

Collaborators:
    - Upstream: :mod:`oidc_discovery.discovery.normalizer` builds instances
    - Downstream: :mod:`oidc_discovery.discovery.serializer` renders them

Thread Safety:
    - Thread-safe; models are frozen after construction
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UriScheme(str, Enum):
    """Scheme tokens recognised in user supplied identifiers.

    Declaration order is the alternation order of the parser grammar, so
    ``https`` must precede ``http``.
    """

    HTTPS = "https"
    HTTP = "http"
    ACCT = "acct"
    MAILTO = "mailto"
    TEL = "tel"
    DEVICE = "device"

    @classmethod
    def pattern(cls) -> str:
        """Return the regular expression alternation matching any member."""
        return "|".join(member.value for member in cls)

    @classmethod
    def is_non_http(cls, scheme: str | UriScheme | None) -> bool:
        """Return ``True`` when ``scheme`` is serialized without authority slashes."""
        if scheme is None:
            return False
        value = scheme.value if isinstance(scheme, UriScheme) else scheme
        return value in NON_HTTP_SCHEMES


NON_HTTP_SCHEMES: frozenset[str] = frozenset(
    {UriScheme.ACCT.value, UriScheme.MAILTO.value, UriScheme.TEL.value, UriScheme.DEVICE.value}
)


def has_text(value: str | None) -> bool:
    """Return ``True`` for strings containing at least one non-whitespace character."""
    return value is not None and bool(value.strip())


class StructuredURI(BaseModel):
    """Component-wise representation of a discovery identifier."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    scheme: str | None = Field(default=None, description="Scheme without the trailing colon")
    user_info: str | None = Field(default=None, description="Authority part before '@'")
    host: str | None = Field(default=None, description="Authority host or domain")
    port: int | None = Field(default=None, ge=0, description="Explicit port, None when unspecified")
    path: str | None = Field(default=None, description="Raw path including its leading slash")
    query: str | None = Field(default=None, description="Raw query string without '?'")
    fragment: str | None = Field(default=None, description="Fragment without '#'")

    @property
    def is_non_http(self) -> bool:
        """``True`` when the scheme is serialized without authority slashes."""
        return UriScheme.is_non_http(self.scheme)

    @property
    def is_normalized(self) -> bool:
        """Normalised identifiers always carry a scheme and never a fragment."""
        return has_text(self.scheme) and self.fragment is None

    def components(self) -> dict[str, Any]:
        """Return the populated components keyed by field name."""
        return self.model_dump(exclude_none=True)


__all__ = ["NON_HTTP_SCHEMES", "StructuredURI", "UriScheme", "has_text"]
