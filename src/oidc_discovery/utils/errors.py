"""Problem detail helpers for reporting identifiers that cannot be normalized.

Key Responsibilities:
    - Provide RFC 7807 compliant data structures used when a discovery caller
      needs to answer a rejected identifier with a validation error
    - Supply a base exception that carries problem details
    - Name the reasons an identifier can fail normalization

Collaborators:
    - Upstream: :mod:`oidc_discovery.discovery.normalizer` raises
      :class:`IdentifierNotNormalizableError` from its strict entry point
    - Downstream: Web layers serialise :class:`ProblemDetail` instances

Side Effects:
    - None; helpers are pure data containers

Thread Safety:
    - Thread-safe; instances are never shared between calls
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Mapping

# ==============================================================================
# TYPE DEFINITIONS
# ==============================================================================

__all__ = [
    "FoundationError",
    "IdentifierNotNormalizableError",
    "NormalizationFailure",
    "ProblemDetail",
]


@dataclass(slots=True)
class ProblemDetail:
    """Lightweight problem details object compliant with RFC 7807."""

    title: str
    status: int
    detail: str | None = None
    type: str = "about:blank"
    instance: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def model_dump(self) -> dict[str, Any]:
        """Return a dictionary representation with optional fields dropped."""
        payload = {key: value for key, value in asdict(self).items() if value is not None}
        if not payload.get("extra"):
            payload.pop("extra", None)
        return payload

    def to_response(self) -> dict[str, Any]:
        """Alias for model_dump used by web-facing callers."""
        return self.model_dump()


class FoundationError(RuntimeError):
    """Base exception that carries a :class:`ProblemDetail` instance."""

    def __init__(
        self,
        message: str,
        *,
        status: int = 500,
        detail: str | None = None,
        type: str = "about:blank",
        instance: str | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialise the exception with structured problem detail attributes.

        Args:
            message: Human readable error summary.
            status: HTTP status code associated with the problem.
            detail: Optional detailed description of the failure.
            type: Problem type URI, defaults to ``about:blank``.
            instance: Optional URI reference identifying the specific occurrence.
            extra: Additional attributes included in the serialized payload.
        """
        super().__init__(message)
        self.problem = ProblemDetail(
            title=message,
            status=status,
            detail=detail,
            type=type,
            instance=instance,
            extra=extra or {},
        )


# ==============================================================================
# NORMALIZATION ERRORS
# ==============================================================================


class NormalizationFailure(str, Enum):
    """Reasons an identifier is rejected by the discovery normalizer."""

    BLANK = "blank"
    GRAMMAR_MISMATCH = "grammar_mismatch"
    PORT_OUT_OF_RANGE = "port_out_of_range"


_DETAILS: Mapping[NormalizationFailure, str] = {
    NormalizationFailure.BLANK: "Identifier is empty or contains only whitespace",
    NormalizationFailure.GRAMMAR_MISMATCH: "Identifier does not match the discovery identifier grammar",
    NormalizationFailure.PORT_OUT_OF_RANGE: "Identifier port is outside the range 0-65535",
}


class IdentifierNotNormalizableError(FoundationError):
    """Raised when a user supplied identifier cannot become a structured URI."""

    def __init__(self, identifier: str | None, reason: NormalizationFailure) -> None:
        super().__init__(
            "Identifier could not be normalized",
            status=400,
            detail=_DETAILS[reason],
            extra={"reason": reason.value, "identifier": identifier},
        )
        self.identifier = identifier
        self.reason = reason
