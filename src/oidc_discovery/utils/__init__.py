"""Utility modules for the discovery normalization layer."""

from .errors import (
    FoundationError,
    IdentifierNotNormalizableError,
    NormalizationFailure,
    ProblemDetail,
)


__all__ = [
    "FoundationError",
    "IdentifierNotNormalizableError",
    "NormalizationFailure",
    "ProblemDetail",
]
