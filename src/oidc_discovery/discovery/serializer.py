"""String rendering of structured discovery identifiers."""

from __future__ import annotations

from oidc_discovery.models.uri import StructuredURI, has_text

PATH_DELIMITER = "/"


def to_uri_string(uri: StructuredURI) -> str:
    """Render ``uri`` in hierarchical ``scheme://user@host:port/path?query#fragment`` form."""
    parts: list[str] = []
    if uri.scheme is not None:
        parts.append(f"{uri.scheme}:")
    if uri.user_info is not None or uri.host is not None:
        parts.append("//")
        if uri.user_info is not None:
            parts.append(f"{uri.user_info}@")
        if uri.host is not None:
            parts.append(uri.host)
        if uri.port is not None:
            parts.append(f":{uri.port}")
    if uri.path:
        if parts and not uri.path.startswith(PATH_DELIMITER):
            parts.append(PATH_DELIMITER)
        parts.append(uri.path)
    if uri.query is not None:
        parts.append(f"?{uri.query}")
    if uri.fragment is not None:
        parts.append(f"#{uri.fragment}")
    return "".join(parts)


def _to_opaque_string(uri: StructuredURI) -> str:
    # Same layout as ``to_uri_string`` without the "//" authority marker.
    parts: list[str] = [f"{uri.scheme}:"]
    if has_text(uri.user_info):
        parts.append(f"{uri.user_info}@")
    if has_text(uri.host):
        parts.append(uri.host)
    if uri.port is not None:
        parts.append(f":{uri.port}")
    if has_text(uri.path):
        if not uri.path.startswith(PATH_DELIMITER):
            parts.append(PATH_DELIMITER)
        parts.append(uri.path)
    if has_text(uri.query):
        parts.append(f"?{uri.query}")
    if has_text(uri.fragment):
        parts.append(f"#{uri.fragment}")
    return "".join(parts)


def serialize_url(uri: StructuredURI | None) -> str | None:
    """Serialise a structured identifier back into a string.

    ``acct``, ``mailto``, ``tel`` and ``device`` identifiers are written as
    ``scheme:user@host`` since they have no authority component. Everything
    else, including identifiers without a scheme, uses the hierarchical form.

    Args:
        uri: Structured identifier, usually produced by
            :func:`~oidc_discovery.discovery.normalizer.normalize_resource`.

    Returns:
        The serialised identifier, or ``None`` when ``uri`` is ``None``.
    """
    if uri is None:
        return None
    if has_text(uri.scheme) and uri.is_non_http:
        return _to_opaque_string(uri)
    return to_uri_string(uri)


__all__ = ["serialize_url", "to_uri_string"]
