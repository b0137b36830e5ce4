"""Command line entry point for normalizing discovery identifiers.

Example:
-------
    >>> oidc-discovery normalize bob@example.com
    acct:bob@example.com
    >>> oidc-discovery normalize --json "example.com:8443/bob?x=1#top"
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

import structlog

from oidc_discovery.config.settings import get_settings
from oidc_discovery.discovery import normalize_resource, serialize_url
from oidc_discovery.utils.logging import configure_logging

logger = structlog.get_logger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="oidc-discovery", description="WebFinger / OIDC Discovery identifier tools"
    )
    subcommands = parser.add_subparsers(dest="command", required=True)
    normalize = subcommands.add_parser("normalize", help="Normalize a user supplied identifier")
    normalize.add_argument("identifier", help="Identifier such as bob@example.com")
    normalize.add_argument(
        "--json", action="store_true", help="Print the URI components as a JSON object"
    )
    normalize.add_argument("--log-level", default=None, help="Override the configured log level")
    return parser.parse_args(argv)


def _normalize(args: argparse.Namespace) -> int:
    uri = normalize_resource(args.identifier)
    if uri is None:
        print(f"Cannot normalize identifier: {args.identifier!r}", file=sys.stderr)
        return 1
    canonical = serialize_url(uri)
    logger.debug("cli.normalized", identifier=args.identifier, uri=canonical)
    if args.json:
        print(json.dumps({**uri.components(), "uri": canonical}, sort_keys=True))
    else:
        print(canonical)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging_settings = get_settings().observability.logging
    if args.log_level:
        logging_settings = logging_settings.model_copy(update={"level": args.log_level})
    configure_logging(settings=logging_settings)
    return _normalize(args)


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    sys.exit(main())
