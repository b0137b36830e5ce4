"""Logging configuration for the discovery normalizer.

Key Responsibilities:
    - Render structlog events and standard library records as one JSON line
    - Redact configured sensitive fields before rendering

Collaborators:
    - Upstream: :mod:`oidc_discovery.cli` calls :func:`configure_logging` once
    - Downstream: Relies on ``logging`` and ``structlog``

Side Effects:
    - Replaces the root logger handlers and the global structlog configuration
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import Any, Callable

import structlog

from oidc_discovery.config.settings import LoggingSettings

Processor = Callable[[Any, str, dict[str, Any]], dict[str, Any]]


def _scrubber(scrub_fields: Iterable[str] | None) -> Processor:
    """Build a processor replacing configured fields (case-insensitive) with ``***``."""
    lower_fields = {field.lower() for field in scrub_fields or ()}

    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        for key in event_dict:
            if key.lower() in lower_fields:
                event_dict[key] = "***"
        return event_dict

    return processor


def _resolve_level(level: int | str | None) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    if isinstance(level, int):
        return level
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    settings: LoggingSettings | None = None,
) -> None:
    """Configure structlog and the root logger to emit JSON lines on stderr.

    Args:
        level: Optional logging level or level name. Ignored when ``settings``
            is provided.
        settings: Logging settings providing level and scrub configuration.
    """
    scrub_fields: Iterable[str] | None = None
    if settings is not None:
        level = settings.level
        scrub_fields = settings.scrub_fields
    level_value = _resolve_level(level)

    shared: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _scrubber(scrub_fields),
    ]
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[structlog.stdlib.add_logger_name, structlog.stdlib.ExtraAdder(), *shared],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    # pytest capture handlers stay attached so caplog sees the JSON output.
    preserved = [
        existing
        for existing in root_logger.handlers
        if type(existing).__module__.startswith("_pytest.")
    ]
    for existing in preserved:
        existing.setFormatter(formatter)
    logging.basicConfig(level=level_value, handlers=[*preserved, handler], force=True)

    structlog.configure(
        processors=[*shared, structlog.processors.JSONRenderer(sort_keys=True)],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


__all__ = ["configure_logging"]
