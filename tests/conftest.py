from __future__ import annotations

import logging

import pytest
import structlog

from oidc_discovery.config.settings import get_settings


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch):
    monkeypatch.delenv("OIDC_DISCOVERY_ENV", raising=False)
    monkeypatch.delenv("OIDC_DISCOVERY_OBSERVABILITY__LOGGING__LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_logging():
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if not type(handler).__module__.startswith("_pytest."):
            root.removeHandler(handler)
    root.setLevel(level)
