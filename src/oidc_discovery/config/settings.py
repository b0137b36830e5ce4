"""Configuration system for the discovery normalization service."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environments supported by the service."""

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: str = Field(default="INFO", description="Log level for application output")
    scrub_fields: Sequence[str] = Field(
        default_factory=lambda: ["password", "token", "secret", "authorization"],
        description="Fields that should be redacted in logs",
    )


class ObservabilitySettings(BaseModel):
    """Aggregate observability configuration."""

    logging: LoggingSettings = Field(default_factory=LoggingSettings)


class AppSettings(BaseSettings):
    """Top-level application settings."""

    environment: Environment = Environment.DEV
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    model_config = SettingsConfigDict(env_prefix="OIDC_DISCOVERY_", env_nested_delimiter="__")


ENVIRONMENT_DEFAULTS: Mapping[Environment, dict[str, Any]] = {
    Environment.DEV: {"observability": {"logging": {"level": "DEBUG"}}},
    Environment.STAGING: {"observability": {"logging": {"level": "INFO"}}},
    Environment.PROD: {"observability": {"logging": {"level": "WARNING"}}},
}


def _deep_update(target: dict[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    for key, value in updates.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            target[key] = _deep_update(dict(current), value)
        else:
            target[key] = value
    return target


def load_settings(environment: str | None = None) -> AppSettings:
    """Load application settings on top of the environment presets.

    Values set explicitly through ``OIDC_DISCOVERY_*`` variables win over the
    preset of the selected environment.
    """
    env_value = (environment or os.getenv("OIDC_DISCOVERY_ENV", "dev")).lower()
    try:
        env = Environment(env_value)
    except ValueError as err:
        raise RuntimeError(f"Invalid configuration: unknown environment {env_value!r}") from err
    try:
        base_settings = AppSettings()
    except ValidationError as err:
        raise RuntimeError(f"Invalid configuration: {err}") from err
    merged = _deep_update({}, ENVIRONMENT_DEFAULTS.get(env, {}))
    merged = _deep_update(merged, base_settings.model_dump(exclude_unset=True))
    merged["environment"] = env
    return AppSettings.model_validate(merged)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Cached accessor used by production code."""
    return load_settings()
