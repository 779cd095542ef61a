"""Common environment helpers used across the backend."""

from __future__ import annotations

import os

from core.exceptions import ConfigurationError

__all__ = ["get_env", "get_env_bool", "get_env_float"]

_TRUTHY = {"1", "true", "yes", "on"}


def get_env(key: str, default: str | None = None, *, required: bool = False) -> str | None:
    """Return an environment variable and optionally enforce its presence."""

    value = os.getenv(key, default)
    if required and value is None:
        raise ConfigurationError(f"Required environment variable {key} not set", key=key)
    return value


def get_env_float(key: str, default: float) -> float:
    """Return a float environment variable, rejecting malformed values."""

    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Environment variable {key} must be a number, got {raw!r}", key=key) from exc


def get_env_bool(key: str, default: bool = False) -> bool:
    """Return a boolean environment variable using the usual truthy spellings."""

    raw = os.getenv(key)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY
