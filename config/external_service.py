"""External service (custom action webhook) defaults."""

from __future__ import annotations

from core.utils.env import get_env_float

ALLOWED_URL_PREFIXES = ("http://", "https://")

# Payload reported when a 2xx response body cannot be read
SUCCESS_PLACEHOLDER = "OK"

REQUEST_TIMEOUT_SECONDS = get_env_float("EVERVOICE_WEBHOOK_TIMEOUT", 30.0)

__all__ = ["ALLOWED_URL_PREFIXES", "REQUEST_TIMEOUT_SECONDS", "SUCCESS_PLACEHOLDER"]
