"""Transcription configuration - endpoint, model and retry policy."""

from __future__ import annotations

from .defaults import (
    API_URL,
    AUDIO_MIME_TYPE,
    BASE_DELAY_SECONDS,
    DEFAULT_API_URL,
    FALLBACK_FILENAME,
    MAX_RETRY_ATTEMPTS,
    MODEL,
    REQUEST_TIMEOUT_SECONDS,
)

__all__ = [
    "API_URL",
    "AUDIO_MIME_TYPE",
    "BASE_DELAY_SECONDS",
    "DEFAULT_API_URL",
    "FALLBACK_FILENAME",
    "MAX_RETRY_ATTEMPTS",
    "MODEL",
    "REQUEST_TIMEOUT_SECONDS",
]
