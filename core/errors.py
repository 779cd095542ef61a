"""Shared building blocks for the per-integration error taxonomies.

Each integration (transcription, summarization, external service) owns a
closed set of frozen dataclass variants deriving from :class:`ErrorKind`.
A variant carries its stable UI tag, its transience and a total
``user_message`` function. Kinds that appear in several integrations reuse
the tags and messages defined here so the UI sees identical values.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar

# Stable tags surfaced to the UI as ``error_type``
TAG_API_KEY_NOT_CONFIGURED = "api_key_not_configured"
TAG_INVALID_API_KEY = "invalid_api_key"
TAG_FILE_NOT_FOUND = "file_not_found"
TAG_FILE_READ_ERROR = "file_read_error"
TAG_INVALID_AUDIO_FORMAT = "invalid_audio_format"
TAG_NETWORK_ERROR = "network_error"
TAG_RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
TAG_API_ERROR = "api_error"
TAG_UNKNOWN = "unknown"
TAG_EMPTY_TEXT = "empty_text"
TAG_INVALID_URL = "invalid_url"
TAG_SERVICE_ERROR = "service_error"

# Messages shared by kinds common to the OpenAI-backed integrations
API_KEY_NOT_CONFIGURED_MESSAGE = "API key not configured. Please add your OpenAI API key in Settings."
INVALID_API_KEY_MESSAGE = "Invalid API key. Please check your OpenAI API key in Settings."
RATE_LIMIT_EXCEEDED_MESSAGE = "Rate limit exceeded - please wait a moment and try again."


@dataclass(frozen=True, slots=True)
class ErrorKind:
    """Base class for a single, closed error variant.

    Neither this class nor the per-integration bases deriving from it are
    instantiated; only the concrete variants listed in each integration's
    ``*ErrorKind`` union are, and each of those overrides :meth:`user_message`.
    """

    tag: ClassVar[str] = TAG_UNKNOWN
    transient: ClassVar[bool] = False

    @property
    def is_transient(self) -> bool:
        """True when retrying without user intervention may succeed."""

        return self.transient

    def user_message(self) -> str:
        """Return the sentence shown to the user for this failure."""

        raise NotImplementedError

    def __str__(self) -> str:
        values = [str(getattr(self, item.name)) for item in fields(self)]
        if values:
            return f"{self.tag}: {', '.join(values)}"
        return self.tag


__all__ = [
    "API_KEY_NOT_CONFIGURED_MESSAGE",
    "ErrorKind",
    "INVALID_API_KEY_MESSAGE",
    "RATE_LIMIT_EXCEEDED_MESSAGE",
    "TAG_API_ERROR",
    "TAG_API_KEY_NOT_CONFIGURED",
    "TAG_EMPTY_TEXT",
    "TAG_FILE_NOT_FOUND",
    "TAG_FILE_READ_ERROR",
    "TAG_INVALID_API_KEY",
    "TAG_INVALID_AUDIO_FORMAT",
    "TAG_INVALID_URL",
    "TAG_NETWORK_ERROR",
    "TAG_RATE_LIMIT_EXCEEDED",
    "TAG_SERVICE_ERROR",
    "TAG_UNKNOWN",
]
