"""Closed set of summarization failure kinds. None of them are retried."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from core.errors import (
    API_KEY_NOT_CONFIGURED_MESSAGE,
    INVALID_API_KEY_MESSAGE,
    RATE_LIMIT_EXCEEDED_MESSAGE,
    TAG_API_ERROR,
    TAG_API_KEY_NOT_CONFIGURED,
    TAG_EMPTY_TEXT,
    TAG_INVALID_API_KEY,
    TAG_NETWORK_ERROR,
    TAG_RATE_LIMIT_EXCEEDED,
    ErrorKind,
)


@dataclass(frozen=True, slots=True)
class SummarizationError(ErrorKind):
    """Base class of all summarization error kinds; only its variants are instantiated."""


@dataclass(frozen=True, slots=True)
class ApiKeyNotConfigured(SummarizationError):
    tag: ClassVar[str] = TAG_API_KEY_NOT_CONFIGURED

    def user_message(self) -> str:
        return API_KEY_NOT_CONFIGURED_MESSAGE


@dataclass(frozen=True, slots=True)
class InvalidApiKey(SummarizationError):
    tag: ClassVar[str] = TAG_INVALID_API_KEY

    def user_message(self) -> str:
        return INVALID_API_KEY_MESSAGE


@dataclass(frozen=True, slots=True)
class NetworkError(SummarizationError):
    tag: ClassVar[str] = TAG_NETWORK_ERROR

    detail: str

    def user_message(self) -> str:
        return "Summarization failed - please try again. Check your internet connection."


@dataclass(frozen=True, slots=True)
class RateLimitExceeded(SummarizationError):
    tag: ClassVar[str] = TAG_RATE_LIMIT_EXCEEDED

    def user_message(self) -> str:
        return RATE_LIMIT_EXCEEDED_MESSAGE


@dataclass(frozen=True, slots=True)
class ApiError(SummarizationError):
    tag: ClassVar[str] = TAG_API_ERROR

    detail: str

    def user_message(self) -> str:
        return f"Summarization failed: {self.detail}"


@dataclass(frozen=True, slots=True)
class EmptyText(SummarizationError):
    tag: ClassVar[str] = TAG_EMPTY_TEXT

    def user_message(self) -> str:
        return "Cannot summarize empty text."


SummarizationErrorKind = Union[
    ApiKeyNotConfigured,
    InvalidApiKey,
    NetworkError,
    RateLimitExceeded,
    ApiError,
    EmptyText,
]


__all__ = [
    "ApiError",
    "ApiKeyNotConfigured",
    "EmptyText",
    "InvalidApiKey",
    "NetworkError",
    "RateLimitExceeded",
    "SummarizationError",
    "SummarizationErrorKind",
]
