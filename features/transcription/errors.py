"""Closed set of transcription failure kinds.

``NetworkError`` and ``RateLimitExceeded`` are the only transient kinds; the
client retries those and surfaces every other kind on first occurrence.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from core.errors import (
    API_KEY_NOT_CONFIGURED_MESSAGE,
    INVALID_API_KEY_MESSAGE,
    RATE_LIMIT_EXCEEDED_MESSAGE,
    TAG_API_ERROR,
    TAG_API_KEY_NOT_CONFIGURED,
    TAG_FILE_NOT_FOUND,
    TAG_FILE_READ_ERROR,
    TAG_INVALID_API_KEY,
    TAG_INVALID_AUDIO_FORMAT,
    TAG_NETWORK_ERROR,
    TAG_RATE_LIMIT_EXCEEDED,
    TAG_UNKNOWN,
    ErrorKind,
)


@dataclass(frozen=True, slots=True)
class TranscriptionError(ErrorKind):
    """Base class of all transcription error kinds; only its variants are instantiated."""


@dataclass(frozen=True, slots=True)
class ApiKeyNotConfigured(TranscriptionError):
    tag: ClassVar[str] = TAG_API_KEY_NOT_CONFIGURED

    def user_message(self) -> str:
        return API_KEY_NOT_CONFIGURED_MESSAGE


@dataclass(frozen=True, slots=True)
class InvalidApiKey(TranscriptionError):
    tag: ClassVar[str] = TAG_INVALID_API_KEY

    def user_message(self) -> str:
        return INVALID_API_KEY_MESSAGE


@dataclass(frozen=True, slots=True)
class FileNotFound(TranscriptionError):
    tag: ClassVar[str] = TAG_FILE_NOT_FOUND

    path: str

    def user_message(self) -> str:
        return f"Recording file not found: {self.path}"


@dataclass(frozen=True, slots=True)
class FileReadError(TranscriptionError):
    tag: ClassVar[str] = TAG_FILE_READ_ERROR

    detail: str

    def user_message(self) -> str:
        return "Failed to read recording file. Please try recording again."


@dataclass(frozen=True, slots=True)
class InvalidAudioFormat(TranscriptionError):
    tag: ClassVar[str] = TAG_INVALID_AUDIO_FORMAT

    detail: str

    def user_message(self) -> str:
        return "Invalid audio format. Please try recording again."


@dataclass(frozen=True, slots=True)
class NetworkError(TranscriptionError):
    tag: ClassVar[str] = TAG_NETWORK_ERROR
    transient: ClassVar[bool] = True

    detail: str

    def user_message(self) -> str:
        return "Transcription failed - please try again. Check your internet connection."


@dataclass(frozen=True, slots=True)
class RateLimitExceeded(TranscriptionError):
    tag: ClassVar[str] = TAG_RATE_LIMIT_EXCEEDED
    transient: ClassVar[bool] = True

    def user_message(self) -> str:
        return RATE_LIMIT_EXCEEDED_MESSAGE


@dataclass(frozen=True, slots=True)
class ApiError(TranscriptionError):
    tag: ClassVar[str] = TAG_API_ERROR

    detail: str

    def user_message(self) -> str:
        return f"Transcription failed: {self.detail}"


@dataclass(frozen=True, slots=True)
class Unknown(TranscriptionError):
    tag: ClassVar[str] = TAG_UNKNOWN

    detail: str

    def user_message(self) -> str:
        return f"An unexpected error occurred: {self.detail}"


TranscriptionErrorKind = Union[
    ApiKeyNotConfigured,
    InvalidApiKey,
    FileNotFound,
    FileReadError,
    InvalidAudioFormat,
    NetworkError,
    RateLimitExceeded,
    ApiError,
    Unknown,
]


__all__ = [
    "ApiError",
    "ApiKeyNotConfigured",
    "FileNotFound",
    "FileReadError",
    "InvalidApiKey",
    "InvalidAudioFormat",
    "NetworkError",
    "RateLimitExceeded",
    "TranscriptionError",
    "TranscriptionErrorKind",
    "Unknown",
]
