"""Closed set of webhook relay failure kinds."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from core.errors import TAG_INVALID_URL, TAG_NETWORK_ERROR, TAG_SERVICE_ERROR, ErrorKind


@dataclass(frozen=True, slots=True)
class ExternalServiceError(ErrorKind):
    """Base class of all webhook relay error kinds; only its variants are instantiated."""


@dataclass(frozen=True, slots=True)
class InvalidUrl(ExternalServiceError):
    tag: ClassVar[str] = TAG_INVALID_URL

    url: str

    def user_message(self) -> str:
        return f"Invalid URL '{self.url}'. URL must start with http:// or https://"


@dataclass(frozen=True, slots=True)
class NetworkError(ExternalServiceError):
    tag: ClassVar[str] = TAG_NETWORK_ERROR

    detail: str

    def user_message(self) -> str:
        return "Failed to connect to external service. Please check your internet connection."


@dataclass(frozen=True, slots=True)
class ServiceError(ExternalServiceError):
    tag: ClassVar[str] = TAG_SERVICE_ERROR

    detail: str

    def user_message(self) -> str:
        return f"External service returned an error: {self.detail}"


ExternalServiceErrorKind = Union[InvalidUrl, NetworkError, ServiceError]


__all__ = [
    "ExternalServiceError",
    "ExternalServiceErrorKind",
    "InvalidUrl",
    "NetworkError",
    "ServiceError",
]
