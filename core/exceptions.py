"""Custom Exception Hierarchy for the EverVoice backend.

Exceptions are reserved for failures that cross module seams: broken
configuration, invalid collaborator data and transport-level failures.
API client outcomes are never raised to callers; each client converts these
exceptions into its own closed set of error kinds (see :mod:`core.errors`).

Exception Handling Flow:
    1. Transport or settings collaborator raises a typed exception
    2. The owning client/service catches it at its boundary
    3. The exception is classified into an integration specific error kind
    4. The UI receives a flat response record with tag and message
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base exception for all service layer errors."""


class ValidationError(ServiceError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(self.message)


class ConfigurationError(ServiceError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, key: str | None = None):
        self.message = message
        self.key = key
        super().__init__(self.message)


class ProviderError(ServiceError):
    """Raised when an external provider (AI API, webhook) fails."""

    def __init__(self, message: str, provider: str | None = None, original_error: Exception | None = None):
        self.message = message
        self.provider = provider
        self.original_error = original_error
        super().__init__(self.message)


class TransportError(ProviderError):
    """Raised when an HTTP request produced no response at all.

    ``connectivity`` is true for connection failures (refused, DNS, TLS) and
    timeouts; false for any other transport level failure.
    """

    def __init__(
        self,
        message: str,
        *,
        connectivity: bool = False,
        original_error: Exception | None = None,
    ):
        super().__init__(message, provider="http", original_error=original_error)
        self.connectivity = connectivity
