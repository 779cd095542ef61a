"""HTTP transport abstraction used by the outbound API clients."""

from .transport import (
    DEFAULT_TIMEOUT_SECONDS,
    FilePart,
    HttpTransport,
    HttpxTransport,
    JsonBody,
    MultipartBody,
    RequestBody,
    TransportResponse,
)

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "FilePart",
    "HttpTransport",
    "HttpxTransport",
    "JsonBody",
    "MultipartBody",
    "RequestBody",
    "TransportResponse",
]
