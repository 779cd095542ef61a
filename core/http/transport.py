"""Pluggable HTTP POST transport shared by the outbound API clients.

Clients depend on :class:`HttpTransport` only. Production code uses
:class:`HttpxTransport`; tests substitute scripted doubles that record every
call, so request URLs, auth and serialised bodies can be asserted without a
live network.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, Union

import httpx

from core.exceptions import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 60.0


@dataclass(frozen=True, slots=True)
class FilePart:
    """Binary attachment of a multipart request."""

    filename: str
    content: bytes
    content_type: str
    field_name: str = "file"


@dataclass(frozen=True, slots=True)
class JsonBody:
    """Pre-serialised JSON request body."""

    content: str


@dataclass(frozen=True, slots=True)
class MultipartBody:
    """Multipart form with one file part plus plain string fields."""

    file: FilePart
    fields: Mapping[str, str] = field(default_factory=dict)


RequestBody = Union[JsonBody, MultipartBody]


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Status code and body text of a received HTTP response.

    ``text`` is ``None`` when a response arrived but its body could not be
    read or decoded.
    """

    status_code: int
    text: str | None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600


class HttpTransport(ABC):
    """Capability interface for issuing a single HTTP POST."""

    @abstractmethod
    async def post(
        self,
        url: str,
        body: RequestBody,
        *,
        bearer_token: str | None = None,
    ) -> TransportResponse:
        """Send ``body`` to ``url`` and return the received response.

        Raises:
            TransportError: If no response was received at all.
        """


class HttpxTransport(HttpTransport):
    """:class:`HttpTransport` backed by :class:`httpx.AsyncClient`.

    A short-lived client is opened per request unless ``client`` is supplied,
    in which case the caller owns its lifecycle.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.timeout = timeout
        self._client = client

    async def post(
        self,
        url: str,
        body: RequestBody,
        *,
        bearer_token: str | None = None,
    ) -> TransportResponse:
        headers: dict[str, str] = {}
        if bearer_token is not None:
            headers["Authorization"] = f"Bearer {bearer_token}"
        request_kwargs = _build_request_kwargs(body, headers)

        try:
            if self._client is not None:
                response = await self._client.post(url, **request_kwargs)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(url, **request_kwargs)
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            logger.warning("HTTP POST to %s could not connect: %s", url, exc)
            raise TransportError(_describe(exc), connectivity=True, original_error=exc) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("HTTP POST to %s failed: %s", url, exc)
            raise TransportError(_describe(exc), connectivity=False, original_error=exc) from exc
        except ValueError as exc:
            # Request could not be built, e.g. a non-ASCII header value
            logger.warning("HTTP POST to %s could not be built: %s", url, exc)
            raise TransportError(f"Invalid request: {_describe(exc)}", connectivity=False, original_error=exc) from exc

        logger.debug("HTTP POST to %s returned %s", url, response.status_code)
        return TransportResponse(status_code=response.status_code, text=_read_text(response))


def _build_request_kwargs(body: RequestBody, headers: dict[str, str]) -> dict[str, Any]:
    if isinstance(body, JsonBody):
        headers["Content-Type"] = "application/json"
        return {"content": body.content.encode("utf-8"), "headers": headers}

    part = body.file
    return {
        "files": {part.field_name: (part.filename, part.content, part.content_type)},
        "data": dict(body.fields),
        "headers": headers,
    }


def _read_text(response: httpx.Response) -> str | None:
    try:
        return response.text
    except (httpx.StreamError, httpx.DecodingError, LookupError, UnicodeDecodeError) as exc:
        logger.warning("Could not read HTTP response body: %s", exc)
        return None


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


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
