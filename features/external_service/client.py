"""Generic webhook relay for user-defined custom actions.

The transcription text is posted as ``{"text": ...}`` to an arbitrary
http(s) URL and the response body is handed back verbatim. No
authentication is attached and nothing is retried.
"""

from __future__ import annotations

import logging

from config import external_service as external_service_config
from core.exceptions import TransportError
from core.http import HttpTransport, HttpxTransport, JsonBody, TransportResponse
from core.result import Err, Ok, Result

from .errors import ExternalServiceErrorKind, InvalidUrl, NetworkError, ServiceError
from .schemas import ExternalServiceRequest

logger = logging.getLogger(__name__)

ExternalServiceResult = Result[str, ExternalServiceErrorKind]


def validate_url(url: str) -> bool:
    """Return True when ``url`` uses the http or https scheme (any case)."""

    return url.lower().startswith(external_service_config.ALLOWED_URL_PREFIXES)


class ExternalServiceClient:
    """Relay text to user-configured webhooks."""

    def __init__(self, transport: HttpTransport | None = None) -> None:
        self.transport = transport or HttpxTransport(timeout=external_service_config.REQUEST_TIMEOUT_SECONDS)

    async def relay(self, url: str, text: str) -> ExternalServiceResult:
        """POST ``text`` to ``url`` and return the response body."""

        if not validate_url(url):
            logger.warning("Rejected external service URL: %s", url)
            return Err(InvalidUrl(url))

        body = JsonBody(ExternalServiceRequest(text=text).model_dump_json())
        try:
            response = await self.transport.post(url, body)
        except TransportError as exc:
            logger.error("External service %s unreachable: %s", url, exc)
            return Err(NetworkError(exc.message))

        result = classify_response(response)
        if isinstance(result, Err):
            logger.warning("External service %s failed: %s", url, result.error)
        return result


def classify_response(response: TransportResponse) -> ExternalServiceResult:
    if response.is_success:
        if response.text is None:
            return Ok(external_service_config.SUCCESS_PLACEHOLDER)
        return Ok(response.text)

    if response.text is None:
        return Err(ServiceError(f"HTTP {response.status_code}"))
    return Err(ServiceError(response.text))


async def relay_text(
    url: str,
    text: str,
    *,
    transport: HttpTransport | None = None,
) -> ExternalServiceResult:
    """Relay ``text`` to ``url`` with a default-configured client."""

    return await ExternalServiceClient(transport).relay(url, text)


__all__ = [
    "ExternalServiceClient",
    "ExternalServiceResult",
    "classify_response",
    "relay_text",
    "validate_url",
]
