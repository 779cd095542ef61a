"""Chat-completions summarization client.

A single request is made per call; failures are classified into the kinds in
:mod:`features.summarization.errors` and returned, never retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from config import summarization as summarization_config
from core.exceptions import TransportError
from core.http import HttpTransport, HttpxTransport, JsonBody, TransportResponse
from core.pydantic_schemas import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    parse_error_message,
)
from core.result import Err, Ok, Result

from .errors import (
    ApiError,
    EmptyText,
    InvalidApiKey,
    NetworkError,
    RateLimitExceeded,
    SummarizationErrorKind,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SummarizationOutcome:
    """Markdown bullet-point summary."""

    summary: str


SummarizationResult = Result[SummarizationOutcome, SummarizationErrorKind]


class SummarizationClient:
    """Summarize transcriptions through a chat-completions endpoint."""

    def __init__(
        self,
        transport: HttpTransport | None = None,
        *,
        api_url: str = summarization_config.API_URL,
        model: str = summarization_config.MODEL,
    ) -> None:
        self.transport = transport or HttpxTransport(timeout=summarization_config.REQUEST_TIMEOUT_SECONDS)
        self.api_url = api_url
        self.model = model

    def build_request(self, text: str, language: str) -> ChatCompletionRequest:
        return ChatCompletionRequest(
            model=self.model,
            messages=[
                ChatMessage(role="system", content=summarization_config.get_summarization_prompt(language)),
                ChatMessage(role="user", content=text),
            ],
        )

    async def summarize(self, text: str, api_key: str, language: str) -> SummarizationResult:
        """Summarize ``text`` into bullet points written in ``language``."""

        if not text.strip():
            return Err(EmptyText())

        body = JsonBody(self.build_request(text, language).model_dump_json())
        logger.info("Requesting summary (%d chars, language=%s)", len(text), language)

        try:
            response = await self.transport.post(self.api_url, body, bearer_token=api_key)
        except TransportError as exc:
            logger.error("Summarization request failed: %s", exc)
            return Err(NetworkError(exc.message))

        result = classify_response(response)
        if isinstance(result, Err):
            logger.warning("Summarization failed: %s", result.error)
        return result


def classify_response(response: TransportResponse) -> SummarizationResult:
    """Map a chat-completions HTTP response onto an outcome or error kind."""

    status = response.status_code
    if status == 200:
        try:
            payload = ChatCompletionResponse.model_validate_json(response.text or "")
        except ValueError as exc:
            return Err(ApiError(f"Failed to parse response: {exc}"))
        return Ok(SummarizationOutcome(summary=payload.first_content()))

    if status == 401:
        return Err(InvalidApiKey())
    if status == 429:
        return Err(RateLimitExceeded())

    message = parse_error_message(response.text)
    if message is None:
        message = response.text if response.text is not None else "Unknown error"
    return Err(ApiError(message))


async def summarize_text(
    text: str,
    api_key: str,
    language: str,
    *,
    transport: HttpTransport | None = None,
) -> SummarizationResult:
    """Summarize ``text`` with a default-configured client."""

    return await SummarizationClient(transport).summarize(text, api_key, language)


__all__ = [
    "SummarizationClient",
    "SummarizationOutcome",
    "SummarizationResult",
    "classify_response",
    "summarize_text",
]
