"""Whisper transcription client with exponential backoff retry.

The client reads a recording from disk, posts it as a multipart form and
classifies the HTTP outcome into a :class:`TranscriptionOutcome` or one of the
kinds in :mod:`features.transcription.errors`. Transient kinds are retried up
to ``max_attempts`` times with delays of ``base_delay * 2**attempt``.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable

from config import transcription as transcription_config
from core.exceptions import TransportError
from core.http import FilePart, HttpTransport, HttpxTransport, MultipartBody, TransportResponse
from core.pydantic_schemas import WhisperTranscriptionResponse, parse_error_message
from core.result import Err, Ok, Result

from .errors import (
    ApiError,
    FileNotFound,
    FileReadError,
    InvalidApiKey,
    InvalidAudioFormat,
    NetworkError,
    RateLimitExceeded,
    TranscriptionErrorKind,
    Unknown,
)

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class TranscriptionOutcome:
    """Successful transcription."""

    text: str


TranscriptionResult = Result[TranscriptionOutcome, TranscriptionErrorKind]


class TranscriptionClient:
    """Send recordings to a Whisper-compatible endpoint."""

    def __init__(
        self,
        transport: HttpTransport | None = None,
        *,
        sleep: Sleep = asyncio.sleep,
        max_attempts: int = transcription_config.MAX_RETRY_ATTEMPTS,
        base_delay: float = transcription_config.BASE_DELAY_SECONDS,
        api_url: str = transcription_config.API_URL,
        model: str = transcription_config.MODEL,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.transport = transport or HttpxTransport(timeout=transcription_config.REQUEST_TIMEOUT_SECONDS)
        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.api_url = api_url
        self.model = model
        self._sleep = sleep

    def backoff_delay(self, attempt_index: int) -> float:
        """Return the delay that follows the zero-based ``attempt_index``."""

        return self.base_delay * (2**attempt_index)

    async def transcribe(self, file_path: str, api_key: str, language: str) -> TranscriptionResult:
        """Transcribe the recording at ``file_path`` in ``language`` (ISO 639-1)."""

        path = Path(file_path)
        # Path("") resolves to the working directory
        if not file_path or not path.exists():
            logger.warning("Recording not found: %s", file_path)
            return Err(FileNotFound(file_path))

        try:
            audio = path.read_bytes()
        except OSError as exc:
            logger.error("Failed to read recording %s: %s", file_path, exc)
            return Err(FileReadError(str(exc)))

        body = MultipartBody(
            file=FilePart(
                filename=path.name or transcription_config.FALLBACK_FILENAME,
                content=audio,
                content_type=transcription_config.AUDIO_MIME_TYPE,
            ),
            fields={"model": self.model, "language": language},
        )

        last_error: TranscriptionErrorKind = Unknown("No attempts made")
        for attempt in range(self.max_attempts):
            result = await self._attempt(body, api_key)
            if isinstance(result, Ok):
                if attempt:
                    logger.info("Transcription succeeded on attempt %d", attempt + 1)
                return result

            error = result.error
            last_error = error
            if not error.is_transient:
                logger.warning("Transcription failed with non-retryable error: %s", error)
                return result

            if attempt < self.max_attempts - 1:
                delay = self.backoff_delay(attempt)
                logger.info(
                    "Transcription attempt %d failed, retrying in %.1fs: %s",
                    attempt + 1,
                    delay,
                    error,
                )
                await self._sleep(delay)

        logger.error("Transcription failed after %d attempts: %s", self.max_attempts, last_error)
        return Err(last_error)

    async def _attempt(self, body: MultipartBody, api_key: str) -> TranscriptionResult:
        try:
            response = await self.transport.post(self.api_url, body, bearer_token=api_key)
        except TransportError as exc:
            return Err(classify_transport_error(exc))
        return classify_response(response)


def classify_response(response: TransportResponse) -> TranscriptionResult:
    """Map a single Whisper HTTP response onto an outcome or error kind."""

    status = response.status_code
    if status == 200:
        try:
            payload = WhisperTranscriptionResponse.model_validate_json(response.text or "")
        except ValueError as exc:
            return Err(ApiError(f"Failed to parse response: {exc}"))
        return Ok(TranscriptionOutcome(text=payload.text))

    if status == 401:
        return Err(InvalidApiKey())
    if status == 429:
        return Err(RateLimitExceeded())

    if status == 400:
        message = parse_error_message(response.text)
        if message is None:
            return Err(InvalidAudioFormat("Invalid audio file"))
        if "audio" in message or "format" in message:
            return Err(InvalidAudioFormat(message))
        return Err(ApiError(message))

    error_text = response.text if response.text is not None else "Unknown error"
    if response.is_server_error:
        return Err(NetworkError(error_text))
    return Err(ApiError(error_text))


def classify_transport_error(exc: TransportError) -> TranscriptionErrorKind:
    """Connectivity failures and timeouts are transient; anything else is not."""

    if exc.connectivity:
        return NetworkError(exc.message)
    return Unknown(exc.message)


async def transcribe_audio_file(
    file_path: str,
    api_key: str,
    language: str,
    *,
    transport: HttpTransport | None = None,
) -> TranscriptionResult:
    """Transcribe ``file_path`` with a default-configured client."""

    return await TranscriptionClient(transport).transcribe(file_path, api_key, language)


__all__ = [
    "TranscriptionClient",
    "TranscriptionOutcome",
    "TranscriptionResult",
    "classify_response",
    "classify_transport_error",
    "transcribe_audio_file",
]
