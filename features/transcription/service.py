"""Transcription entry point invoked by the UI command layer."""

from __future__ import annotations

import logging

from core.exceptions import ConfigurationError, ValidationError
from core.result import Err
from features.settings import SettingsProvider

from .client import TranscriptionClient
from .errors import ApiKeyNotConfigured, Unknown
from .schemas import TranscriptionResponse

logger = logging.getLogger(__name__)


async def transcribe_audio(
    file_path: str,
    settings_provider: SettingsProvider,
    *,
    client: TranscriptionClient | None = None,
) -> TranscriptionResponse:
    """Transcribe a recording using the API key and language from settings."""

    try:
        settings = settings_provider.load()
    except (ConfigurationError, ValidationError) as exc:
        logger.error("Could not load settings for transcription: %s", exc)
        return TranscriptionResponse.from_result(Err(Unknown(str(exc))))

    api_key = settings.resolved_api_key()
    if api_key is None:
        return TranscriptionResponse.from_result(Err(ApiKeyNotConfigured()))

    client = client or TranscriptionClient()
    result = await client.transcribe(file_path, api_key, settings.language)
    return TranscriptionResponse.from_result(result)


__all__ = ["transcribe_audio"]
