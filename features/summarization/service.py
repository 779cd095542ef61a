"""Summarization entry point invoked by the UI command layer."""

from __future__ import annotations

import logging

from core.exceptions import ConfigurationError, ValidationError
from core.result import Err
from features.settings import SettingsProvider

from .client import SummarizationClient
from .errors import ApiError, ApiKeyNotConfigured
from .schemas import SummarizationResponse

logger = logging.getLogger(__name__)


async def summarize_transcription(
    text: str,
    settings_provider: SettingsProvider,
    *,
    client: SummarizationClient | None = None,
) -> SummarizationResponse:
    """Summarize ``text`` using the API key and language from settings."""

    try:
        settings = settings_provider.load()
    except (ConfigurationError, ValidationError) as exc:
        logger.error("Could not load settings for summarization: %s", exc)
        return SummarizationResponse.from_result(Err(ApiError(str(exc))))

    api_key = settings.resolved_api_key()
    if api_key is None:
        return SummarizationResponse.from_result(Err(ApiKeyNotConfigured()))

    client = client or SummarizationClient()
    result = await client.summarize(text, api_key, settings.language)
    return SummarizationResponse.from_result(result)


__all__ = ["summarize_transcription"]
