"""Tests for the summarization command entry point and response record."""

from __future__ import annotations

import pytest

from core.exceptions import ConfigurationError
from core.result import Err, Ok
from features.settings import Settings, SettingsProvider, StaticSettingsProvider
from features.summarization import (
    SummarizationClient,
    SummarizationOutcome,
    SummarizationResponse,
    summarize_transcription,
)
from features.summarization.errors import ApiError, EmptyText, NetworkError
from tests.helpers import ScriptedTransport


class _BrokenSettingsProvider(SettingsProvider):
    def load(self) -> Settings:
        raise ConfigurationError("Failed to parse settings", key="settings")


@pytest.mark.asyncio
async def test_summarize_transcription_success(settings_provider):
    transport = ScriptedTransport().reply_json(200, {"choices": [{"message": {"content": "- point"}}]})

    response = await summarize_transcription("text", settings_provider, client=SummarizationClient(transport))

    assert response.success is True
    assert response.summary == "- point"
    assert response.error_type is None
    assert response.error_message is None
    assert "Respond in English." in transport.calls[0].json()["messages"][0]["content"]


@pytest.mark.asyncio
async def test_missing_api_key_short_circuits():
    transport = ScriptedTransport()
    provider = StaticSettingsProvider(Settings(api_key=" "))

    response = await summarize_transcription("text", provider, client=SummarizationClient(transport))

    assert response.success is False
    assert response.error_type == "api_key_not_configured"
    assert transport.calls == []


@pytest.mark.asyncio
async def test_settings_failure_maps_to_api_error():
    response = await summarize_transcription("text", _BrokenSettingsProvider())

    assert response.success is False
    assert response.error_type == "api_error"
    assert response.error_message == "Summarization failed: Failed to parse settings"


@pytest.mark.parametrize(
    "error, tag, message",
    [
        (EmptyText(), "empty_text", "Cannot summarize empty text."),
        (NetworkError("x"), "network_error", "Summarization failed - please try again. Check your internet connection."),
        (ApiError("quota"), "api_error", "Summarization failed: quota"),
    ],
)
def test_response_from_failure(error, tag, message):
    response = SummarizationResponse.from_result(Err(error))

    assert response.success is False
    assert response.summary is None
    assert response.error_type == tag
    assert response.error_message == message
    assert "retryable" not in response.model_dump()


def test_response_from_success_keeps_empty_summary():
    response = SummarizationResponse.from_result(Ok(SummarizationOutcome(summary="")))

    assert response.success is True
    assert response.summary == ""
    assert response.error_type is None
