"""Tests for the transcription command entry point and response record."""

from __future__ import annotations

import httpx
import pydantic
import pytest

from core.exceptions import ConfigurationError, ValidationError
from core.http import HttpxTransport
from core.result import Err, Ok
from features.settings import Settings, SettingsProvider, StaticSettingsProvider
from features.transcription import TranscriptionClient, TranscriptionOutcome, TranscriptionResponse, transcribe_audio
from features.transcription.errors import (
    ApiKeyNotConfigured,
    FileNotFound,
    NetworkError,
    RateLimitExceeded,
    Unknown,
)
from tests.helpers import RecordingSleep, ScriptedTransport


class _BrokenSettingsProvider(SettingsProvider):
    def load(self) -> Settings:
        raise ConfigurationError("settings store unavailable", key="settings")


@pytest.mark.asyncio
async def test_transcribe_audio_uses_settings_language(recording_file, settings_provider):
    transport = ScriptedTransport().reply_json(200, {"text": "hello"})
    client = TranscriptionClient(transport, sleep=RecordingSleep())

    response = await transcribe_audio(str(recording_file), settings_provider, client=client)

    assert response.success is True
    assert response.text == "hello"
    assert response.error_type is None
    assert response.retryable is None
    assert transport.calls[0].body.fields["language"] == "en"


@pytest.mark.asyncio
@pytest.mark.parametrize("api_key", [None, "", "   "])
async def test_missing_api_key_short_circuits(recording_file, api_key):
    transport = ScriptedTransport()
    provider = StaticSettingsProvider(Settings(api_key=api_key))

    response = await transcribe_audio(str(recording_file), provider, client=TranscriptionClient(transport))

    assert response.success is False
    assert response.error_type == "api_key_not_configured"
    assert response.error_message == "API key not configured. Please add your OpenAI API key in Settings."
    assert response.retryable is False
    assert transport.calls == []


@pytest.mark.asyncio
async def test_settings_failure_maps_to_unknown(recording_file):
    response = await transcribe_audio(str(recording_file), _BrokenSettingsProvider())

    assert response.success is False
    assert response.error_type == "unknown"
    assert response.error_message == "An unexpected error occurred: settings store unavailable"


@pytest.mark.parametrize(
    "error, tag, message, retryable",
    [
        (ApiKeyNotConfigured(), "api_key_not_configured", "API key not configured", False),
        (FileNotFound("/tmp/a.webm"), "file_not_found", "Recording file not found: /tmp/a.webm", False),
        (NetworkError("reset"), "network_error", "Check your internet connection.", True),
        (RateLimitExceeded(), "rate_limit_exceeded", "Rate limit exceeded", True),
        (Unknown("boom"), "unknown", "An unexpected error occurred: boom", False),
    ],
)
def test_response_from_failure(error, tag, message, retryable):
    response = TranscriptionResponse.from_result(Err(error))

    assert response.success is False
    assert response.text is None
    assert response.error_type == tag
    assert message in response.error_message
    assert response.retryable is retryable


def test_response_from_success():
    response = TranscriptionResponse.from_result(Ok(TranscriptionOutcome(text="hi")))

    assert response.model_dump() == {
        "success": True,
        "error_type": None,
        "error_message": None,
        "text": "hi",
        "retryable": None,
    }


def test_response_rejects_inconsistent_records():
    with pytest.raises(pydantic.ValidationError):
        TranscriptionResponse(success=True, text="x", retryable=False)
    with pytest.raises(pydantic.ValidationError):
        TranscriptionResponse(success=False, error_type="unknown", error_message="m")
    with pytest.raises(pydantic.ValidationError):
        TranscriptionResponse(success=False, error_type="unknown", retryable=False)


class _OutOfBoundsSettingsProvider(SettingsProvider):
    def load(self) -> Settings:
        raise ValidationError("Max duration cannot exceed 180 minutes", field="max_duration")


@pytest.mark.asyncio
async def test_settings_validation_failure_maps_to_unknown(recording_file):
    response = await transcribe_audio(str(recording_file), _OutOfBoundsSettingsProvider())

    assert response.error_type == "unknown"
    assert "Max duration cannot exceed 180 minutes" in response.error_message


@pytest.mark.asyncio
async def test_non_ascii_api_key_still_returns_response_record(recording_file):
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("request must not be sent")

    transport = HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    provider = StaticSettingsProvider(Settings(api_key="sk-“pasted”"))

    response = await transcribe_audio(
        str(recording_file), provider, client=TranscriptionClient(transport, sleep=RecordingSleep())
    )

    assert response.success is False
    assert response.error_type == "unknown"
    assert response.retryable is False
