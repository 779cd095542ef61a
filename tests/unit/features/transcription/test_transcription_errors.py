"""Tests for transcription error kinds."""

import typing

import pytest

from features.transcription import errors


@pytest.mark.parametrize(
    "error, tag, message",
    [
        (errors.ApiKeyNotConfigured(), "api_key_not_configured",
         "API key not configured. Please add your OpenAI API key in Settings."),
        (errors.InvalidApiKey(), "invalid_api_key", "Invalid API key. Please check your OpenAI API key in Settings."),
        (errors.FileNotFound("/x.webm"), "file_not_found", "Recording file not found: /x.webm"),
        (errors.FileReadError("denied"), "file_read_error",
         "Failed to read recording file. Please try recording again."),
        (errors.InvalidAudioFormat("bad"), "invalid_audio_format", "Invalid audio format. Please try recording again."),
        (errors.NetworkError("reset"), "network_error",
         "Transcription failed - please try again. Check your internet connection."),
        (errors.RateLimitExceeded(), "rate_limit_exceeded", "Rate limit exceeded - please wait a moment and try again."),
        (errors.ApiError("quota"), "api_error", "Transcription failed: quota"),
        (errors.Unknown("boom"), "unknown", "An unexpected error occurred: boom"),
    ],
)
def test_tags_and_messages(error, tag, message):
    assert error.tag == tag
    assert error.user_message() == message


def test_only_network_and_rate_limit_are_transient():
    transient = {
        type(error).__name__
        for error in (
            errors.ApiKeyNotConfigured(),
            errors.InvalidApiKey(),
            errors.FileNotFound("p"),
            errors.FileReadError("d"),
            errors.InvalidAudioFormat("d"),
            errors.NetworkError("d"),
            errors.RateLimitExceeded(),
            errors.ApiError("d"),
            errors.Unknown("d"),
        )
        if error.is_transient
    }
    assert transient == {"NetworkError", "RateLimitExceeded"}


def test_closed_union_lists_every_variant():
    variants = set(typing.get_args(errors.TranscriptionErrorKind))

    assert variants == set(errors.TranscriptionError.__subclasses__())
