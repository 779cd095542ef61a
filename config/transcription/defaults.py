"""Speech-to-text (Whisper) request and retry defaults."""

from __future__ import annotations

from core.utils.env import get_env, get_env_float

# Endpoint
DEFAULT_API_URL = "https://api.openai.com/v1/audio/transcriptions"
API_URL = get_env("OPENAI_TRANSCRIPTION_URL", default=DEFAULT_API_URL) or DEFAULT_API_URL

# Request shape
MODEL = "whisper-1"
AUDIO_MIME_TYPE = "audio/webm"
FALLBACK_FILENAME = "recording.webm"

# Retry policy: total attempts and exponential backoff base (seconds)
MAX_RETRY_ATTEMPTS = 3
BASE_DELAY_SECONDS = 1.0

REQUEST_TIMEOUT_SECONDS = get_env_float("OPENAI_TRANSCRIPTION_TIMEOUT", 120.0)

__all__ = [
    "API_URL",
    "AUDIO_MIME_TYPE",
    "BASE_DELAY_SECONDS",
    "DEFAULT_API_URL",
    "FALLBACK_FILENAME",
    "MAX_RETRY_ATTEMPTS",
    "MODEL",
    "REQUEST_TIMEOUT_SECONDS",
]
