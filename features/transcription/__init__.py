"""Speech-to-text transcription feature."""

from .client import (
    TranscriptionClient,
    TranscriptionOutcome,
    TranscriptionResult,
    transcribe_audio_file,
)
from .errors import TranscriptionError
from .schemas import TranscriptionResponse
from .service import transcribe_audio

__all__ = [
    "TranscriptionClient",
    "TranscriptionError",
    "TranscriptionOutcome",
    "TranscriptionResponse",
    "TranscriptionResult",
    "transcribe_audio",
    "transcribe_audio_file",
]
