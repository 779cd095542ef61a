"""Transcription summarization through a chat-completions API."""

from .client import SummarizationClient, SummarizationOutcome, SummarizationResult, summarize_text
from .errors import SummarizationError
from .schemas import SummarizationResponse
from .service import summarize_transcription

__all__ = [
    "SummarizationClient",
    "SummarizationError",
    "SummarizationOutcome",
    "SummarizationResponse",
    "SummarizationResult",
    "summarize_text",
    "summarize_transcription",
]
