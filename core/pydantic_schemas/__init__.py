"""Public pydantic schema exports shared by the API clients."""

from .openai import (
    ChatChoice,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    ChatResponseMessage,
    OpenAIErrorDetail,
    OpenAIErrorResponse,
    WhisperTranscriptionResponse,
    parse_error_message,
)
from .responses import ClientResponse

__all__ = [
    "ChatChoice",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatMessage",
    "ChatResponseMessage",
    "ClientResponse",
    "OpenAIErrorDetail",
    "OpenAIErrorResponse",
    "WhisperTranscriptionResponse",
    "parse_error_message",
]
