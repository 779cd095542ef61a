"""Wire models for the OpenAI-compatible transcription and chat endpoints."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class OpenAIErrorDetail(BaseModel):
    """Inner object of the ``{"error": {...}}`` envelope."""

    model_config = ConfigDict(extra="ignore")

    message: str
    type: str | None = None
    code: str | int | None = None


class OpenAIErrorResponse(BaseModel):
    """Error envelope returned on non-2xx responses."""

    model_config = ConfigDict(extra="ignore")

    error: OpenAIErrorDetail


class WhisperTranscriptionResponse(BaseModel):
    """Successful transcription body."""

    model_config = ConfigDict(extra="ignore")

    text: str


class ChatMessage(BaseModel):
    """Single chat message in a completion request."""

    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(BaseModel):
    """Body of a chat-completions request."""

    model: str
    messages: List[ChatMessage]


class ChatResponseMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: str | None = None


class ChatChoice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: ChatResponseMessage


class ChatCompletionResponse(BaseModel):
    """Successful chat-completions body; only the first choice is used."""

    model_config = ConfigDict(extra="ignore")

    choices: List[ChatChoice] = Field(default_factory=list)

    def first_content(self) -> str:
        """Return the first choice's content, or an empty string."""

        if not self.choices:
            return ""
        return self.choices[0].message.content or ""


def parse_error_message(body: str | None) -> str | None:
    """Return ``error.message`` from an error envelope, or ``None``."""

    if not body:
        return None
    try:
        return OpenAIErrorResponse.model_validate_json(body).error.message
    except ValueError:
        return None


__all__ = [
    "ChatChoice",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatMessage",
    "ChatResponseMessage",
    "OpenAIErrorDetail",
    "OpenAIErrorResponse",
    "WhisperTranscriptionResponse",
    "parse_error_message",
]
