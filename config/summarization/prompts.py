"""Summarization system prompt and language lookup."""

from __future__ import annotations

from typing import Dict

LANGUAGE_NAMES: Dict[str, str] = {
    "de": "German",
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "it": "Italian",
    "pt": "Portuguese",
    "nl": "Dutch",
    "pl": "Polish",
    "ru": "Russian",
    "ja": "Japanese",
    "zh": "Chinese",
    "ko": "Korean",
}

FALLBACK_LANGUAGE_NAME = "the same language as the transcription"

SUMMARIZATION_PROMPT_TEMPLATE = (
    "Summarize the following transcription into concise Markdown-formatted bullet points. "
    "Respond in {language_name}."
)


def language_name_for(code: str) -> str:
    """Return the English language name for an ISO 639-1 ``code``."""

    return LANGUAGE_NAMES.get(code, FALLBACK_LANGUAGE_NAME)


def get_summarization_prompt(language: str) -> str:
    """Return the system prompt instructing the model to answer in ``language``."""

    return SUMMARIZATION_PROMPT_TEMPLATE.format(language_name=language_name_for(language))


__all__ = [
    "FALLBACK_LANGUAGE_NAME",
    "LANGUAGE_NAMES",
    "SUMMARIZATION_PROMPT_TEMPLATE",
    "get_summarization_prompt",
    "language_name_for",
]
