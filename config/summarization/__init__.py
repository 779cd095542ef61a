"""Summarization configuration - endpoint, model and prompts."""

from __future__ import annotations

from .defaults import API_URL, DEFAULT_API_URL, MODEL, REQUEST_TIMEOUT_SECONDS
from .prompts import (
    FALLBACK_LANGUAGE_NAME,
    LANGUAGE_NAMES,
    SUMMARIZATION_PROMPT_TEMPLATE,
    get_summarization_prompt,
    language_name_for,
)

__all__ = [
    "API_URL",
    "DEFAULT_API_URL",
    "FALLBACK_LANGUAGE_NAME",
    "LANGUAGE_NAMES",
    "MODEL",
    "REQUEST_TIMEOUT_SECONDS",
    "SUMMARIZATION_PROMPT_TEMPLATE",
    "get_summarization_prompt",
    "language_name_for",
]
