"""Chat-completions summarization defaults."""

from __future__ import annotations

from core.utils.env import get_env, get_env_float

DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"
API_URL = get_env("OPENAI_CHAT_COMPLETIONS_URL", default=DEFAULT_API_URL) or DEFAULT_API_URL

MODEL = "gpt-4o-mini"

REQUEST_TIMEOUT_SECONDS = get_env_float("OPENAI_CHAT_TIMEOUT", 60.0)

__all__ = ["API_URL", "DEFAULT_API_URL", "MODEL", "REQUEST_TIMEOUT_SECONDS"]
