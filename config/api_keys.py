"""API key and language loading from the environment."""

from __future__ import annotations

from typing import Dict

from core.utils.env import get_env

OPENAI_API_KEY_ENV = "OPENAI_API_KEY"
LANGUAGE_ENV = "EVERVOICE_LANGUAGE"


def load_api_keys() -> Dict[str, str]:
    """Load API keys from the environment; missing keys map to empty strings."""

    return {
        "openai": get_env(OPENAI_API_KEY_ENV, default="") or "",
    }


def load_language(default: str) -> str:
    """Return the transcription language override, or ``default``."""

    value = (get_env(LANGUAGE_ENV, default="") or "").strip()
    return value or default


__all__ = ["LANGUAGE_ENV", "OPENAI_API_KEY_ENV", "load_api_keys", "load_language"]
