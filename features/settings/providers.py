"""Settings provider collaborators.

The persistent settings store lives outside this package; the clients only
need something that can hand out a :class:`Settings` snapshot.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from config import api_keys
from config.user_settings import DEFAULT_LANGUAGE
from core.exceptions import ConfigurationError

from .models import Settings

logger = logging.getLogger(__name__)


class SettingsProvider(ABC):
    """Source of the current user settings."""

    @abstractmethod
    def load(self) -> Settings:
        """Return the current settings.

        Raises:
            ConfigurationError: If the settings cannot be loaded or parsed.
            ValidationError: If the stored values are out of bounds.
        """


class StaticSettingsProvider(SettingsProvider):
    """Serve a fixed settings snapshot (UI-supplied or test settings)."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "StaticSettingsProvider":
        """Build a provider from stored (camelCase or snake_case) settings data."""

        try:
            settings = Settings.model_validate(dict(data))
        except PydanticValidationError as exc:
            raise ConfigurationError(f"Failed to parse settings: {exc}", key="settings") from exc
        return cls(settings)

    def load(self) -> Settings:
        return self._settings


class EnvSettingsProvider(SettingsProvider):
    """Read the API key and language from the environment on every load."""

    def load(self) -> Settings:
        keys = api_keys.load_api_keys()
        language = api_keys.load_language(DEFAULT_LANGUAGE)
        settings = Settings(api_key=keys["openai"] or None, language=language)
        logger.debug("Loaded settings from environment (language=%s)", settings.language)
        return settings


__all__ = ["EnvSettingsProvider", "SettingsProvider", "StaticSettingsProvider"]
