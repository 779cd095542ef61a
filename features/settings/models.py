"""User settings consumed by the API client commands."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from config.user_settings import (
    DEFAULT_GLOBAL_HOTKEY,
    DEFAULT_LANGUAGE,
    DEFAULT_MAX_DURATION_MINUTES,
    MAX_MAX_DURATION_MINUTES,
    MIN_MAX_DURATION_MINUTES,
)
from core.exceptions import ValidationError

from .hotkeys import validate_hotkey_format


class CustomAction(BaseModel):
    """User-defined button that posts the transcription to a URL."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: str
    name: str
    url: str


class Settings(BaseModel):
    """Settings snapshot; stored with camelCase keys by the settings store."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    max_duration: int = DEFAULT_MAX_DURATION_MINUTES
    api_key: Optional[str] = None
    language: str = DEFAULT_LANGUAGE
    custom_actions: List[CustomAction] = Field(default_factory=list)
    global_hotkey: Optional[str] = None

    @field_validator("language")
    @classmethod
    def language_not_blank(cls, value: str) -> str:
        value = value.strip()
        return value or DEFAULT_LANGUAGE

    def validate_values(self) -> None:
        """Validate user-editable values before they are persisted.

        Raises:
            ValidationError: If a value is out of bounds or malformed.
        """

        if self.max_duration < MIN_MAX_DURATION_MINUTES:
            raise ValidationError("Max duration must be greater than 0", field="max_duration")
        if self.max_duration > MAX_MAX_DURATION_MINUTES:
            raise ValidationError(
                f"Max duration cannot exceed {MAX_MAX_DURATION_MINUTES} minutes",
                field="max_duration",
            )
        if self.global_hotkey is not None:
            validate_hotkey_format(self.global_hotkey)

    def resolved_api_key(self) -> Optional[str]:
        """Return the API key, treating blank values as not configured."""

        if self.api_key is None or not self.api_key.strip():
            return None
        return self.api_key

    @property
    def effective_global_hotkey(self) -> str:
        return self.global_hotkey or DEFAULT_GLOBAL_HOTKEY

    def find_custom_action(self, action_id: str) -> Optional[CustomAction]:
        for action in self.custom_actions:
            if action.id == action_id:
                return action
        return None


__all__ = ["CustomAction", "Settings"]
