"""User settings contract shared by the API client commands."""

from .hotkeys import validate_hotkey_format
from .models import CustomAction, Settings
from .providers import EnvSettingsProvider, SettingsProvider, StaticSettingsProvider

__all__ = [
    "CustomAction",
    "EnvSettingsProvider",
    "Settings",
    "SettingsProvider",
    "StaticSettingsProvider",
    "validate_hotkey_format",
]
