"""Defaults and bounds for user settings."""

from __future__ import annotations

DEFAULT_LANGUAGE = "de"
DEFAULT_MAX_DURATION_MINUTES = 5
MIN_MAX_DURATION_MINUTES = 1
MAX_MAX_DURATION_MINUTES = 180
DEFAULT_GLOBAL_HOTKEY = "Ctrl+Shift+R"

HOTKEY_MODIFIERS = ("Ctrl", "Alt", "Shift", "Meta")
HOTKEY_SPECIAL_KEYS = frozenset(
    {
        "Space",
        "Tab",
        "Enter",
        "Escape",
        "Backspace",
        "Delete",
        "Insert",
        "Home",
        "End",
        "PageUp",
        "PageDown",
        "Up",
        "Down",
        "Left",
        "Right",
        *(f"F{index}" for index in range(1, 13)),
    }
)

__all__ = [
    "DEFAULT_GLOBAL_HOTKEY",
    "DEFAULT_LANGUAGE",
    "DEFAULT_MAX_DURATION_MINUTES",
    "HOTKEY_MODIFIERS",
    "HOTKEY_SPECIAL_KEYS",
    "MAX_MAX_DURATION_MINUTES",
    "MIN_MAX_DURATION_MINUTES",
]
