"""Tests for the settings model and hotkey validation."""

from __future__ import annotations

import pytest

from core.exceptions import ValidationError
from features.settings import CustomAction, Settings, validate_hotkey_format


def test_defaults():
    settings = Settings()

    assert settings.max_duration == 5
    assert settings.api_key is None
    assert settings.language == "de"
    assert settings.custom_actions == []
    assert settings.global_hotkey is None
    assert settings.effective_global_hotkey == "Ctrl+Shift+R"


def test_reads_stored_camel_case_keys():
    settings = Settings.model_validate(
        {
            "maxDuration": 30,
            "apiKey": "sk-stored",
            "language": "fr",
            "customActions": [{"id": "a1", "name": "Webhook", "url": "https://hooks.test"}],
            "globalHotkey": "Alt+F9",
            "theme": "dark",
        }
    )

    assert settings.max_duration == 30
    assert settings.resolved_api_key() == "sk-stored"
    assert settings.custom_actions == [CustomAction(id="a1", name="Webhook", url="https://hooks.test")]
    assert settings.effective_global_hotkey == "Alt+F9"
    assert settings.model_dump(by_alias=True)["maxDuration"] == 30


@pytest.mark.parametrize("api_key", [None, "", "  \t"])
def test_blank_api_key_is_not_configured(api_key):
    assert Settings(api_key=api_key).resolved_api_key() is None


def test_blank_language_falls_back_to_default():
    assert Settings(language="  ").language == "de"


def test_find_custom_action():
    action = CustomAction(id="x", name="X", url="https://x.test")
    settings = Settings(custom_actions=[action])

    assert settings.find_custom_action("x") == action
    assert settings.find_custom_action("y") is None


@pytest.mark.parametrize("minutes", [0, -5, 181])
def test_max_duration_bounds(minutes):
    with pytest.raises(ValidationError) as exc_info:
        Settings(max_duration=minutes).validate_values()
    assert exc_info.value.field == "max_duration"


def test_validate_values_accepts_bounds_and_checks_hotkey():
    Settings(max_duration=1).validate_values()
    Settings(max_duration=180, global_hotkey="Ctrl+Alt+Space").validate_values()

    with pytest.raises(ValidationError):
        Settings(global_hotkey="R").validate_values()


@pytest.mark.parametrize(
    "hotkey",
    ["Ctrl+Shift+R", "Alt+F12", "Meta+Space", "Ctrl+Alt+Shift+Meta+1", "Shift+PageDown", "Ctrl+ Shift +R"],
)
def test_valid_hotkeys(hotkey):
    validate_hotkey_format(hotkey)


@pytest.mark.parametrize(
    "hotkey, fragment",
    [
        ("", "cannot be empty"),
        ("R", "at least one modifier and a key"),
        ("Ctrl++R", "empty segment"),
        ("Ctrl+Shift", "must end with a valid key"),
        ("Ctrl+Hyper+R", "Invalid modifier: Hyper"),
        ("Ctrl+F13", "Invalid key: F13"),
        ("Q+R", "Invalid modifier: Q"),
    ],
)
def test_invalid_hotkeys(hotkey, fragment):
    with pytest.raises(ValidationError) as exc_info:
        validate_hotkey_format(hotkey)
    assert fragment in exc_info.value.message
    assert exc_info.value.field == "global_hotkey"
