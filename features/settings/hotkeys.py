"""Global hotkey string validation (``Modifier+...+Key``)."""

from __future__ import annotations

from config.user_settings import HOTKEY_MODIFIERS, HOTKEY_SPECIAL_KEYS
from core.exceptions import ValidationError


def is_valid_key(key: str) -> bool:
    """A key is a single character or one of the named special keys."""

    return len(key) == 1 or key in HOTKEY_SPECIAL_KEYS


def validate_hotkey_format(hotkey: str) -> None:
    """Validate a hotkey such as ``Ctrl+Shift+R``.

    At least one modifier (Ctrl, Alt, Shift, Meta) is required and the last
    segment must be a valid key.

    Raises:
        ValidationError: If the hotkey is malformed.
    """

    if not hotkey:
        raise ValidationError("Hotkey cannot be empty", field="global_hotkey")

    parts = hotkey.split("+")
    if len(parts) < 2:
        raise ValidationError("Hotkey must have at least one modifier and a key", field="global_hotkey")

    has_modifier = False
    has_key = False
    for index, raw_part in enumerate(parts):
        part = raw_part.strip()
        if not part:
            raise ValidationError("Hotkey contains empty segment", field="global_hotkey")

        if part in HOTKEY_MODIFIERS:
            has_modifier = True
        elif index == len(parts) - 1:
            if not is_valid_key(part):
                raise ValidationError(f"Invalid key: {part}", field="global_hotkey")
            has_key = True
        else:
            raise ValidationError(f"Invalid modifier: {part}", field="global_hotkey")

    if not has_modifier:
        raise ValidationError(
            "Hotkey must have at least one modifier (Ctrl, Alt, Shift, Meta)",
            field="global_hotkey",
        )
    if not has_key:
        raise ValidationError("Hotkey must end with a valid key", field="global_hotkey")


__all__ = ["is_valid_key", "validate_hotkey_format"]
