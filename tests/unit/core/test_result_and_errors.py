"""Unit tests for the result container and the error kind base."""

from dataclasses import FrozenInstanceError, dataclass
from typing import ClassVar

import pytest

from core.errors import TAG_API_ERROR, ErrorKind
from core.result import Err, Ok


@dataclass(frozen=True, slots=True)
class _Sample(ErrorKind):
    tag: ClassVar[str] = TAG_API_ERROR
    transient: ClassVar[bool] = True

    detail: str

    def user_message(self) -> str:
        return f"Sample failed: {self.detail}"


def test_ok_and_err_are_frozen():
    ok = Ok("value")
    err = Err(_Sample("boom"))

    assert ok.is_ok is True
    assert err.is_ok is False
    with pytest.raises(FrozenInstanceError):
        ok.value = "other"  # type: ignore[misc]


def test_error_kind_exposes_tag_transience_and_message():
    error = _Sample("boom")

    assert error.tag == "api_error"
    assert error.is_transient is True
    assert error.user_message() == "Sample failed: boom"
    assert str(error) == "api_error: boom"


def test_error_kinds_compare_by_value():
    assert _Sample("a") == _Sample("a")
    assert _Sample("a") != _Sample("b")


def test_base_error_kind_has_no_message():
    with pytest.raises(NotImplementedError):
        ErrorKind().user_message()
    assert ErrorKind().is_transient is False
    assert str(ErrorKind()) == "unknown"
