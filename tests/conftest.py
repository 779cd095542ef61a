"""Test configuration helpers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Explicitly opt-in to the async plugin we rely on. Some execution environments
# disable plugin auto-discovery via ``PYTEST_DISABLE_PLUGIN_AUTOLOAD`` which
# prevents ``pytest-asyncio`` from being loaded even if it is installed.
pytest_plugins = ("pytest_asyncio",)

# Ensure the repository root is importable so that ``import core`` and the other
# absolute imports used throughout the codebase succeed from any working directory.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tests.helpers import RecordingSleep, ScriptedTransport  # noqa: E402
from features.settings import Settings, StaticSettingsProvider  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def suppress_asyncio_debug_logging() -> None:
    """Prevent asyncio debug logs from writing to closed pytest capture streams."""

    logger = logging.getLogger("asyncio")
    if logger.getEffectiveLevel() < logging.INFO:
        logger.setLevel(logging.INFO)


@pytest.fixture()
def transport() -> ScriptedTransport:
    """Scripted transport with no queued replies."""

    return ScriptedTransport()


@pytest.fixture()
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture()
def settings_provider() -> StaticSettingsProvider:
    """Settings with an API key and English as the language."""

    return StaticSettingsProvider(Settings(api_key="sk-test", language="en"))


@pytest.fixture()
def recording_file(tmp_path: Path) -> Path:
    """Small fake recording on disk."""

    path = tmp_path / "recording_20240101.webm"
    path.write_bytes(b"\x1a\x45\xdf\xa3fake-webm")
    return path
