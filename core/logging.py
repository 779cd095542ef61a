"""Centralised logging configuration for the EverVoice backend.

The library modules only create module loggers. The host process (the desktop
app shell or a script driving the commands) calls :func:`setup_logging` once at
startup, before invoking any command.
"""
from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Dict

from core.utils.env import get_env, get_env_bool

_PATH_TRIM_PREFIXES = (str(Path(__file__).resolve().parents[1]) + "/",)
_ORIGINAL_LOG_RECORD_FACTORY = logging.getLogRecordFactory()
_LOG_RECORD_FACTORY_CONFIGURED = False

_LOGGING_CONFIGURED = False

# Third-party loggers that are chatty at DEBUG/INFO
_NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "httpcore.http11",
    "httpcore.connection",
    "h11",
    "asyncio",
)


class _RedactBearerFilter(logging.Filter):
    """Mask bearer tokens that end up in formatted log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        if "Bearer " in message:
            record.msg = _redact(message)
            record.args = None
        return True


def _redact(message: str) -> str:
    parts = message.split("Bearer ")
    redacted = [parts[0]]
    for chunk in parts[1:]:
        _token, _, rest = chunk.partition(" ")
        redacted.append("Bearer ***" + (" " + rest if rest else ""))
    return "".join(redacted)


def _resolve_level(value: str | None, default: str) -> str:
    value = (value or "").strip().upper()
    if value and getattr(logging, value, None) is not None:
        return value
    return default


def _install_log_record_factory() -> None:
    """Install a log record factory that exposes trimmed paths."""

    global _LOG_RECORD_FACTORY_CONFIGURED
    if _LOG_RECORD_FACTORY_CONFIGURED:
        return

    def factory(*args, **kwargs):
        record = _ORIGINAL_LOG_RECORD_FACTORY(*args, **kwargs)
        pathname = getattr(record, "pathname", "") or ""
        for prefix in _PATH_TRIM_PREFIXES:
            if pathname.startswith(prefix):
                record.shortpathname = pathname[len(prefix):]
                break
        else:
            record.shortpathname = pathname
        return record

    logging.setLogRecordFactory(factory)
    _LOG_RECORD_FACTORY_CONFIGURED = True


def setup_logging(force: bool = False) -> None:
    """Configure root/application loggers for console and optional file output."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED and not force:
        return

    log_level = _resolve_level(get_env("EVERVOICE_LOG_LEVEL", default="INFO"), "INFO")
    console_level = _resolve_level(get_env("EVERVOICE_LOG_CONSOLE_LEVEL", default=log_level), log_level)
    file_level = _resolve_level(get_env("EVERVOICE_LOG_FILE_LEVEL", default=log_level), log_level)

    handlers: Dict[str, object] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": console_level,
            "formatter": "standard",
            "filters": ["redact_bearer"],
            "stream": "ext://sys.stdout",
        },
    }
    root_handlers = ["console"]

    log_dir_value = get_env("EVERVOICE_LOG_DIR")
    if log_dir_value:
        log_dir = Path(log_dir_value)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / (get_env("EVERVOICE_LOG_FILE", default="evervoice.log") or "evervoice.log")
        handlers["file"] = {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "level": file_level,
            "formatter": "standard",
            "filters": ["redact_bearer"],
            "filename": str(log_file),
            "when": "midnight",
            "backupCount": int(get_env("EVERVOICE_LOG_RETENTION", default="7") or "7"),
            "encoding": "utf-8",
        }
        root_handlers.append("file")

    location_fmt = "%(shortpathname)s:%(lineno)d"
    if get_env_bool("EVERVOICE_LOG_TIME_MS"):
        fmt = "%(asctime)s.%(msecs)03d %(levelname)s [{location}] - %(message)s".format(location=location_fmt)
    else:
        fmt = "%(asctime)s %(levelname)s [{location}] - %(message)s".format(location=location_fmt)

    config: Dict[str, object] = {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "redact_bearer": {"()": _RedactBearerFilter},
        },
        "formatters": {
            "standard": {
                "format": fmt,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "root": {
            "level": log_level,
            "handlers": root_handlers,
        },
    }

    _install_log_record_factory()

    logging.config.dictConfig(config)
    logging.captureWarnings(True)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _LOGGING_CONFIGURED = True


__all__ = ["setup_logging"]
