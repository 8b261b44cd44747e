"""Structured local logging and crash hook setup."""

from __future__ import annotations

import faulthandler
import json
import logging
import logging.handlers
import os
import platform
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


_LOGGER_NAME = "conky_calendar"
_EXTRA_FIELDS = ("event", "crash_id", "month", "week_start")

_crash_hooks_installed = False


def _config_root() -> Path:
    if platform.system() == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "ConkyCalendar"
    if platform.system() == "Darwin":
        return Path.home() / "Library" / "Application Support" / "ConkyCalendar"
    return Path.home() / ".config" / "conky-calendar"


def log_dir() -> Path:
    path = _config_root() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_logging(keep_files: int = 7, console: bool = False, level: str = "INFO") -> logging.Logger:
    """Attach the rotating JSON file handler once; stdout is left to the calendar."""
    logger = get_logger()
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    try:
        handler: logging.Handler = logging.handlers.TimedRotatingFileHandler(
            filename=str(log_dir() / "conky-calendar.log"),
            when="midnight",
            backupCount=max(2, keep_files),
            encoding="utf-8",
        )
        handler.setFormatter(JsonFormatter())
    except OSError:
        # Unwritable config root: run without file logging rather than lose the calendar.
        handler = logging.NullHandler()
    logger.addHandler(handler)

    if console:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        logger.addHandler(stream_handler)

    logger.debug("logging configured", extra={"event": "logging_configured"})
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def _install_fault_handler(logger: logging.Logger) -> None:
    try:
        fh = (log_dir() / "fault.log").open("a", encoding="utf-8")
    except OSError:
        logger.debug("fault log unavailable", extra={"event": "fault_handler_skipped"})
        return
    faulthandler.enable(file=fh)
    logger.debug("fault handler enabled", extra={"event": "fault_handler_enabled"})


def install_crash_hooks() -> None:
    """Log uncaught exceptions with a crash id, then let the previous hook print the traceback.

    Only the first call in a process installs anything.
    """
    global _crash_hooks_installed
    if _crash_hooks_installed:
        return
    _crash_hooks_installed = True
    logger = get_logger()
    previous_hook = sys.excepthook

    def _log_uncaught(exc_type, exc_value, exc_tb) -> None:
        crash_id = str(uuid.uuid4())
        logger.critical(
            f"uncaught exception crash_id={crash_id}",
            exc_info=(exc_type, exc_value, exc_tb),
            extra={"event": "uncaught_exception", "crash_id": crash_id},
        )
        previous_hook(exc_type, exc_value, exc_tb)

    sys.excepthook = _log_uncaught
    _install_fault_handler(logger)
