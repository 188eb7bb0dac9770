"""Append-only logging helpers for note commands."""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

from periodic_notes.config import get_settings

LOG_FILE_NAME = "note_events.jsonl"
LOGGER_NAME = "periodic_notes"


def _setup_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        logger.setLevel(logging.INFO)
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


LOGGER = _setup_logger()


def set_verbose(enabled: bool) -> None:
    LOGGER.setLevel(logging.DEBUG if enabled else logging.INFO)


def _log_path() -> Path:
    settings = get_settings()
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / LOG_FILE_NAME


def log_event(data: Mapping[str, Any]) -> None:
    """Append a JSON event to the log file and emit console output."""

    payload = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        **data,
    }
    try:
        path = _log_path()
        with path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(payload, ensure_ascii=False))
            handle.write("\n")
    except OSError:
        # A missing or read-only log dir must not fail note creation.
        pass

    status = payload.get("status", "info")
    if status == "success":
        LOGGER.info(
            "Command finished | command=%s note=%s created=%s",
            payload.get("command"),
            payload.get("note_path"),
            payload.get("created", 0),
        )
    else:
        LOGGER.error(
            "Command failed | command=%s error=%s",
            payload.get("command"),
            payload.get("error"),
        )


__all__ = ["log_event", "set_verbose", "LOGGER", "LOGGER_NAME"]
