"""Structured event logging.

Emits one JSON object per event through the standard ``logging`` module so
the output can be shipped to any log collector. Handlers are attached once
by ``configure_logging`` from each entry point; library code only logs.

Passwords are never written to the log, only their metadata.
"""

import json
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from threading import Lock
from typing import Optional

from core.config import LOG_BACKUP_COUNT, LOG_FILE, LOG_LEVEL, LOG_MAX_BYTES


LOGGER_NAME = "passgen"

logger = logging.getLogger(LOGGER_NAME)
event_logger = logging.getLogger(f"{LOGGER_NAME}.events")

# Module-level state
_logging_configured = False
_configure_lock = Lock()


def configure_logging(
    level: str = LOG_LEVEL,
    log_file: Optional[str] = LOG_FILE,
) -> None:
    """Attach a handler to the package logger on first use.

    Args:
        level: Logging level name (e.g. 'INFO', 'DEBUG')
        log_file: Rotating log file path, or None to log to stderr
    """
    global _logging_configured
    with _configure_lock:
        if _logging_configured:
            return

        if log_file:
            handler: logging.Handler = RotatingFileHandler(
                log_file,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
            )
        else:
            handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))

        logger.setLevel(getattr(logging, level, logging.INFO))
        logger.addHandler(handler)

        _logging_configured = True


def log_event(
    event_type: str,
    status: str,
    details: Optional[dict] = None,
    level: int = logging.INFO,
) -> None:
    """Log an event as a single JSON line.

    Args:
        event_type: Type of event (e.g. 'password_generated')
        status: Event status (e.g. 'SUCCESS', 'REJECTED')
        details: Optional additional event details
        level: Logging level to emit the event at
    """
    if not event_logger.isEnabledFor(level):
        return

    event = {
        "timestamp": datetime.now().isoformat(),
        "event_type": event_type,
        "status": status,
        "source": "passgen",
    }

    if details:
        event["details"] = details

    event_logger.log(level, json.dumps(event, sort_keys=True))
