"""Debug logging with in-app viewer support.

Captures both viewdeck ``log`` calls and Python logging module records
into a ring buffer that the Debug Log dialog (F12) displays.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any

from textual import log as textual_log


class LogSource(Enum):
    """Source of the log entry."""

    VIEWDECK = "VIEWDECK"
    LOGGING = "LOGGING"


@dataclass(slots=True)
class LogEntry:
    """A captured log entry."""

    group: str  # Level name (DEBUG, INFO, WARNING, ERROR)
    message: str
    timestamp: float
    source: LogSource


MAX_LOG_LINES = 2000
log_buffer: deque[LogEntry] = deque(maxlen=MAX_LOG_LINES)

# Incremented on every clear so viewers can detect it
_buffer_generation: int = 0


class ViewDeckLogger:
    """Logger that captures entries for in-app viewing and passes them to Textual."""

    def __call__(self, *args: object, **kwargs: Any) -> None:
        self.info(*args, **kwargs)

    def _log(self, level: str, *args: object, **kwargs: Any) -> None:
        output = " ".join(str(arg) for arg in args)
        if kwargs:
            key_values = " ".join(f"{key}={value!r}" for key, value in kwargs.items())
            output = f"{output} {key_values}" if output else key_values

        log_buffer.append(
            LogEntry(
                group=level,
                message=output,
                timestamp=time.time(),
                source=LogSource.VIEWDECK,
            )
        )

        # Also pass to Textual's devtools logger
        textual_log(output)

    def debug(self, *args: object, **kwargs: Any) -> None:
        self._log("DEBUG", *args, **kwargs)

    def info(self, *args: object, **kwargs: Any) -> None:
        self._log("INFO", *args, **kwargs)

    def warning(self, *args: object, **kwargs: Any) -> None:
        self._log("WARNING", *args, **kwargs)

    def error(self, *args: object, **kwargs: Any) -> None:
        self._log("ERROR", *args, **kwargs)


class DebugLogHandler(logging.Handler):
    """Logging handler that captures records to the debug buffer."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            log_buffer.append(
                LogEntry(
                    group=record.levelname,
                    message=msg,
                    timestamp=record.created,
                    source=LogSource.LOGGING,
                )
            )
        except Exception:
            self.handleError(record)


_debug_logging_initialized: bool = False


def setup_debug_logging(max_lines: int | None = None) -> None:
    """Route Python logging into the debug buffer.

    Idempotent: only the first call installs the handler. ``max_lines``
    resizes the ring buffer, keeping the newest entries.
    """
    global _debug_logging_initialized, log_buffer

    if max_lines is not None and max_lines != log_buffer.maxlen:
        log_buffer = deque(log_buffer, maxlen=max_lines)

    if _debug_logging_initialized:
        return

    handler = DebugLogHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logging.getLogger().addHandler(handler)

    _debug_logging_initialized = True
    log.info("Debug logging initialized - press F12 to view logs")


def clear_log_buffer() -> None:
    global _buffer_generation
    log_buffer.clear()
    _buffer_generation += 1


def get_buffer_generation() -> int:
    """Get the current buffer generation (incremented on clear)."""
    return _buffer_generation


def get_log_entries() -> list[LogEntry]:
    """Snapshot of the buffer, oldest first."""
    return list(log_buffer)


log = ViewDeckLogger()
