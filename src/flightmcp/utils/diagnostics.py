"""Diagnostics side channel.

Stdout carries the protocol, so console logs go to stderr through Rich.
An optional log file receives one line per record::

    [2025-01-01T12:00:00.000000+00:00] [INFO] Flight search request: {...}

Structured payloads are attached with ``extra={"payload": ...}``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "flightmcp"


class PayloadFormatter(logging.Formatter):
    """``[timestamp] [LEVEL] message`` plus the JSON payload, if any."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        line = f"[{timestamp}] [{record.levelname}] {record.getMessage()}"
        payload = getattr(record, "payload", None)
        if payload is not None:
            line += ": " + json.dumps(payload, default=str)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class PayloadRichHandler(RichHandler):
    """RichHandler that appends a record's payload to the message."""

    def render_message(self, record: logging.LogRecord, message: str):  # type: ignore[no-untyped-def]
        payload = getattr(record, "payload", None)
        if payload is not None:
            message = f"{message}: {json.dumps(payload, default=str)}"
        return super().render_message(record, message)


def configure_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Attach stderr (and optional file) handlers to the ``flightmcp`` logger.

    Safe to call more than once; previous handlers are replaced.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level)
    logger.propagate = False

    console = PayloadRichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        show_path=False,
    )
    console.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console)

    if log_file:
        try:
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
        except OSError as exc:
            logger.error("Logging failure: cannot open %s (%s)", log_file, exc)
        else:
            file_handler.setFormatter(PayloadFormatter())
            logger.addHandler(file_handler)

    return logger
