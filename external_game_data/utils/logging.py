"""
Logging setup for external-game-data.

``configure_logging(config)`` is called once by the CLI callback. Library
modules only ever ask for ``logging.getLogger(__name__)``.

Two audiences, two streams:
  - stdout carries rendered holders (``typer.echo``), nothing else.
  - stderr (and the optional log file) carries diagnostics. Data-source
    clients log fetch failures there with traceback; the returned holder
    only keeps a short message.

Fetch-failure records carry ``extra={"error_code": ...}``. In text mode the
code is appended to the line; in JSON mode (``json_format = true``) it is a
top-level field::

    {"ts": "2026-02-24T15:00:00Z", "level": "ERROR", "logger": "...",
     "msg": "Hypixel player fetch failed for ...", "error_code": "PLAYER_NONEXISTENT"}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from external_game_data.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Third-party loggers that log every request at INFO.
QUIET_LOGGERS = ("httpx", "httpcore")

# Attributes every LogRecord has; anything else came from ``extra=``.
_STANDARD_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def _extra_fields(record: logging.LogRecord) -> dict:
    return {
        key: val
        for key, val in record.__dict__.items()
        if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_")
    }


class _TextFormatter(logging.Formatter):
    """``LOG_FORMAT`` plus `` [error_code=...]`` on fetch-failure records."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        code = getattr(record, "error_code", None)
        if code is None:
            return line
        head, sep, tail = line.partition("\n")
        return f"{head} [error_code={code}]{sep}{tail}"


class _JsonFormatter(logging.Formatter):
    """Emit one JSON object per log line.

    Fields: ``ts``, ``level``, ``logger``, ``msg``, plus ``exc`` when an
    exception is attached and any ``extra=`` fields at the top level.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                LOG_DATE_FORMAT
            ),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        payload.update(_extra_fields(record))
        return json.dumps(payload, default=str)


def build_formatter(config: "LoggingConfig") -> logging.Formatter:
    if config.json_format:
        return _JsonFormatter()
    return _TextFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def configure_logging(config: "LoggingConfig") -> None:
    """Configure the root logger from a ``LoggingConfig`` instance.

    Installs a stderr handler and, if ``config.log_file`` is set, a file
    handler (parent directories are created). Replaces any handlers a
    previous call installed.

    Args:
        config: Logging configuration section from ``AppConfig``.
    """
    level = getattr(logging, config.level.upper(), logging.INFO)
    formatter = build_formatter(config)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
