"""
Logging setup for the automation-score CLI.

``configure_logging(config, debug=...)`` is called once per CLI command,
before the snapshot is loaded.  Library modules only ever do
``logger = logging.getLogger(__name__)``; they never configure handlers.

Handlers
--------
  stderr         : always; stdout is reserved for command output (``--json``).
  log_file       : optional, parent directories created on demand.

``debug = true`` (or ``AUTOMATION_SCORE_DEBUG=1``) lowers the
``automation_score`` logger to DEBUG, which surfaces the per-component
score line from the engine and the list of fired recommendation rules
without changing the level of third-party loggers.

JSON lines (``json_format = true`` under ``[logging]``)::

    {"ts": "2026-02-24T15:00:00Z", "level": "INFO",
     "logger": "automation_score.assessment",
     "msg": "Assessment complete: score=32 recommendations=5"}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from automation_score.config import LoggingConfig

PACKAGE_LOGGER = "automation_score"

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Attributes every LogRecord carries; anything else came from ``extra=``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    """One JSON object per record: ``ts``, ``level``, ``logger``, ``msg``.

    ``extra=`` fields (for example a snapshot ``label``) are copied to the
    top level; a traceback, if any, goes under ``exc``.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict = {
            "ts":     created.strftime(TIMESTAMP_FORMAT),
            "level":  record.levelname,
            "logger": record.name,
            "msg":    record.getMessage(),
        }
        payload.update(
            (key, val)
            for key, val in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _make_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return _JsonFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=TIMESTAMP_FORMAT)


def _file_handler(log_file: str) -> Optional[logging.Handler]:
    if not log_file:
        return None
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, encoding="utf-8")


def configure_logging(config: "LoggingConfig", debug: bool = False) -> None:
    """Install stderr (and optional file) handlers on the root logger.

    Args:
        config: ``[logging]`` section of ``AppConfig``.
        debug:  Lower the ``automation_score`` package logger to DEBUG.
    """
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    handler_level = logging.DEBUG if debug else level
    formatter = _make_formatter(config.json_format)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_handler = _file_handler(config.log_file)
    if file_handler is not None:
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(handler_level)
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if debug else logging.NOTSET)
