"""Root logger setup for collection runs.

Runs are usually started by hand or from a scheduled job, so logs go to
stdout unless ``LOG_OUTPUT`` asks for a rotating file as well (or instead).
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Literal

LogOutput = Literal["stdout", "file", "both"]
LogFormat = Literal["text", "json"]

_TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_JSON_FORMAT = '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'


def _build_handlers(output: str, file_path: str) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if output in ("stdout", "both"):
        handlers.append(logging.StreamHandler(sys.stdout))
    if output in ("file", "both"):
        log_dir = os.path.dirname(file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(RotatingFileHandler(file_path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"))
    return handlers


def configure_logging(
    level: str | int | None = None,
    output: LogOutput | None = None,
    file_path: str | None = None,
    log_format: LogFormat | None = None,
) -> None:
    """Replace the root logger's handlers.

    Arguments left as ``None`` are read from ``LOG_LEVEL``, ``LOG_OUTPUT``,
    ``LOG_FILE_PATH`` and ``LOG_FORMAT`` when called, so a ``.env`` loaded
    beforehand is honoured. Raises ``OSError`` if the log file cannot be
    opened.
    """
    level = level or os.environ.get("LOG_LEVEL", "INFO").upper()
    output = output or os.environ.get("LOG_OUTPUT", "stdout").lower()
    file_path = file_path or os.environ.get("LOG_FILE_PATH", "logs/ifts-data.log")
    log_format = log_format or os.environ.get("LOG_FORMAT", "text").lower()

    handlers = _build_handlers(output, file_path)
    formatter = logging.Formatter(_JSON_FORMAT if log_format == "json" else _TEXT_FORMAT)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
