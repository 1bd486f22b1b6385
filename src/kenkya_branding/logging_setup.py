"""
Logging setup for the branding tools.

Provides a colored console handler plus optional plain-text and JSON-lines
file handlers.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter with ANSI color codes for log levels."""

    COLORS = {
        "DEBUG": "\033[36m",     # cyan
        "INFO": "\033[32m",      # green
        "WARNING": "\033[33m",   # yellow
        "ERROR": "\033[31m",     # red
        "CRITICAL": "\033[41m",  # red background
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname:8s}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message, and any
    color-related extra fields attached to the record.
    """

    EXTRA_FIELDS = ("count", "palette", "path")

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key in self.EXTRA_FIELDS:
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)

        return json.dumps(log_entry, default=str)


def setup_logging(
    log_dir: str | Path | None = None,
    level: int | str = logging.INFO,
    name: str = "kenkya_branding",
    console: bool = True,
    json_file: bool = True,
) -> logging.Logger:
    """Configure logging for the package.

    Handlers:
    1. Console (colored, human-readable), written to stderr
    2. Text file ``branding.log`` (detailed), when ``log_dir`` is given
    3. JSON file ``branding.jsonl`` (structured), when ``log_dir`` is given

    Args:
        log_dir: Directory for log files. If None, only console logging.
        level: Logging level, as a number or a name such as ``"DEBUG"``.
        name: Logger name.
        console: Enable console handler.
        json_file: Enable JSON file handler.

    Returns:
        Configured logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(ColoredConsoleFormatter(
            fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
            datefmt="%H:%M:%S",
        ))
        logger.addHandler(console_handler)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_dir / "branding.log")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(file_handler)

        if json_file:
            json_handler = logging.FileHandler(log_dir / "branding.jsonl")
            json_handler.setLevel(logging.DEBUG)
            json_handler.setFormatter(JSONFormatter())
            logger.addHandler(json_handler)

    return logger
