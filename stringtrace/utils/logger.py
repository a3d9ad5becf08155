#!/usr/bin/env python3
"""
Logging utilities for stringtrace
"""

import logging
import sys
import threading
from pathlib import Path

import colorlog

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
COLOR_LOG_FORMAT = "%(log_color)s%(asctime)s - %(name)s - %(levelname)s%(reset)s - %(message)s"

# Component loggers that get quietened during bulk ingestion
BATCH_LOGGERS = (
    "stringtrace.core",
    "stringtrace.modules",
    "stringtrace.utils",
)

_setup_lock = threading.Lock()
_saved_levels: dict[str, int] = {}


class ThreadSafeHandler(logging.StreamHandler):
    """Stream handler that serialises emits from concurrent ingestion threads"""

    def __init__(self, stream=None):
        super().__init__(stream)
        self._emit_lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        with self._emit_lock:
            super().emit(record)


def _console_formatter() -> logging.Formatter:
    return colorlog.ColoredFormatter(
        COLOR_LOG_FORMAT,
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
    )


def setup_logger(
    name: str = "stringtrace",
    level: int = logging.INFO,
    thread_safe: bool = True,
    log_to_file: bool = False,
) -> logging.Logger:
    """Setup logger with a coloured console handler and an optional file handler"""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    with _setup_lock:
        # Avoid duplicate handlers
        if logger.handlers:
            return logger

        if thread_safe:
            console_handler: logging.StreamHandler = ThreadSafeHandler(sys.stderr)
        else:
            console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(_console_formatter())
        logger.addHandler(console_handler)

        if log_to_file:
            try:
                log_dir = Path.home() / ".stringtrace" / "logs"
                log_dir.mkdir(parents=True, exist_ok=True)

                file_handler = logging.FileHandler(log_dir / "stringtrace.log")
                file_handler.setLevel(logging.DEBUG)
                file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
                logger.addHandler(file_handler)
            except OSError as exc:
                logger.warning(f"Could not open log file, using console only: {exc}")

    return logger


def get_logger(name: str = "stringtrace") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


def configure_batch_logging() -> None:
    """Raise component loggers to WARNING while bulk results are ingested"""
    for name in BATCH_LOGGERS:
        component = logging.getLogger(name)
        _saved_levels.setdefault(name, component.level)
        component.setLevel(logging.WARNING)


def reset_logging_levels() -> None:
    """Restore the levels saved by configure_batch_logging"""
    for name in BATCH_LOGGERS:
        if name in _saved_levels:
            logging.getLogger(name).setLevel(_saved_levels.pop(name))
