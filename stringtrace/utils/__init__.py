"""Utility helpers for stringtrace."""

from .logger import configure_batch_logging, get_logger, reset_logging_levels, setup_logger

__all__ = [
    "setup_logger",
    "get_logger",
    "configure_batch_logging",
    "reset_logging_levels",
]
