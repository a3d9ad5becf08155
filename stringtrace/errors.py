#!/usr/bin/env python3
"""
Exception types raised by stringtrace

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""


class StringTraceError(Exception):
    """Base class for all stringtrace errors"""


class InvalidPattern(StringTraceError, ValueError):
    """A pattern's regex source failed to compile"""

    def __init__(self, name: str, regex: str, reason: str = ""):
        self.name = name
        self.regex = regex
        self.reason = reason
        message = f"Invalid regex for pattern '{name}': {regex!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class PatternNotFound(StringTraceError, KeyError):
    """An update or removal referenced a pattern name that is not in the catalog"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Pattern not found: '{self.name}'"


class TrackingError(StringTraceError):
    """A tracking call was rejected before touching the store"""
