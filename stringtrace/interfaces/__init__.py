#!/usr/bin/env python3
"""
stringtrace Interfaces Module

Protocol-based interfaces for the collaborators the tracker depends on. Any
class implementing the required methods satisfies the protocol, so tests and
hosts can substitute their own analyzer or categorizer.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .string_analysis import (
    CategorizerInterface,
    PatternProviderInterface,
    StringAnalyzerInterface,
)

__all__ = [
    "PatternProviderInterface",
    "StringAnalyzerInterface",
    "CategorizerInterface",
]
