"""Analysis modules for stringtrace."""

from .categorizer import DefaultCategorizer
from .pattern_provider import DefaultPatternProvider, default_pattern_defs
from .string_analyzer import DefaultStringAnalyzer

__all__ = [
    "DefaultCategorizer",
    "DefaultPatternProvider",
    "DefaultStringAnalyzer",
    "default_pattern_defs",
]
