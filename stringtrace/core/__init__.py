"""Tracking engine for stringtrace."""

from .filters import FilterMatcher, compile_filter_regex
from .statistics import build_statistics, length_bucket
from .tracker import StringTracker, derive_context

__all__ = [
    "StringTracker",
    "derive_context",
    "FilterMatcher",
    "compile_filter_regex",
    "build_statistics",
    "length_bucket",
]
