#!/usr/bin/env python3
"""
Filter evaluation for tracked strings

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import re

from ..schemas.tracking import StringEntry, StringFilter
from ..utils.logger import get_logger

logger = get_logger(__name__)


def compile_filter_regex(pattern: str | None) -> re.Pattern | None:
    """Compile a filter regex, degrading to no constraint when it is malformed"""
    if pattern is None:
        return None
    try:
        return re.compile(pattern)
    except re.error as exc:
        logger.warning(f"Ignoring invalid filter regex {pattern!r}: {exc}")
        return None


class FilterMatcher:
    """
    Predicate built once per query from a StringFilter.

    The regex is compiled up front so a query over many entries pays for it
    once.
    """

    def __init__(self, string_filter: StringFilter | None):
        self.filter = string_filter
        self._regex = compile_filter_regex(string_filter.regex_pattern) if string_filter else None

    def __call__(self, entry: StringEntry) -> bool:
        f = self.filter
        if f is None:
            return True

        if f.min_occurrences is not None and entry.total_occurrences < f.min_occurrences:
            return False
        if f.max_occurrences is not None and entry.total_occurrences > f.max_occurrences:
            return False

        length = len(entry.value)
        if f.min_length is not None and length < f.min_length:
            return False
        if f.max_length is not None and length > f.max_length:
            return False

        if f.categories is not None and not any(c in entry.categories for c in f.categories):
            return False

        if f.file_paths is not None and not any(p in entry.unique_files for p in f.file_paths):
            return False

        # Paths are accepted as hash keys too
        if f.file_hashes is not None and not any(
            h in entry.unique_hashes or h in entry.unique_files for h in f.file_hashes
        ):
            return False

        if f.suspicious_only and not entry.is_suspicious:
            return False

        if self._regex is not None and not self._regex.search(entry.value):
            return False

        if f.min_entropy is not None and entry.entropy < f.min_entropy:
            return False
        if f.max_entropy is not None and entry.entropy > f.max_entropy:
            return False

        if f.date_range is not None:
            start, end = f.date_range
            if entry.last_seen < start or entry.first_seen > end:
                return False

        return True
