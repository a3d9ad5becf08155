#!/usr/bin/env python3
"""
String Tracker

Aggregates string occurrences reported by scanners into one entry per unique
value and answers statistics, search and similarity queries over the corpus.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)

Thread Safety:
    The entry store is guarded by a single exclusive lock. Every read and
    write holds it for its full duration, so calls from worker threads
    serialise. The analyzer runs under the lock on first sighting, once per
    value, and occurrence timestamps are taken under it so they stay ordered.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any

from ..config_schemas.schemas import StringTraceConfig
from ..errors import TrackingError
from ..interfaces import CategorizerInterface, StringAnalyzerInterface
from ..modules.categorizer import DefaultCategorizer
from ..modules.pattern_provider import DefaultPatternProvider
from ..modules.similarity_scoring import entry_similarity
from ..modules.string_analyzer import DefaultStringAnalyzer
from ..modules.string_classification import classify_command_type, classify_path_kind
from ..schemas.context import (
    CommandContext,
    FileStringContext,
    ImportContext,
    PathContext,
    RegistryContext,
    StringContext,
    UrlContext,
    context_category,
    parse_context,
)
from ..schemas.patterns import Category
from ..schemas.tracking import (
    StringEntry,
    StringFilter,
    StringOccurrence,
    StringStatistics,
)
from ..utils.logger import get_logger
from .filters import FilterMatcher
from .statistics import build_statistics

logger = get_logger(__name__)


def derive_context(value: str, categories: set[Category]) -> StringContext:
    """
    Pick a context for a bare string from its categories.

    Precedence is url, path, registry, library, command, then a plain file
    string.
    """
    names = {category.name for category in categories}
    if "url" in names:
        return UrlContext(protocol=value.split("://", 1)[0] or None)
    if "path" in names:
        return PathContext(path_type=classify_path_kind(value) or "relative")
    if "registry" in names:
        return RegistryContext(hive=value.strip().split("\\", 1)[0] or None)
    if "library" in names:
        return ImportContext(library=value)
    if "command" in names:
        return CommandContext(command_type=classify_command_type(value))
    return FileStringContext(offset=None)


class StringTracker:
    """
    In-memory aggregation store for strings found across scanned artifacts.

    Example:
        >>> tracker = StringTracker()
        >>> tracker.track_string("cmd.exe /c whoami", "/samples/a.exe", "abc123", "strings",
        ...                      CommandContext(command_type="cmd"))
        >>> tracker.get_string_details("cmd.exe /c whoami").is_suspicious
        True
    """

    def __init__(
        self,
        analyzer: StringAnalyzerInterface | None = None,
        categorizer: CategorizerInterface | None = None,
        config: StringTraceConfig | None = None,
        max_occurrences: int | None = None,
    ):
        self.config = config or StringTraceConfig()
        if analyzer is None:
            analyzer = DefaultStringAnalyzer(
                config=self.config.analysis,
                patterns=DefaultPatternProvider().get_patterns(),
            )
        self.analyzer = analyzer
        self.categorizer = categorizer or DefaultCategorizer()
        self._entries: dict[str, StringEntry] = {}
        self._lock = threading.Lock()
        self.max_occurrences_per_string = self.config.occurrence_cap
        if max_occurrences is not None:
            self.with_max_occurrences(max_occurrences)

    @classmethod
    def with_components(
        cls,
        analyzer: StringAnalyzerInterface,
        categorizer: CategorizerInterface,
        config: StringTraceConfig | None = None,
    ) -> StringTracker:
        """Tracker wired to the given analyzer and categorizer"""
        return cls(analyzer=analyzer, categorizer=categorizer, config=config)

    def with_max_occurrences(self, max_occurrences: int) -> StringTracker:
        """
        Set the per-string occurrence cap; returns self for chaining.

        Entries already over the new cap lose their oldest occurrences.
        """
        if max_occurrences < 1:
            raise ValueError("max_occurrences must be at least 1")
        with self._lock:
            self.max_occurrences_per_string = max_occurrences
            for entry in self._entries.values():
                self._trim_occurrences(entry)
        return self

    def _trim_occurrences(self, entry: StringEntry) -> None:
        overflow = len(entry.occurrences) - self.max_occurrences_per_string
        if overflow > 0:
            del entry.occurrences[:overflow]

    # Ingestion

    def track_string(
        self,
        value: str,
        file_path: str,
        file_hash: str,
        tool_name: str,
        context: StringContext | dict[str, Any],
    ) -> None:
        """
        Record one occurrence of ``value``.

        The first sighting fixes the entry's categories, suspicion flag and
        entropy; later sightings only update counters and occurrences.

        Raises:
            TrackingError: If an argument is not a string or the context is
                not a valid StringContext
        """
        self._validate_arguments(value, file_path, file_hash, tool_name)
        try:
            if isinstance(context, dict):
                context = parse_context(context)
        except ValueError as exc:
            raise TrackingError(f"Invalid string context: {exc}") from exc

        with self._lock:
            try:
                occurrence = StringOccurrence(
                    file_path=file_path,
                    file_hash=file_hash,
                    tool_name=tool_name,
                    context=context,
                )
            except ValueError as exc:
                raise TrackingError(f"Invalid string context: {exc}") from exc

            entry = self._entries.get(value)
            if entry is None:
                entry = self._entries[value] = self._create_entry(value, occurrence)
                logger.debug(
                    f"New string tracked from {tool_name}: {value[:60]!r} "
                    f"(suspicious={entry.is_suspicious}, entropy={entry.entropy:.2f})"
                )
            entry.last_seen = occurrence.timestamp
            entry.total_occurrences += 1
            entry.unique_files.add(file_path)
            entry.unique_hashes.add(file_hash)
            entry.occurrences.append(occurrence)
            self._trim_occurrences(entry)

    def track_strings_from_results(
        self,
        strings: Iterable[str],
        file_path: str,
        file_hash: str,
        tool_name: str,
    ) -> None:
        """
        Track a batch of bare strings from one scan result.

        Each string gets a context derived from its categories. The first
        failing item raises; items before it stay tracked.
        """
        for value in strings:
            if not isinstance(value, str):
                raise TrackingError(f"Expected str in results, got {type(value).__name__}")
            context = derive_context(value, self.categorizer.categorize(value))
            self.track_string(value, file_path, file_hash, tool_name, context)

    def _create_entry(self, value: str, occurrence: StringOccurrence) -> StringEntry:
        analysis = self.analyzer.analyze(value)
        categories = {context_category(occurrence.context)}
        categories.update(category.name for category in self.categorizer.categorize(value))
        categories.update(analysis.categories)

        return StringEntry(
            value=value,
            first_seen=occurrence.timestamp,
            last_seen=occurrence.timestamp,
            categories=categories,
            is_suspicious=analysis.is_suspicious,
            entropy=analysis.entropy,
        )

    @staticmethod
    def _validate_arguments(value, file_path, file_hash, tool_name) -> None:
        for name, argument in (
            ("value", value),
            ("file_path", file_path),
            ("file_hash", file_hash),
            ("tool_name", tool_name),
        ):
            if not isinstance(argument, str):
                raise TrackingError(f"{name} must be a str, got {type(argument).__name__}")

    # Queries

    def matches_filter(self, entry: StringEntry, string_filter: StringFilter | None) -> bool:
        return FilterMatcher(string_filter)(entry)

    def get_statistics(self, string_filter: StringFilter | None = None) -> StringStatistics:
        matcher = FilterMatcher(string_filter)
        with self._lock:
            filtered = [entry for entry in self._entries.values() if matcher(entry)]
            return build_statistics(
                filtered,
                self.config.tracker,
                include_time_range=self.config.analysis.enable_time_analysis,
            )

    def get_string_details(self, value: str) -> StringEntry | None:
        with self._lock:
            entry = self._entries.get(value)
            return entry.model_copy(deep=True) if entry is not None else None

    def search_strings(self, query: str, limit: int) -> list[StringEntry]:
        """Case-insensitive substring search, most frequent first"""
        if not query.strip():
            return []
        needle = query.lower()
        with self._lock:
            matches = [e for e in self._entries.values() if needle in e.value.lower()]
            matches.sort(key=lambda e: (-e.total_occurrences, e.value))
            return [entry.model_copy(deep=True) for entry in matches[: max(limit, 0)]]

    def get_related_strings(self, value: str, limit: int) -> list[tuple[str, float]]:
        """Other tracked strings scoring above the related threshold, best first"""
        threshold = self.config.tracker.related_threshold
        with self._lock:
            target = self._entries.get(value)
            if target is None:
                return []
            scored = []
            for other_value, other in self._entries.items():
                if other_value == value:
                    continue
                score = entry_similarity(target, other)
                if score > threshold:
                    scored.append((other_value, score))
        scored.sort(key=lambda pair: (-pair[1], pair[0]))
        return scored[: max(limit, 0)]

    def get_all_entries(self) -> list[StringEntry]:
        """Deep-copied snapshot of every entry, for export by the host"""
        with self._lock:
            return [entry.model_copy(deep=True) for entry in self._entries.values()]

    @property
    def tracked_count(self) -> int:
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.tracked_count

    def clear(self) -> None:
        """Drop every tracked entry"""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.info(f"Cleared {count} tracked strings")
