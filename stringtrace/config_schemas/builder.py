#!/usr/bin/env python3
"""Fluent configuration builder."""

from typing import Any

from .schemas import AnalysisConfig, StringTraceConfig, TrackerConfig


class ConfigBuilder:
    """Fluent API builder for StringTraceConfig."""

    def __init__(self) -> None:
        self._analysis_kwargs: dict[str, Any] = {}
        self._tracker_kwargs: dict[str, Any] = {}

    # Analysis Configuration Methods
    def with_entropy_threshold(self, threshold: float) -> "ConfigBuilder":
        self._analysis_kwargs["min_suspicious_entropy"] = threshold
        return self

    def with_max_occurrences(self, max_occurrences: int) -> "ConfigBuilder":
        self._analysis_kwargs["max_occurrences_per_string"] = max_occurrences
        return self

    def with_time_analysis(self, enabled: bool = True) -> "ConfigBuilder":
        self._analysis_kwargs["enable_time_analysis"] = enabled
        return self

    def with_metadata_fields(self, *fields: str) -> "ConfigBuilder":
        self._analysis_kwargs["custom_metadata_fields"] = tuple(fields)
        return self

    # Tracker Configuration Methods
    def with_occurrence_cap_override(self, cap: int) -> "ConfigBuilder":
        self._tracker_kwargs["max_occurrences_per_string"] = cap
        return self

    def with_related_threshold(self, threshold: float) -> "ConfigBuilder":
        self._tracker_kwargs["related_threshold"] = threshold
        return self

    def with_statistics_limits(
        self, most_common: int = 100, suspicious: int = 50, high_entropy: int = 50
    ) -> "ConfigBuilder":
        self._tracker_kwargs["most_common_limit"] = most_common
        self._tracker_kwargs["suspicious_limit"] = suspicious
        self._tracker_kwargs["high_entropy_limit"] = high_entropy
        return self

    def build(self) -> StringTraceConfig:
        return StringTraceConfig(
            analysis=AnalysisConfig(**self._analysis_kwargs),
            tracker=TrackerConfig(**self._tracker_kwargs),
        )


def create_default_config() -> StringTraceConfig:
    return ConfigBuilder().build()


def create_strict_config() -> StringTraceConfig:
    """Lower entropy threshold and tighter occurrence cap for hot corpora"""
    return ConfigBuilder().with_entropy_threshold(4.0).with_max_occurrences(100).build()
