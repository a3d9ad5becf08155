"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import pytest

from stringtrace.config_schemas import AnalysisConfig, StringTraceConfig, TrackerConfig
from stringtrace.core import StringTracker
from stringtrace.modules import DefaultCategorizer, DefaultPatternProvider, DefaultStringAnalyzer
from stringtrace.schemas import FileStringContext, StringAnalysisResult


@pytest.fixture
def provider() -> DefaultPatternProvider:
    return DefaultPatternProvider()


@pytest.fixture
def analyzer(provider: DefaultPatternProvider) -> DefaultStringAnalyzer:
    return DefaultStringAnalyzer().with_patterns(provider.get_patterns())


@pytest.fixture
def categorizer() -> DefaultCategorizer:
    return DefaultCategorizer()


@pytest.fixture
def tracker() -> StringTracker:
    return StringTracker()


@pytest.fixture
def file_context() -> FileStringContext:
    return FileStringContext(offset=None)


@pytest.fixture
def small_cap_tracker() -> StringTracker:
    config = StringTraceConfig(
        analysis=AnalysisConfig(max_occurrences_per_string=3),
        tracker=TrackerConfig(),
    )
    return StringTracker(config=config)


class CountingAnalyzer:
    """Analyzer double that records calls and flips its verdict after the first"""

    def __init__(self):
        self.calls: list[str] = []

    def analyze(self, value: str) -> StringAnalysisResult:
        self.calls.append(value)
        first = len(self.calls) == 1
        return StringAnalysisResult(
            entropy=1.5 if first else 7.5,
            is_suspicious=first,
            categories={"first_pass"} if first else {"later_pass"},
        )

    def is_suspicious(self, value: str) -> bool:
        return self.analyze(value).is_suspicious

    def get_patterns(self) -> list:
        return []


@pytest.fixture
def counting_analyzer() -> CountingAnalyzer:
    return CountingAnalyzer()
