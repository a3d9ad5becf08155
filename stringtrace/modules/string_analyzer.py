#!/usr/bin/env python3
"""
String Analysis Module

Scores a single string: Shannon entropy, pattern indicators from the catalog
and non-printable character detection.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from ..config_schemas.schemas import AnalysisConfig
from ..schemas.patterns import Pattern, PatternDef, StringAnalysisResult, SuspiciousIndicator
from ..utils.logger import get_logger
from .string_domain import calculate_entropy, count_non_printable

logger = get_logger(__name__)

HIGH_ENTROPY_INDICATOR = "high_entropy"
NON_PRINTABLE_INDICATOR = "non_printable_chars"


class DefaultStringAnalyzer:
    """Pattern, entropy and control-character analysis of single strings"""

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        patterns: Iterable[Pattern] | None = None,
    ):
        self.config = config or AnalysisConfig()
        self._lock = threading.Lock()
        # Swapped wholesale, never edited, so a scan holding a reference
        # always sees one consistent catalog.
        self._patterns: tuple[Pattern, ...] = tuple(patterns or ())

    @property
    def entropy_threshold(self) -> float:
        return self.config.min_suspicious_entropy

    def with_patterns(self, patterns: Iterable[Pattern]) -> DefaultStringAnalyzer:
        """New analyzer with the same config and the given patterns"""
        return DefaultStringAnalyzer(config=self.config, patterns=patterns)

    def with_config(self, config: AnalysisConfig) -> DefaultStringAnalyzer:
        return DefaultStringAnalyzer(config=config, patterns=self.get_patterns())

    def with_entropy_threshold(self, threshold: float) -> DefaultStringAnalyzer:
        return self.with_config(self.config.replace(min_suspicious_entropy=threshold))

    def add_pattern(self, pattern: Pattern | PatternDef) -> None:
        """
        Add a pattern, replacing one with the same name.

        Raises:
            InvalidPattern: If a PatternDef's regex does not compile
        """
        if isinstance(pattern, PatternDef):
            pattern = pattern.compile()
        with self._lock:
            kept = tuple(p for p in self._patterns if p.name != pattern.name)
            self._patterns = kept + (pattern,)
        logger.debug(f"Analyzer now using {len(self._patterns)} patterns")

    def get_patterns(self) -> list[Pattern]:
        with self._lock:
            return list(self._patterns)

    def calculate_entropy(self, value: str) -> float:
        return calculate_entropy(value)

    def analyze(self, value: str) -> StringAnalysisResult:
        with self._lock:
            patterns = self._patterns

        entropy = calculate_entropy(value)
        indicators: list[SuspiciousIndicator] = []
        categories: set[str] = set()

        for pattern in patterns:
            if not pattern.matches(value):
                continue
            categories.add(pattern.category)
            if pattern.is_suspicious:
                indicators.append(
                    SuspiciousIndicator(
                        pattern_name=pattern.name,
                        category=pattern.category,
                        severity=pattern.severity,
                        description=pattern.description or None,
                    )
                )

        non_printable = count_non_printable(value)
        if non_printable:
            indicators.append(
                SuspiciousIndicator(
                    pattern_name=NON_PRINTABLE_INDICATOR,
                    category="encoding",
                    severity=2,
                    description=f"{non_printable} non-printable characters",
                )
            )

        if entropy > self.entropy_threshold:
            indicators.append(
                SuspiciousIndicator(
                    pattern_name=HIGH_ENTROPY_INDICATOR,
                    category="entropy",
                    severity=3,
                    description=f"Entropy {entropy:.2f} above {self.entropy_threshold:.2f}",
                )
            )

        return StringAnalysisResult(
            entropy=entropy,
            is_suspicious=bool(indicators),
            suspicious_indicators=indicators,
            categories=categories,
        )

    def is_suspicious(self, value: str) -> bool:
        return self.analyze(value).is_suspicious
