#!/usr/bin/env python3
"""
Pattern catalog management
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from ..errors import PatternNotFound
from ..schemas.patterns import Pattern, PatternDef
from ..utils.logger import get_logger
from .pattern_defaults import DEFAULT_PATTERNS

logger = get_logger(__name__)


def default_pattern_defs() -> list[PatternDef]:
    """Built-in catalog as editable definitions"""
    return [
        PatternDef(
            name=name,
            regex=regex,
            category=category,
            description=description,
            is_suspicious=is_suspicious,
            severity=severity,
        )
        for name, (regex, category, description, is_suspicious, severity) in DEFAULT_PATTERNS.items()
    ]


class DefaultPatternProvider:
    """
    Mutable catalog of detection rules keyed by name.

    Every mutation compiles first and only then swaps the catalog, so a
    failing call leaves the catalog exactly as it was.
    """

    def __init__(self, pattern_defs: Iterable[PatternDef] | None = None):
        self._lock = threading.Lock()
        defs = default_pattern_defs() if pattern_defs is None else list(pattern_defs)
        self._patterns: dict[str, Pattern] = self._compile_all(defs)

    @classmethod
    def empty(cls) -> DefaultPatternProvider:
        """Provider with no patterns, for building a catalog from scratch"""
        return cls(pattern_defs=[])

    @classmethod
    def from_defs(cls, pattern_defs: Iterable[PatternDef]) -> DefaultPatternProvider:
        return cls(pattern_defs=pattern_defs)

    @staticmethod
    def _compile_all(pattern_defs: list[PatternDef]) -> dict[str, Pattern]:
        compiled: dict[str, Pattern] = {}
        for pattern_def in pattern_defs:
            compiled[pattern_def.name] = pattern_def.compile()
        return compiled

    def get_patterns(self) -> list[Pattern]:
        with self._lock:
            return list(self._patterns.values())

    def get_pattern(self, name: str) -> Pattern:
        with self._lock:
            if name not in self._patterns:
                raise PatternNotFound(name)
            return self._patterns[name]

    def get_pattern_defs(self) -> list[PatternDef]:
        return [pattern.to_def() for pattern in self.get_patterns()]

    def add_pattern(self, pattern_def: PatternDef) -> None:
        compiled = pattern_def.compile()
        with self._lock:
            replaced = compiled.name in self._patterns
            self._patterns[compiled.name] = compiled
        logger.debug(f"{'Replaced' if replaced else 'Added'} pattern '{compiled.name}'")

    def update_pattern(self, pattern_def: PatternDef) -> None:
        compiled = pattern_def.compile()
        with self._lock:
            if compiled.name not in self._patterns:
                raise PatternNotFound(compiled.name)
            self._patterns[compiled.name] = compiled
        logger.debug(f"Updated pattern '{compiled.name}'")

    def remove_pattern(self, name: str) -> None:
        with self._lock:
            if name not in self._patterns:
                raise PatternNotFound(name)
            del self._patterns[name]
        logger.debug(f"Removed pattern '{name}'")

    def __len__(self) -> int:
        with self._lock:
            return len(self._patterns)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._patterns
