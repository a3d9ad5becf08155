#!/usr/bin/env python3
"""
String Analysis Protocol Interfaces

Protocols for the three collaborators of the tracker: the pattern catalog,
the per-string analyzer and the heuristic categorizer. Using Protocol instead
of ABC lets hosts inject test doubles or alternative engines without
inheriting from the defaults.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Protocol, runtime_checkable

from ..schemas.patterns import Category, Pattern, PatternDef, StringAnalysisResult


@runtime_checkable
class PatternProviderInterface(Protocol):
    """
    Protocol for a mutable catalog of detection rules.

    get_patterns() returns a snapshot; later catalog changes never show up in
    a list that was already handed out. Mutations validate the regex before
    touching the catalog.

    Example:
        >>> provider = DefaultPatternProvider.empty()
        >>> provider.add_pattern(PatternDef(name="foo", regex="foo", category="test"))
        >>> assert isinstance(provider, PatternProviderInterface)
    """

    def get_patterns(self) -> list[Pattern]:
        """Return a snapshot of the compiled catalog."""
        ...

    def add_pattern(self, pattern_def: PatternDef) -> None:
        """
        Add a pattern, replacing any pattern with the same name.

        Raises:
            InvalidPattern: If the regex does not compile
        """
        ...

    def update_pattern(self, pattern_def: PatternDef) -> None:
        """
        Replace the pattern with the same name.

        Raises:
            PatternNotFound: If no pattern has that name
            InvalidPattern: If the regex does not compile
        """
        ...

    def remove_pattern(self, name: str) -> None:
        """
        Remove a pattern by name.

        Raises:
            PatternNotFound: If no pattern has that name
        """
        ...


@runtime_checkable
class StringAnalyzerInterface(Protocol):
    """
    Protocol for single-string analysis.

    analyze() must see one consistent pattern set for its whole scan even
    while another thread adds patterns.
    """

    def analyze(self, value: str) -> StringAnalysisResult:
        """Compute entropy, indicators and pattern categories for one value."""
        ...

    def is_suspicious(self, value: str) -> bool:
        """Convenience wrapper returning analyze(value).is_suspicious."""
        ...

    def get_patterns(self) -> list[Pattern]:
        """Return the patterns currently in use."""
        ...


@runtime_checkable
class CategorizerInterface(Protocol):
    """
    Protocol for heuristic categorization.

    Implementations are pure: the same value always yields the same set, and
    the set is never empty.
    """

    def categorize(self, value: str) -> set[Category]:
        """Return every category the value fits."""
        ...
