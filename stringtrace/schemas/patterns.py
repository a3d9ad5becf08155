#!/usr/bin/env python3
"""
Pattern and Analysis Result Schemas

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

import re

from pydantic import ConfigDict, Field, field_validator

from ..errors import InvalidPattern
from .base import StringTraceModel


class PatternDef(StringTraceModel):
    """
    Uncompiled, user-editable detection rule.

    Attributes:
        name: Unique key within a catalog
        regex: Regular expression source text
        category: Category label attached to matches
        description: Human-readable description
        is_suspicious: Whether a match is an indicator of compromise
        severity: Ordinal rank from 1 (informational) to 5 (critical)
    """

    name: str = Field(..., min_length=1, description="Unique pattern name")

    regex: str = Field(..., description="Regular expression source")

    category: str = Field(..., min_length=1, description="Category label")

    description: str = Field("", description="Human-readable description")

    is_suspicious: bool = Field(False, description="Whether a match is suspicious")

    severity: int = Field(1, ge=1, le=5, description="Severity rank (1-5)")

    @field_validator("name", "category")
    @classmethod
    def validate_label(cls, v: str) -> str:
        """Strip surrounding whitespace from labels"""
        if not v.strip():
            raise ValueError("labels cannot be blank")
        return v.strip()

    def compile(self) -> "Pattern":
        """
        Compile this definition.

        Raises:
            InvalidPattern: If the regex source is malformed
        """
        try:
            compiled = re.compile(self.regex)
        except re.error as exc:
            raise InvalidPattern(self.name, self.regex, str(exc)) from exc
        return Pattern(
            name=self.name,
            regex=compiled,
            category=self.category,
            description=self.description,
            is_suspicious=self.is_suspicious,
            severity=self.severity,
        )


class Pattern(StringTraceModel):
    """
    Compiled, immutable form of a PatternDef.

    The regex serialises as its source text, so flags must be written inline
    (for example ``(?i)``) to survive a round-trip.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1)

    regex: re.Pattern = Field(..., description="Compiled regular expression")

    category: str = Field(..., min_length=1)

    description: str = ""

    is_suspicious: bool = False

    severity: int = Field(1, ge=1, le=5)

    def matches(self, value: str) -> bool:
        return self.regex.search(value) is not None

    def to_def(self) -> PatternDef:
        """Return an editable copy of this pattern's definition"""
        return PatternDef(
            name=self.name,
            regex=self.regex.pattern,
            category=self.category,
            description=self.description,
            is_suspicious=self.is_suspicious,
            severity=self.severity,
        )


class Category(StringTraceModel):
    """
    Classification label with confidence.

    Frozen so categories can be collected into sets.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1)

    confidence: float = Field(1.0, ge=0.0, le=1.0)

    description: str | None = None


class SuspiciousIndicator(StringTraceModel):
    """A single suspicious hit against a string"""

    pattern_name: str = Field(..., min_length=1)

    category: str = Field(..., min_length=1)

    severity: int = Field(1, ge=1, le=5)

    description: str | None = None


class StringAnalysisResult(StringTraceModel):
    """
    Outcome of analysing one string value.

    Attributes:
        entropy: Shannon entropy in bits per symbol
        is_suspicious: Whether any indicator fired
        suspicious_indicators: Indicators that fired
        categories: Category names contributed by matched patterns
    """

    entropy: float = Field(0.0, ge=0.0)

    is_suspicious: bool = False

    suspicious_indicators: list[SuspiciousIndicator] = Field(default_factory=list)

    categories: set[str] = Field(default_factory=set)

    @property
    def max_severity(self) -> int:
        return max((i.severity for i in self.suspicious_indicators), default=0)
