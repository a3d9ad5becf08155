#!/usr/bin/env python3
"""
stringtrace Configuration Schemas - Typed Dataclasses
Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

from dataclasses import asdict, dataclass, field, replace
from typing import Any

# Shannon entropy over Unicode code points has no fixed ceiling, but anything
# above 16 bits/symbol cannot be produced by realistic strings.
MAX_ENTROPY_THRESHOLD = 16.0


@dataclass(frozen=True)
class AnalysisConfig:
    """String analysis tunables, consumed by the analyzer as one snapshot"""

    min_suspicious_entropy: float = 4.5
    max_occurrences_per_string: int = 1000
    enable_time_analysis: bool = True
    custom_metadata_fields: tuple[str, ...] = ()

    def __post_init__(self):
        """Validate configuration values"""
        if not (0.0 <= self.min_suspicious_entropy <= MAX_ENTROPY_THRESHOLD):
            raise ValueError(
                f"min_suspicious_entropy must be between 0.0 and {MAX_ENTROPY_THRESHOLD}"
            )
        if self.max_occurrences_per_string < 1:
            raise ValueError("max_occurrences_per_string must be at least 1")
        fields = tuple(self.custom_metadata_fields)
        if any(not isinstance(name, str) or not name.strip() for name in fields):
            raise ValueError("custom_metadata_fields must be non-empty strings")
        object.__setattr__(self, "custom_metadata_fields", fields)

    def replace(self, **changes: Any) -> "AnalysisConfig":
        """Return a new snapshot with the given fields changed"""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        result = asdict(self)
        result["custom_metadata_fields"] = list(self.custom_metadata_fields)
        return result

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "AnalysisConfig":
        if not isinstance(config_dict, dict):
            raise TypeError("config_dict must be a dictionary")
        return cls(**config_dict)


@dataclass(frozen=True)
class TrackerConfig:
    """Tracker query limits and occurrence cap override"""

    max_occurrences_per_string: int | None = None
    related_threshold: float = 0.3
    most_common_limit: int = 100
    suspicious_limit: int = 50
    high_entropy_limit: int = 50
    high_entropy_floor: float = 4.0

    def __post_init__(self):
        """Validate configuration values"""
        if self.max_occurrences_per_string is not None and self.max_occurrences_per_string < 1:
            raise ValueError("max_occurrences_per_string must be at least 1")
        if not (0.0 <= self.related_threshold <= 1.0):
            raise ValueError("related_threshold must be between 0.0 and 1.0")
        for name in ("most_common_limit", "suspicious_limit", "high_entropy_limit"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        if self.high_entropy_floor < 0.0:
            raise ValueError("high_entropy_floor must be non-negative")


@dataclass(frozen=True)
class StringTraceConfig:
    """Main stringtrace configuration container"""

    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    tracker: TrackerConfig = field(default_factory=TrackerConfig)

    @property
    def occurrence_cap(self) -> int:
        """Effective per-string occurrence cap"""
        if self.tracker.max_occurrences_per_string is not None:
            return self.tracker.max_occurrences_per_string
        return self.analysis.max_occurrences_per_string

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary"""
        return {"analysis": self.analysis.to_dict(), "tracker": asdict(self.tracker)}

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "StringTraceConfig":
        """Create configuration from dictionary"""
        if not isinstance(config_dict, dict):
            raise TypeError("config_dict must be a dictionary")

        kwargs: dict[str, Any] = {}

        if "analysis" in config_dict:
            kwargs["analysis"] = AnalysisConfig.from_dict(config_dict["analysis"])

        if "tracker" in config_dict:
            kwargs["tracker"] = TrackerConfig(**config_dict["tracker"])

        return cls(**kwargs)

    def merge(self, other: "StringTraceConfig") -> "StringTraceConfig":
        """Merge with another configuration, with other taking precedence"""
        return StringTraceConfig.from_dict({**self.to_dict(), **other.to_dict()})
