#!/usr/bin/env python3
"""
Tracking Schemas

Occurrences, aggregated entries, query filters and the statistics read-model.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from datetime import datetime, timezone

from pydantic import ConfigDict, Field, field_validator, model_validator

from .base import StringTraceModel
from .context import StringContext

LENGTH_BUCKETS = ("0-10", "11-20", "21-50", "51-100", "101-200", "200+")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StringOccurrence(StringTraceModel):
    """
    One sighting of a string.

    Attributes:
        file_path: Path of the file the string was found in
        file_hash: Content hash of that file
        tool_name: Tool that reported the string
        timestamp: When the string was reported
        context: Where in the file it was found
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    file_path: str

    file_hash: str

    tool_name: str

    timestamp: datetime = Field(default_factory=utc_now)

    context: StringContext


class StringEntry(StringTraceModel):
    """
    Aggregate for one unique string value.

    ``total_occurrences``, ``unique_files`` and ``unique_hashes`` are
    authoritative; ``occurrences`` only keeps the most recent sightings.
    ``categories``, ``is_suspicious`` and ``entropy`` are fixed at first
    sighting.
    """

    value: str

    first_seen: datetime

    last_seen: datetime

    total_occurrences: int = Field(0, ge=0)

    unique_files: set[str] = Field(default_factory=set)

    unique_hashes: set[str] = Field(default_factory=set)

    occurrences: list[StringOccurrence] = Field(default_factory=list)

    categories: set[str] = Field(default_factory=set)

    is_suspicious: bool = False

    entropy: float = Field(0.0, ge=0.0)

    @property
    def length(self) -> int:
        return len(self.value)


class StringFilter(StringTraceModel):
    """
    Query predicate over tracked entries.

    Every populated field is ANDed; an empty filter matches everything. An
    invalid ``regex_pattern`` is ignored rather than failing the query.
    """

    min_occurrences: int | None = Field(None, ge=0)

    max_occurrences: int | None = Field(None, ge=0)

    min_length: int | None = Field(None, ge=0)

    max_length: int | None = Field(None, ge=0)

    categories: list[str] | None = None

    file_paths: list[str] | None = None

    file_hashes: list[str] | None = None

    suspicious_only: bool | None = None

    regex_pattern: str | None = None

    min_entropy: float | None = None

    max_entropy: float | None = None

    date_range: tuple[datetime, datetime] | None = None

    @field_validator("date_range")
    @classmethod
    def normalize_date_range(
        cls, v: tuple[datetime, datetime] | None
    ) -> tuple[datetime, datetime] | None:
        """Treat naive datetimes as UTC"""
        if v is None:
            return v
        start, end = (d if d.tzinfo else d.replace(tzinfo=timezone.utc) for d in v)
        return start, end

    @model_validator(mode="after")
    def validate_date_range(self) -> "StringFilter":
        """Reject ranges that end before they start"""
        if self.date_range is not None and self.date_range[0] > self.date_range[1]:
            raise ValueError("date_range start must not be after its end")
        return self

    def is_empty(self) -> bool:
        return all(value is None for value in self.__dict__.values())


class StringStatistics(StringTraceModel):
    """
    Read-model computed over a filtered snapshot of the tracker.

    Attributes:
        total_unique_strings: Entries in the filtered subset
        total_occurrences: Sum of their occurrence counters
        total_files_analyzed: Distinct files across the subset
        most_common: (value, count) pairs, highest count first
        suspicious_strings: Values flagged suspicious
        high_entropy_strings: (value, entropy) pairs, highest entropy first
        category_distribution: Category name to entry count
        length_distribution: Length bucket to entry count
        time_range: Earliest first_seen and latest last_seen, when time
            analysis is enabled
    """

    total_unique_strings: int = Field(0, ge=0)

    total_occurrences: int = Field(0, ge=0)

    total_files_analyzed: int = Field(0, ge=0)

    most_common: list[tuple[str, int]] = Field(default_factory=list)

    suspicious_strings: list[str] = Field(default_factory=list)

    high_entropy_strings: list[tuple[str, float]] = Field(default_factory=list)

    category_distribution: dict[str, int] = Field(default_factory=dict)

    length_distribution: dict[str, int] = Field(
        default_factory=lambda: {bucket: 0 for bucket in LENGTH_BUCKETS}
    )

    time_range: tuple[datetime, datetime] | None = None

    @field_validator("length_distribution")
    @classmethod
    def validate_length_buckets(cls, v: dict[str, int]) -> dict[str, int]:
        """Only the fixed bucket labels are allowed"""
        unknown = set(v) - set(LENGTH_BUCKETS)
        if unknown:
            raise ValueError(f"unknown length buckets: {sorted(unknown)}")
        return v
