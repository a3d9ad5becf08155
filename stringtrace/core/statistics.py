#!/usr/bin/env python3
"""
Statistics aggregation over tracked strings

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from ..config_schemas.schemas import TrackerConfig
from ..schemas.tracking import LENGTH_BUCKETS, StringEntry, StringStatistics


def length_bucket(length: int) -> str:
    if length <= 10:
        return "0-10"
    if length <= 20:
        return "11-20"
    if length <= 50:
        return "21-50"
    if length <= 100:
        return "51-100"
    if length <= 200:
        return "101-200"
    return "200+"


def build_statistics(
    entries: Sequence[StringEntry],
    limits: TrackerConfig,
    include_time_range: bool = True,
) -> StringStatistics:
    """Compute the statistics read-model over an already filtered subset"""
    by_count = sorted(entries, key=lambda e: (-e.total_occurrences, e.value))

    files: set[str] = set()
    category_counts: Counter = Counter()
    length_counts: Counter = Counter({bucket: 0 for bucket in LENGTH_BUCKETS})
    for entry in entries:
        files.update(entry.unique_files)
        category_counts.update(entry.categories)
        length_counts[length_bucket(len(entry.value))] += 1

    high_entropy = sorted(
        ((e.value, e.entropy) for e in entries if e.entropy > limits.high_entropy_floor),
        key=lambda pair: (-pair[1], pair[0]),
    )

    time_range = None
    if include_time_range and entries:
        time_range = (
            min(e.first_seen for e in entries),
            max(e.last_seen for e in entries),
        )

    return StringStatistics(
        total_unique_strings=len(entries),
        total_occurrences=sum(e.total_occurrences for e in entries),
        total_files_analyzed=len(files),
        most_common=[(e.value, e.total_occurrences) for e in by_count[: limits.most_common_limit]],
        suspicious_strings=[e.value for e in by_count if e.is_suspicious][: limits.suspicious_limit],
        high_entropy_strings=high_entropy[: limits.high_entropy_limit],
        category_distribution=dict(category_counts),
        length_distribution=dict(length_counts),
        time_range=time_range,
    )
