#!/usr/bin/env python3
"""Similarity scoring helpers."""

from __future__ import annotations

from ..schemas.tracking import StringEntry

ENTROPY_WINDOW = 0.5


def overlap_ratio(left: set, right: set) -> float | None:
    """Shared members over the smaller set, or None when nothing is shared"""
    shared = left & right
    if not shared:
        return None
    return len(shared) / min(len(left), len(right))


def entropy_closeness(a_val: float, b_val: float) -> float | None:
    diff = abs(a_val - b_val)
    if diff >= ENTROPY_WINDOW:
        return None
    return 1.0 - diff / ENTROPY_WINDOW


def length_ratio(a_len: int, b_len: int) -> float:
    longest = max(a_len, b_len)
    if longest == 0:
        return 1.0
    return min(a_len, b_len) / longest


def entry_similarity(a: StringEntry, b: StringEntry) -> float:
    """
    Average of the factors that apply to a pair of entries.

    Shared files, shared categories and close entropy only count when present;
    the length ratio always counts, so the average is always defined.
    """
    factors = [
        overlap_ratio(a.unique_files, b.unique_files),
        overlap_ratio(a.categories, b.categories),
        entropy_closeness(a.entropy, b.entropy),
        length_ratio(len(a.value), len(b.value)),
    ]
    applicable = [factor for factor in factors if factor is not None]
    return sum(applicable) / len(applicable)
