#!/usr/bin/env python3
"""Domain helpers for string analysis."""

from __future__ import annotations

import math
import unicodedata
from collections import Counter

# Control characters that routinely appear in legitimate text
ALLOWED_CONTROL_CHARS = frozenset("\t\n\r")


def calculate_entropy(value: str) -> float:
    """Shannon entropy of the character distribution, in bits per symbol"""
    if not value:
        return 0.0
    length = len(value)
    entropy = 0.0
    for count in Counter(value).values():
        probability = count / length
        entropy -= probability * math.log2(probability)
    return entropy


def is_non_printable(char: str) -> bool:
    return char not in ALLOWED_CONTROL_CHARS and unicodedata.category(char) == "Cc"


def has_non_printable(value: str) -> bool:
    return any(is_non_printable(c) for c in value)


def count_non_printable(value: str) -> int:
    return sum(1 for c in value if is_non_printable(c))
