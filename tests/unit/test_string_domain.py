#!/usr/bin/env python3
"""Tests for string_domain helpers."""

import pytest

from stringtrace.modules.string_domain import (
    calculate_entropy,
    count_non_printable,
    has_non_printable,
    is_non_printable,
)


def test_entropy_of_empty_string_is_zero():
    assert calculate_entropy("") == 0.0


def test_entropy_of_uniform_string_is_zero():
    assert calculate_entropy("aaaaaaa") == 0.0


@pytest.mark.parametrize(
    ("value", "expected"),
    [("ab", 1.0), ("abcd", 2.0), ("aabb", 1.0), ("abcdefgh", 3.0)],
)
def test_entropy_known_values(value, expected):
    assert calculate_entropy(value) == pytest.approx(expected)


def test_entropy_orders_low_and_high_variety():
    low = calculate_entropy("aaaaaaa")
    high = calculate_entropy("random$#@!string123")
    assert low < high
    assert low >= 0.0


def test_entropy_is_never_negative():
    for value in ["x", "xy", "hello world", "\x00\x01", "ääää", "𝔘𝔫𝔦𝔠𝔬𝔡𝔢"]:
        assert calculate_entropy(value) >= 0.0


def test_non_printable_detection():
    assert has_non_printable("test\x07string") is True
    assert has_non_printable("\x7f") is True
    assert has_non_printable("\x85") is True
    assert has_non_printable("plain text") is False


def test_common_whitespace_controls_are_allowed():
    assert has_non_printable("line\nbreak\ttab\r") is False
    assert is_non_printable("\t") is False


def test_count_non_printable():
    assert count_non_printable("a\x00b\x01") == 2
    assert count_non_printable("") == 0
