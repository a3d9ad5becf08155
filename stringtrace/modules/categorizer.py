#!/usr/bin/env python3
"""
Heuristic String Categorizer

Recognises common string shapes without a pattern catalog. A value can fit
several categories at once; "generic" is returned only when nothing else fits.
"""

from __future__ import annotations

from collections.abc import Callable

from ..schemas.patterns import Category
from .string_classification import (
    is_api_shape,
    is_api_string,
    is_command_string,
    is_email_string,
    is_ip_string,
    is_library_string,
    is_path_string,
    is_registry_string,
    is_url_string,
)

GENERIC = "generic"


def _api_confidence(value: str) -> float | None:
    if is_api_string(value):
        return 0.9
    if is_api_shape(value):
        return 0.6
    return None


def _flag(check: Callable[[str], bool], confidence: float) -> Callable[[str], float | None]:
    return lambda value: confidence if check(value) else None


# Evaluated in this order; every matching rule contributes a category
CATEGORY_RULES: list[tuple[str, Callable[[str], float | None], str]] = [
    ("url", _flag(is_url_string, 0.95), "Contains a scheme delimiter"),
    ("ip_address", _flag(is_ip_string, 0.9), "IPv4 or IPv6 address"),
    ("email", _flag(is_email_string, 0.9), "Email address"),
    ("path", _flag(is_path_string, 0.8), "Filesystem path"),
    ("registry", _flag(is_registry_string, 0.9), "Windows registry key"),
    ("library", _flag(is_library_string, 0.85), "Library or module name"),
    ("api_call", _api_confidence, "OS API function name"),
    ("command", _flag(is_command_string, 0.8), "Shell or interpreter invocation"),
]


class DefaultCategorizer:
    """Stateless shape-based classifier"""

    def categorize(self, value: str) -> set[Category]:
        categories: set[Category] = set()
        for name, rule, description in CATEGORY_RULES:
            confidence = rule(value)
            if confidence is not None:
                categories.add(Category(name=name, confidence=confidence, description=description))
        if not categories:
            categories.add(Category(name=GENERIC, confidence=0.1, description="No specific shape"))
        return categories

    def category_names(self, value: str) -> set[str]:
        return {category.name for category in self.categorize(value)}
