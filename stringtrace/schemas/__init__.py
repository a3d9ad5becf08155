#!/usr/bin/env python3
"""
stringtrace Pydantic Schemas

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .base import StringTraceModel
from .context import (
    CommandContext,
    ExportContext,
    FileStringContext,
    ImportContext,
    MetadataContext,
    OtherContext,
    PathContext,
    RegistryContext,
    ResourceContext,
    SectionContext,
    StringContext,
    UrlContext,
    context_category,
    parse_context,
)
from .converters import dict_to_model, model_to_dict, models_to_dicts
from .patterns import Category, Pattern, PatternDef, StringAnalysisResult, SuspiciousIndicator
from .tracking import (
    LENGTH_BUCKETS,
    StringEntry,
    StringFilter,
    StringOccurrence,
    StringStatistics,
    utc_now,
)

__all__ = [
    "StringTraceModel",
    # Patterns and analysis
    "PatternDef",
    "Pattern",
    "Category",
    "SuspiciousIndicator",
    "StringAnalysisResult",
    # Contexts
    "StringContext",
    "FileStringContext",
    "ImportContext",
    "ExportContext",
    "ResourceContext",
    "SectionContext",
    "MetadataContext",
    "PathContext",
    "UrlContext",
    "RegistryContext",
    "CommandContext",
    "OtherContext",
    "context_category",
    "parse_context",
    # Tracking
    "LENGTH_BUCKETS",
    "StringOccurrence",
    "StringEntry",
    "StringFilter",
    "StringStatistics",
    "utc_now",
    # Converters
    "dict_to_model",
    "model_to_dict",
    "models_to_dicts",
]
