#!/usr/bin/env python3
"""
stringtrace - String analysis and tracking engine for malware triage
Collects, classifies, scores and correlates strings extracted from artifacts

Author: Marc Rivero (@seifreed)
License: GPL-3.0
"""

from .__version__ import __author__, __author_email__, __license__, __url__, __version__

__description__ = "String analysis and tracking engine for malware triage"

from .config_schemas import AnalysisConfig, ConfigBuilder, StringTraceConfig, TrackerConfig
from .core import StringTracker
from .errors import InvalidPattern, PatternNotFound, StringTraceError, TrackingError
from .interfaces import CategorizerInterface, PatternProviderInterface, StringAnalyzerInterface
from .modules import DefaultCategorizer, DefaultPatternProvider, DefaultStringAnalyzer
from .schemas import (
    Category,
    CommandContext,
    ExportContext,
    FileStringContext,
    ImportContext,
    MetadataContext,
    OtherContext,
    PathContext,
    Pattern,
    PatternDef,
    RegistryContext,
    ResourceContext,
    SectionContext,
    StringAnalysisResult,
    StringContext,
    StringEntry,
    StringFilter,
    StringOccurrence,
    StringStatistics,
    SuspiciousIndicator,
    UrlContext,
)

__all__ = [
    "StringTracker",
    "DefaultStringAnalyzer",
    "DefaultCategorizer",
    "DefaultPatternProvider",
    "PatternProviderInterface",
    "StringAnalyzerInterface",
    "CategorizerInterface",
    "AnalysisConfig",
    "TrackerConfig",
    "StringTraceConfig",
    "ConfigBuilder",
    "StringTraceError",
    "InvalidPattern",
    "PatternNotFound",
    "TrackingError",
    "PatternDef",
    "Pattern",
    "Category",
    "SuspiciousIndicator",
    "StringAnalysisResult",
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
    "StringOccurrence",
    "StringEntry",
    "StringFilter",
    "StringStatistics",
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__url__",
    "__description__",
]
