#!/usr/bin/env python3
"""Tests for pydantic schemas and converters."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from stringtrace.schemas import (
    Category,
    CommandContext,
    FileStringContext,
    ImportContext,
    OtherContext,
    Pattern,
    PatternDef,
    StringAnalysisResult,
    StringEntry,
    StringFilter,
    StringOccurrence,
    StringStatistics,
    SuspiciousIndicator,
    UrlContext,
    context_category,
    dict_to_model,
    model_to_dict,
    models_to_dicts,
    parse_context,
)

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
T1 = datetime(2024, 5, 2, 8, 30, tzinfo=timezone.utc)


def _entry() -> StringEntry:
    occurrences = [
        StringOccurrence(
            file_path="/a.exe", file_hash="h1", tool_name="pe", timestamp=T0,
            context=ImportContext(library="kernel32.dll"),
        ),
        StringOccurrence(
            file_path="/b.exe", file_hash="h2", tool_name="strings", timestamp=T1,
            context=UrlContext(protocol=None),
        ),
        StringOccurrence(
            file_path="/b.exe", file_hash="h2", tool_name="strings", timestamp=T1,
            context=OtherContext(category="overlay"),
        ),
    ]
    return StringEntry(
        value="kernel32.dll",
        first_seen=T0,
        last_seen=T1,
        total_occurrences=3,
        unique_files={"/a.exe", "/b.exe"},
        unique_hashes={"h1", "h2"},
        occurrences=occurrences,
        categories={"import", "library"},
        is_suspicious=False,
        entropy=3.02,
    )


def test_entry_json_round_trip():
    entry = _entry()
    restored = StringEntry.model_validate_json(entry.to_json())
    assert restored == entry
    assert isinstance(restored.occurrences[0].context, ImportContext)
    assert isinstance(restored.occurrences[2].context, OtherContext)


def test_statistics_json_round_trip():
    stats = StringStatistics(
        total_unique_strings=2,
        total_occurrences=5,
        total_files_analyzed=2,
        most_common=[("a", 4), ("b", 1)],
        suspicious_strings=["b"],
        high_entropy_strings=[("b", 4.75)],
        category_distribution={"generic": 2},
        time_range=(T0, T1),
    )
    assert StringStatistics.model_validate_json(stats.model_dump_json()) == stats


def test_statistics_reject_unknown_length_bucket():
    with pytest.raises(ValidationError):
        StringStatistics(length_distribution={"0-5": 1})


def test_filter_json_round_trip():
    string_filter = StringFilter(
        categories=["url"], regex_pattern="^http", date_range=(T0, T1), suspicious_only=True
    )
    restored = StringFilter.model_validate_json(string_filter.to_json())
    assert restored == string_filter
    assert not restored.is_empty()


def test_pattern_round_trip():
    pattern = PatternDef(
        name="ps", regex=r"(?i)powershell", category="command", is_suspicious=True, severity=3
    ).compile()
    restored = Pattern.model_validate_json(pattern.model_dump_json())
    assert restored == pattern
    assert restored.matches("POWERSHELL -nop")
    assert pattern.to_def().compile() == pattern


def test_pattern_is_frozen():
    pattern = PatternDef(name="p", regex="x", category="c").compile()
    with pytest.raises(ValidationError):
        pattern.name = "other"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": " ", "regex": "x", "category": "c"},
        {"name": "p", "regex": "x", "category": ""},
        {"name": "p", "regex": "x", "category": "c", "severity": 0},
        {"name": "p", "regex": "x", "category": "c", "severity": 6},
    ],
)
def test_pattern_def_validation(kwargs):
    with pytest.raises(ValidationError):
        PatternDef(**kwargs)


def test_pattern_def_labels_are_stripped():
    assert PatternDef(name=" p ", regex="x", category=" c ").name == "p"


def test_category_is_hashable():
    assert len({Category(name="url", confidence=0.9), Category(name="url", confidence=0.9)}) == 1
    assert Category(name="url").to_json() == '{"name":"url","confidence":1.0}'
    with pytest.raises(ValidationError):
        Category(name="url", confidence=1.5)


def test_analysis_result_max_severity():
    result = StringAnalysisResult(
        entropy=2.0,
        is_suspicious=True,
        suspicious_indicators=[
            SuspiciousIndicator(pattern_name="a", category="c", severity=2),
            SuspiciousIndicator(pattern_name="b", category="c", severity=5),
        ],
    )
    assert result.max_severity == 5


def test_parse_context_picks_variant():
    assert parse_context({"kind": "command", "command_type": "cmd"}) == CommandContext(
        command_type="cmd"
    )
    assert parse_context({"kind": "file_string", "offset": 16}) == FileStringContext(offset=16)
    with pytest.raises(ValidationError):
        parse_context({"kind": "unknown"})
    with pytest.raises(ValidationError):
        parse_context({"kind": "import"})


def test_context_category():
    assert context_category(OtherContext(category="overlay")) == "overlay"
    assert context_category(UrlContext(protocol="http")) == "url"
    assert context_category(FileStringContext()) == "file_string"


def test_extra_fields_are_forbidden():
    with pytest.raises(ValidationError):
        UrlContext(protocol="http", port=80)


def test_model_to_dict_is_json_ready():
    data = model_to_dict(_entry())
    assert sorted(data["unique_files"]) == ["/a.exe", "/b.exe"]
    assert data["first_seen"].startswith("2024-05-01T12:00:00")
    assert "protocol" not in data["occurrences"][1]["context"]
    assert len(models_to_dicts([Category(name="a"), Category(name="b")])) == 2


def test_dict_to_model():
    category = dict_to_model({"name": "url", "confidence": 0.5}, Category)
    assert category == Category(name="url", confidence=0.5)

    with pytest.raises(ValidationError):
        dict_to_model({"name": "url", "confidence": 7}, Category, strict=True)

    loose = dict_to_model({"name": "url", "confidence": 7}, Category)
    assert loose.confidence == 7
