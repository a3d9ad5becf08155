#!/usr/bin/env python3
"""Tests for StringTracker ingestion and queries."""

import pytest

from stringtrace.config_schemas import ConfigBuilder
from stringtrace.core import StringTracker
from stringtrace.core.tracker import derive_context
from stringtrace.errors import TrackingError
from stringtrace.modules import DefaultCategorizer
from stringtrace.schemas import (
    CommandContext,
    FileStringContext,
    ImportContext,
    OtherContext,
    PathContext,
    RegistryContext,
    UrlContext,
)


def test_track_aggregates_repeated_value(tracker, file_context):
    tracker.track_string("test_string", "/path/to/file", "hash1", "tool1", file_context)
    tracker.track_string("test_string", "/path/to/file", "hash1", "tool1", file_context)

    entry = tracker.get_string_details("test_string")
    assert entry is not None
    assert entry.total_occurrences == 2
    assert entry.unique_files == {"/path/to/file"}
    assert entry.unique_hashes == {"hash1"}
    assert len(entry.occurrences) == 2
    assert len(tracker) == 1


def test_first_and_last_seen(tracker, file_context):
    tracker.track_string("value", "/a", "h1", "tool", file_context)
    tracker.track_string("value", "/b", "h2", "tool", file_context)
    entry = tracker.get_string_details("value")
    assert entry.first_seen == entry.occurrences[0].timestamp
    assert entry.last_seen == entry.occurrences[-1].timestamp
    assert entry.first_seen <= entry.last_seen
    assert entry.unique_files == {"/a", "/b"}


def test_occurrence_cap_evicts_oldest(small_cap_tracker, file_context):
    for i in range(5):
        small_cap_tracker.track_string("capped", f"/f{i}", f"h{i}", "tool", file_context)

    entry = small_cap_tracker.get_string_details("capped")
    assert entry.total_occurrences == 5
    assert len(entry.unique_files) == 5
    assert [o.file_path for o in entry.occurrences] == ["/f2", "/f3", "/f4"]


def test_with_max_occurrences(tracker, file_context):
    assert tracker.with_max_occurrences(1) is tracker
    tracker.track_string("x1", "/a", "h", "tool", file_context)
    tracker.track_string("x1", "/b", "h", "tool", file_context)
    entry = tracker.get_string_details("x1")
    assert entry.total_occurrences == 2
    assert [o.file_path for o in entry.occurrences] == ["/b"]

    with pytest.raises(ValueError):
        tracker.with_max_occurrences(0)


def test_tracker_config_cap_overrides_analysis_cap(file_context):
    config = ConfigBuilder().with_max_occurrences(10).with_occurrence_cap_override(2).build()
    tracker = StringTracker(config=config)
    for i in range(4):
        tracker.track_string("v", f"/f{i}", "h", "tool", file_context)
    assert len(tracker.get_string_details("v").occurrences) == 2


def test_first_sighting_flags_are_frozen(counting_analyzer, file_context):
    tracker = StringTracker.with_components(counting_analyzer, DefaultCategorizer())
    for i in range(3):
        tracker.track_string("frozen", f"/f{i}", "h", "tool", file_context)

    entry = tracker.get_string_details("frozen")
    assert counting_analyzer.calls == ["frozen"]
    assert entry.is_suspicious is True
    assert entry.entropy == pytest.approx(1.5)
    assert "first_pass" in entry.categories
    assert "later_pass" not in entry.categories


def test_categories_merge_context_categorizer_and_analysis(tracker):
    tracker.track_string(
        "cmd.exe /c whoami", "/s.exe", "h", "strings", OtherContext(category="overlay")
    )
    entry = tracker.get_string_details("cmd.exe /c whoami")
    assert {"overlay", "command"} <= entry.categories
    assert entry.is_suspicious


def test_context_kind_becomes_category(tracker):
    tracker.track_string("kernel32.dll", "/s.exe", "h", "pe", ImportContext(library="kernel32.dll"))
    entry = tracker.get_string_details("kernel32.dll")
    assert {"import", "library"} <= entry.categories


def test_dict_context_is_accepted(tracker):
    tracker.track_string("hello", "/a", "h", "tool", {"kind": "section", "section_name": ".rdata"})
    occurrence = tracker.get_string_details("hello").occurrences[0]
    assert occurrence.context.kind == "section"
    assert "section" in tracker.get_string_details("hello").categories


def test_invalid_context_dict_is_rejected(tracker):
    with pytest.raises(TrackingError):
        tracker.track_string("hello", "/a", "h", "tool", {"kind": "nonsense"})
    assert len(tracker) == 0


@pytest.mark.parametrize(
    "args",
    [
        (None, "/a", "h", "t"),
        ("v", 1, "h", "t"),
        ("v", "/a", b"h", "t"),
        ("v", "/a", "h", None),
    ],
)
def test_non_string_arguments_are_rejected(tracker, file_context, args):
    with pytest.raises(TrackingError):
        tracker.track_string(*args, file_context)
    assert len(tracker) == 0


def test_track_strings_from_results_derives_contexts(tracker):
    tracker.track_strings_from_results(
        [
            "https://evil.example/payload",
            "/usr/bin/bash",
            "HKEY_LOCAL_MACHINE\\Software\\Microsoft",
            "kernel32.dll",
            "cmd.exe /c whoami",
            "just text",
        ],
        "/samples/a.bin",
        "abc123",
        "strings",
    )

    def context(value):
        return tracker.get_string_details(value).occurrences[0].context

    assert context("https://evil.example/payload") == UrlContext(protocol="https")
    assert context("/usr/bin/bash") == PathContext(path_type="absolute")
    assert context("HKEY_LOCAL_MACHINE\\Software\\Microsoft") == RegistryContext(
        hive="HKEY_LOCAL_MACHINE"
    )
    assert context("kernel32.dll") == ImportContext(library="kernel32.dll")
    assert context("cmd.exe /c whoami") == CommandContext(command_type="cmd")
    assert context("just text") == FileStringContext(offset=None)
    assert len(tracker) == 6


def test_track_strings_from_results_stops_at_bad_item(tracker):
    with pytest.raises(TrackingError):
        tracker.track_strings_from_results(["one", 2, "three"], "/a", "h", "tool")
    assert tracker.get_string_details("one") is not None
    assert tracker.get_string_details("three") is None


def test_derive_context_precedence(categorizer):
    value = "C:\\Windows\\System32\\kernel32.dll"
    assert derive_context(value, categorizer.categorize(value)) == PathContext(
        path_type="absolute"
    )


def test_details_are_copies(tracker, file_context):
    tracker.track_string("copy_me", "/a", "h", "tool", file_context)
    entry = tracker.get_string_details("copy_me")
    entry.total_occurrences = 99
    entry.unique_files.add("/injected")
    fresh = tracker.get_string_details("copy_me")
    assert fresh.total_occurrences == 1
    assert fresh.unique_files == {"/a"}


def test_untracked_details_is_none(tracker):
    assert tracker.get_string_details("never") is None


def test_search_strings(tracker, file_context):
    for value, count in [("alpha_one", 1), ("ALPHA_two", 3), ("beta", 2), ("alpha_three", 3)]:
        for _ in range(count):
            tracker.track_string(value, "/a", "h", "tool", file_context)

    results = tracker.search_strings("alpha", 10)
    assert [e.value for e in results] == ["ALPHA_two", "alpha_three", "alpha_one"]
    assert [e.value for e in tracker.search_strings("Alpha", 2)] == ["ALPHA_two", "alpha_three"]
    assert tracker.search_strings("", 10) == []
    assert tracker.search_strings("   ", 10) == []
    assert tracker.search_strings("gamma", 10) == []


def test_related_strings(tracker, file_context):
    tracker.track_string("alpha", "/a", "h", "tool", file_context)
    tracker.track_string("alphb", "/a", "h", "tool", file_context)
    tracker.track_string(
        "https://example.com/x", "/other", "h2", "tool", UrlContext(protocol="https")
    )

    related = tracker.get_related_strings("alpha", 10)
    values = [value for value, _ in related]
    assert values == ["alphb"]
    assert related[0][1] == pytest.approx(0.8, abs=0.01)
    assert all(score > 0.3 for _, score in related)
    assert "alpha" not in values


def test_related_strings_sorted_and_limited(tracker, file_context):
    for value in ["base", "bass", "basement", "b"]:
        tracker.track_string(value, "/a", "h", "tool", file_context)
    related = tracker.get_related_strings("base", 2)
    assert len(related) <= 2
    scores = [score for _, score in related]
    assert scores == sorted(scores, reverse=True)


def test_related_strings_for_unknown_value(tracker):
    assert tracker.get_related_strings("missing", 5) == []


def test_clear(tracker, file_context):
    tracker.track_string("a1", "/a", "h", "tool", file_context)
    tracker.track_string("a2", "/a", "h", "tool", file_context)
    tracker.clear()
    assert len(tracker) == 0
    assert tracker.tracked_count == 0
    assert tracker.get_string_details("a1") is None
    assert tracker.get_statistics().total_unique_strings == 0


def test_get_all_entries(tracker, file_context):
    tracker.track_string("a1", "/a", "h", "tool", file_context)
    tracker.track_string("a2", "/a", "h", "tool", file_context)
    entries = tracker.get_all_entries()
    assert sorted(e.value for e in entries) == ["a1", "a2"]
    entries[0].total_occurrences = 42
    assert all(e.total_occurrences == 1 for e in tracker.get_all_entries())


def test_empty_string_can_be_tracked(tracker, file_context):
    tracker.track_string("", "/a", "h", "tool", file_context)
    entry = tracker.get_string_details("")
    assert entry.entropy == 0.0
    assert entry.length == 0


def test_lowering_cap_trims_stored_entries(tracker, file_context):
    for i in range(5):
        tracker.track_string("x", f"/f{i}", f"h{i}", "tool", file_context)
    tracker.track_string("y", "/only", "h", "tool", file_context)

    tracker.with_max_occurrences(2)

    entry = tracker.get_string_details("x")
    assert [o.file_path for o in entry.occurrences] == ["/f3", "/f4"]
    assert entry.total_occurrences == 5
    assert len(entry.unique_files) == 5
    assert all(len(e.occurrences) <= 2 for e in tracker.get_all_entries())
    assert len(tracker.get_string_details("y").occurrences) == 1


def test_negative_limits_return_nothing(tracker, file_context):
    tracker.track_string("alpha", "/a", "h", "tool", file_context)
    tracker.track_string("alphb", "/a", "h", "tool", file_context)
    assert tracker.search_strings("alp", -1) == []
    assert tracker.get_related_strings("alpha", -1) == []
    assert tracker.search_strings("alp", 0) == []


def test_with_components_is_documented():
    assert StringTracker.with_components.__doc__
