from datetime import date

import pytest

from periodic_notes.path_builder import build_segments, join_vault_path
from periodic_notes.time_utils import resolve_calendar_ids


def _paths(segments):
    return [(segment.folder_path, segment.note_path) for segment in segments]


def test_day_segments_share_month_folder():
    ids = resolve_calendar_ids(date(2024, 1, 1))
    segments = build_segments("Periodic Notes", "day", ids)
    assert _paths(segments) == [
        ("Periodic Notes/2024", "Periodic Notes/2024/2024.md"),
        ("Periodic Notes/2024/2024-01", "Periodic Notes/2024/2024-01/2024-01.md"),
        ("Periodic Notes/2024/2024-01", "Periodic Notes/2024/2024-01/2024-01-01.md"),
    ]


def test_year_segments_only_touch_year():
    ids = resolve_calendar_ids(date(2024, 6, 15))
    segments = build_segments("Periodic Notes", "year", ids)
    assert _paths(segments) == [("Periodic Notes/2024", "Periodic Notes/2024/2024.md")]


def test_month_segments():
    ids = resolve_calendar_ids(date(2024, 6, 15))
    segments = build_segments("/", "month", ids)
    assert _paths(segments) == [
        ("2024", "2024/2024.md"),
        ("2024/2024-06", "2024/2024-06/2024-06.md"),
    ]


def test_week_note_lives_under_week_start_month():
    # 2024-03-01 is a Friday; its week starts on 2024-02-26.
    ids = resolve_calendar_ids(date(2024, 3, 1))
    week = build_segments("Journal", "week", ids)
    month_of_week_start = build_segments("Journal", "month", resolve_calendar_ids(date(2024, 2, 26)))
    assert week[-1].folder_path == month_of_week_start[-1].folder_path == "Journal/2024/2024-02"
    assert week[-1].note_path == "Journal/2024/2024-02/2024-W09.md"
    assert week[1].note_path == "Journal/2024/2024-02/2024-02.md"


def test_week_spanning_years_files_under_start_year():
    ids = resolve_calendar_ids(date(2025, 1, 2))
    week = build_segments("/", "week", ids)
    assert week[0].folder_path == "2024"
    assert week[-1].note_path == "2024/2024-12/2025-W01.md"


@pytest.mark.parametrize("root", ["/", "", "//"])
def test_root_folder_variants_collapse_to_vault_root(root):
    ids = resolve_calendar_ids(date(2024, 1, 1))
    assert build_segments(root, "year", ids)[0].note_path == "2024/2024.md"


def test_join_vault_path_drops_empty_parts():
    assert join_vault_path("Notes/", "/2024", "") == "Notes/2024"
    assert join_vault_path("/a//b/", "c") == "a/b/c"


def test_unknown_granularity_rejected():
    ids = resolve_calendar_ids(date(2024, 1, 1))
    with pytest.raises(ValueError):
        build_segments("/", "quarter", ids)
