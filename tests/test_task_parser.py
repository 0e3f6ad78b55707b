"""Tests for parse/task.py."""

import pytest

from marktally.parse.task import parse_task_line, pick_priority
from marktally.query.field import read_field
from marktally.query.filter import filter_by_rules


def parse(line: str, line_number: int = 1):
    return parse_task_line("notes/daily.md", line, line_number, "daily")


@pytest.mark.parametrize(
    "line",
    [
        "",
        "plain text",
        "# Heading",
        "- not a task",
        "- [] missing status",
        "[ ] no bullet",
        "1. [ ] ordered list",
    ],
)
def test_non_task_lines_return_none(line):
    assert parse(line) is None


def test_basic_open_task():
    item = parse("- [ ] Write report", 7)
    assert item is not None
    assert item["id"] == "notes/daily.md#7"
    assert item["type"] == "task"
    assert item["title"] == "Write report"
    assert item["content"] == "- [ ] Write report"
    assert item["category_key"] == "任务/open"
    assert item["folder"] == "daily"
    assert item["tags"] == []
    assert item["recurrence"] == "none"
    assert item["priority"] is None
    assert item["date"] is None
    assert item["extra"] == {}


@pytest.mark.parametrize(
    "mark, status",
    [(" ", "open"), ("x", "done"), ("X", "done"), ("-", "cancelled"), ("/", "open")],
)
def test_status_from_checkbox(mark, status):
    item = parse(f"- [{mark}] Task")
    assert item["category_key"] == f"任务/{status}"


def test_bullet_variants_and_indent():
    assert parse("  * [ ] Star bullet")["title"] == "Star bullet"
    assert parse("+ [x] Plus bullet")["title"] == "Plus bullet"


def test_tags_are_deduplicated_across_sources():
    item = parse("- [ ] Train #health #health (主题:: health, sport, sport)")
    assert item["tags"] == ["health", "sport"]
    assert len(item["tags"]) == len(set(item["tags"]))


def test_full_width_inline_field_tags():
    item = parse("- [ ] Read （标签:: 阅读，#书）")
    assert item["tags"] == ["阅读", "书"]
    assert item["title"] == "Read"


def test_high_priority_wins_over_medium():
    assert parse("- [ ] Mixed 🔼 ⏫")["priority"] == "high"
    assert parse("- [ ] Mixed ⏫ 🔼")["priority"] == "high"


def test_low_wins_over_lowest():
    assert pick_priority("- [ ] Chores ⏬ ⏽") == "low"


@pytest.mark.parametrize(
    "glyph, priority",
    [
        ("🔺", "highest"),
        ("⏫", "high"),
        ("🔼", "medium"),
        ("⏽", "low"),
        ("🔽", "low"),
        ("⏬", "lowest"),
    ],
)
def test_priority_glyphs(glyph, priority):
    assert pick_priority(f"- [ ] Task {glyph}") == priority


def test_scheduled_only_task_falls_back_to_scheduled_date():
    item = parse("- [ ] Plan trip ⏳ 2024-05-10")
    assert item["scheduled_date"] == "2024-05-10"
    assert item["start_iso"] == item["scheduled_date"]
    assert item["end_iso"] == "2024-05-10"
    assert item["date"] == "2024-05-10"
    assert item["date_source"] == "scheduled"


def test_all_date_markers_are_extracted():
    item = parse(
        "- [x] Ship ➕ 2024-01-01 ⏳ 2024-01-02 🛫 2024-01-03 📅 2024-01-04 ✅ 2024-01-05"
    )
    assert item["created_date"] == "2024-01-01"
    assert item["scheduled_date"] == "2024-01-02"
    assert item["start_date"] == "2024-01-03"
    assert item["due_date"] == "2024-01-04"
    assert item["done_date"] == "2024-01-05"
    assert item["start_iso"] == "2024-01-03"
    assert item["end_iso"] == "2024-01-05"
    assert item["date"] == "2024-01-05"
    assert item["date_source"] == "done"
    assert item["title"] == "Ship"


def test_loose_dates_are_normalized():
    item = parse("- [ ] Pay rent 📅 2024/3/5")
    assert item["due_date"] == "2024-03-05"
    assert item["start_iso"] == "2024-03-05"


def test_milliseconds_mirror_iso_dates():
    item = parse("- [ ] Due 📅 1970-01-02")
    assert item["start_ms"] == 86_400_000
    assert item["end_ms"] == 86_400_000
    assert item["date_ms"] == 86_400_000


def test_recurrence_text():
    item = parse("- [ ] Water plants 🔁 every week 📅 2024-01-01")
    assert item["recurrence"] == "every week"
    assert item["title"] == "Water plants"


def test_inline_fields_are_routed_and_coerced():
    item = parse(
        "- [ ] Run (时间:: 07:00) (结束:: 08:00) (时长:: 60) (评分:: 4.5) "
        "(周期:: week) (mood:: good) (km:: 5) (pb:: true)"
    )
    assert item["start_time"] == "07:00"
    assert item["end_time"] == "08:00"
    assert item["duration"] == 60
    assert item["rating"] == 4.5
    assert item["period"] == "week"
    assert item["extra"] == {"mood": "good", "km": 5, "pb": True}
    assert item["title"] == "Run"


def test_inline_date_icon_and_priority_fill_their_fields():
    item = parse("- [ ] Sync (type:: meeting) (date:: 2024-1-2) (icon:: 🏃) (priority:: High)")
    assert item["date"] == "2024-01-02"
    assert item["date_source"] == "inline"
    assert item["start_iso"] == item["end_iso"] == "2024-01-02"
    assert item["icon"] == "🏃"
    assert item["priority"] == "high"
    assert item["title"] == "Sync"
    assert item["extra"] == {"type": "meeting"}


def test_unknown_priority_level_is_ignored():
    item = parse("- [ ] Chores (priority:: urgent) 🔼")
    assert item["priority"] == "medium"
    assert "priority" not in item["extra"]


def test_keys_without_a_route_keep_their_value_in_extra():
    item = parse("- [ ] Sneaky (title:: other) (categoryKey:: x) (id:: 7)")
    assert item["extra"] == {"title": "other", "categoryKey": "x", "id": 7}
    assert item["title"] == "Sneaky"
    assert item["category_key"] == "任务/open"
    assert item["id"] == "notes/daily.md#1"


def test_extra_type_is_filterable():
    item = parse("- [ ] Sync (type:: meeting)")
    rules = [{"field": "extra.type", "op": "=", "value": "meeting"}]
    assert filter_by_rules([item], rules) == [item]
    assert read_field(item, "type") == "task"


def test_leading_icon_is_split_from_title():
    item = parse("- [ ] 📚 Read a chapter")
    assert item["icon"] == "📚"
    assert item["title"] == "Read a chapter"


def test_leading_date_marker_is_not_an_icon():
    item = parse("- [ ] 📅 2024-02-01 Dentist")
    assert item["icon"] is None
    assert item["due_date"] == "2024-02-01"
    assert item["title"] == "Dentist"


def test_period_count_for_week_period():
    item = parse("- [ ] Review (周期:: 周) 📅 2024-01-08")
    assert item["period"] == "周"
    assert item["period_count"] == 2


def test_closed_task_without_dates_has_no_date():
    item = parse("- [x] Done without dates")
    assert item["start_iso"] is None
    assert item["end_iso"] is None
    assert item["date"] is None
