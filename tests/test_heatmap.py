"""Tests for service/heatmap.py."""

from marktally.service.heatmap import (
    DEFAULT_THEME,
    aggregate_theme_data,
    build_theme_data_map,
    build_theme_data_map_with_stats,
    filter_items_by_themes,
    get_theme_items,
)


def test_filter_stats_count_each_skip_reason():
    items = [{"date": None, "theme": "t1"}, {"date": "2024-01-01", "theme": "t2"}]
    result = filter_items_by_themes(items, ["t1"])
    assert result["kept"] == []
    assert result["skipped_by_reason"] == {"no_date": 1, "theme_not_tracked": 1}
    assert result["skipped_count"] == 2


def test_default_mode_keeps_all_dated_items(make_item):
    items = [make_item(date="2024-01-01", theme=None), make_item(date=None, theme="t")]
    for themes in (None, [], [DEFAULT_THEME]):
        result = filter_items_by_themes(items, themes)
        assert result["kept"] == [items[0]]
        assert result["skipped_by_reason"] == {"no_date": 1, "theme_not_tracked": 0}


def test_buckets_are_flat_lists(make_item):
    items = [
        make_item(date="2024-01-01", theme="t1"),
        make_item(date="2024-01-01", theme="t1"),
        make_item(date="2024-01-02", theme="t2"),
    ]
    theme_map = aggregate_theme_data(items, ["t1", "t2"])
    for by_date in theme_map.values():
        for bucket in by_date.values():
            assert all(not isinstance(element, list) for element in bucket)
    assert len(theme_map["t1"]["2024-01-01"]) == 2
    assert len(theme_map["t2"]["2024-01-02"]) == 1


def test_tracked_themes_always_present(make_item):
    theme_map = build_theme_data_map([make_item(date="2024-01-01", theme="t1")], ["t1", "t3"])
    assert theme_map["t3"] == {}
    assert set(theme_map) == {"t1", "t3"}


def test_default_mode_groups_under_default_theme(make_item):
    items = [make_item(date="2024-01-01", theme="a"), make_item(date="2024-01-01", theme="b")]
    theme_map = build_theme_data_map(items, None)
    assert list(theme_map) == [DEFAULT_THEME]
    assert len(theme_map[DEFAULT_THEME]["2024-01-01"]) == 2


def test_with_stats_and_theme_items(make_item):
    items = [
        make_item(date="2024-01-01", theme="t1"),
        make_item(date="2024-01-03", theme="t1"),
        make_item(date="2024-01-03", theme="t2"),
    ]
    result = build_theme_data_map_with_stats(items, ["t1"])
    assert result["filter_result"]["skipped_count"] == 1
    assert get_theme_items(result["theme_map"], "t1") == items[:2]
    assert get_theme_items(result["theme_map"], "missing") == []
