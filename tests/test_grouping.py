"""Tests for service/grouping.py."""

import pytest

from marktally.service.grouping import (
    ALL_KEY,
    UNCATEGORIZED_LABEL,
    build_group_tree,
    build_table_matrix,
    collect_base_categories,
    count_leaf_items,
    get_base_category,
    group_items_by_field,
)


@pytest.fixture
def items(make_item):
    return [
        make_item(category_key="任务/done", theme="work", period="周"),
        make_item(category_key="任务/open", theme="work", period="日"),
        make_item(category_key="总结", theme=None, period="周"),
        make_item(category_key="任务/done", theme="life", period=None),
        make_item(category_key="思考", theme="work", period="周"),
    ]


@pytest.mark.parametrize(
    "fields",
    [[], ["category_key"], ["theme", "period"], ["period", "theme", "category_key"], ["extra.none"]],
)
def test_leaf_counts_sum_to_input_length(items, fields):
    assert count_leaf_items(build_group_tree(items, fields)) == len(items)


def test_no_fields_gives_single_leaf(items):
    tree = build_group_tree(items, [])
    assert len(tree) == 1
    assert tree[0]["key"] == ALL_KEY
    assert tree[0]["children"] is None
    assert tree[0]["items"] == items


def test_nested_groups_keep_first_seen_order(items):
    tree = build_group_tree(items, ["theme", "period"])
    assert [node["key"] for node in tree] == ["work", UNCATEGORIZED_LABEL, "life"]
    work = tree[0]
    assert work["items"] is None
    assert [(child["key"], len(child["items"])) for child in work["children"]] == [("周", 2), ("日", 1)]


def test_key_order_rearranges_siblings(items):
    tree = build_group_tree(items, ["theme"], key_order=sorted)
    assert [node["key"] for node in tree] == sorted(["work", UNCATEGORIZED_LABEL, "life"])


def test_group_items_by_field_uses_text_of_lists(make_item):
    grouped = group_items_by_field([make_item(tags=["a", "b"]), make_item(tags=[])], "tags")
    assert list(grouped) == ["a,b", ""]


def test_build_table_matrix(items):
    table = build_table_matrix(items, "theme", "period")
    assert table["sorted_rows"] == sorted(table["sorted_rows"])
    assert set(table["sorted_rows"]) == {"work", "life", "无日期"}
    assert len(table["matrix"]["work"]["周"]) == 2
    assert len(table["matrix"]["life"]["无日期"]) == 1


def test_base_categories(items):
    assert get_base_category("任务/done") == "任务"
    assert get_base_category(None) == ""
    assert set(collect_base_categories(items)) == {"任务", "总结", "思考"}
