# SPDX-License-Identifier: MIT

from functools import cmp_to_key
from typing import Callable, Optional

from marktally.model.group import GroupNode, TableMatrix
from marktally.model.item import Item
from marktally.parse.text import to_text
from marktally.query.field import read_field
from marktally.query.sort import compare_text

UNCATEGORIZED_LABEL = "(未分类)"
EMPTY_LABEL = "无日期"
ALL_KEY = "__all__"

KeyOrder = Callable[[list[str]], list[str]]


def group_key(item: Item, field: str, default_label: str = UNCATEGORIZED_LABEL) -> str:
    value = read_field(item, field)
    if value is None:
        return default_label
    return to_text(value)


def group_items_by_field(
    items: list[Item], field: str, default_label: str = UNCATEGORIZED_LABEL
) -> dict[str, list[Item]]:
    """Bucket items by the text of one field, in first-seen key order."""
    grouped: dict[str, list[Item]] = {}
    for item in items:
        grouped.setdefault(group_key(item, field, default_label), []).append(item)
    return grouped


def sorted_group_keys(keys: list[str]) -> list[str]:
    return sorted(keys, key=cmp_to_key(compare_text))


def build_group_tree(
    items: list[Item],
    group_fields: list[str],
    key_order: Optional[KeyOrder] = None,
) -> list[GroupNode]:
    """
    Partition items level by level on `group_fields`.

    The last level holds the items; every item lands in exactly one leaf.
    Siblings keep first-seen order unless `key_order` rearranges the keys.
    Without group fields a single `__all__` leaf holds every item.
    """
    if not group_fields:
        return [GroupNode(field=ALL_KEY, key=ALL_KEY, children=None, items=list(items))]

    def group_level(level_items: list[Item], level: int) -> list[GroupNode]:
        field = group_fields[level]
        grouped = group_items_by_field(level_items, field)
        keys = list(grouped)
        if key_order is not None:
            keys = key_order(keys)

        nodes = []
        for key in keys:
            bucket = grouped[key]
            if level == len(group_fields) - 1:
                nodes.append(GroupNode(field=field, key=key, children=None, items=bucket))
            else:
                nodes.append(
                    GroupNode(
                        field=field,
                        key=key,
                        children=group_level(bucket, level + 1),
                        items=None,
                    )
                )
        return nodes

    return group_level(list(items), 0)


def count_leaf_items(nodes: list[GroupNode]) -> int:
    total = 0
    for node in nodes:
        if node["items"] is not None:
            total += len(node["items"])
        if node["children"] is not None:
            total += count_leaf_items(node["children"])
    return total


def build_table_matrix(items: list[Item], row_field: str, col_field: str) -> TableMatrix:
    rows: dict[str, None] = {}
    cols: dict[str, None] = {}
    matrix: dict[str, dict[str, list[Item]]] = {}

    for item in items:
        row = group_key(item, row_field, EMPTY_LABEL)
        col = group_key(item, col_field, EMPTY_LABEL)
        rows[row] = None
        cols[col] = None
        matrix.setdefault(row, {}).setdefault(col, []).append(item)

    return TableMatrix(
        matrix=matrix,
        sorted_rows=sorted_group_keys(list(rows)),
        sorted_cols=sorted_group_keys(list(cols)),
    )


def get_base_category(category_key: Optional[str]) -> str:
    return (category_key or "").split("/")[0]


def collect_base_categories(items: list[Item]) -> list[str]:
    categories = {get_base_category(item.get("category_key")) for item in items}
    categories.discard("")
    return sorted_group_keys(list(categories))
