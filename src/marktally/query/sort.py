# SPDX-License-Identifier: MIT

from functools import cache, cmp_to_key
from typing import Any, Optional

from pyuca import Collator

from marktally.model.item import Item
from marktally.model.rule import SortRule
from marktally.parse.text import to_text
from marktally.query.field import coerce_for_compare, read_field


@cache
def _collator() -> Collator:
    return Collator()


def compare_text(a: str, b: str) -> int:
    """Unicode collation order, falling back to code points on a tie."""
    a_key = _collator().sort_key(a)
    b_key = _collator().sort_key(b)
    if a_key == b_key:
        return (a > b) - (a < b)
    return (a_key > b_key) - (a_key < b_key)


def compare_values(a: Any, b: Any) -> int:
    """
    Compare two present field values: numerically when both read as numbers
    or dates, otherwise by collated text.
    """
    left = coerce_for_compare(a)
    right = coerce_for_compare(b)
    if isinstance(left, float) and isinstance(right, float):
        return (left > right) - (left < right)
    return compare_text(to_text(a), to_text(b))


def compare_items(a: Item, b: Item, sort_rules: list[SortRule]) -> int:
    for rule in sort_rules:
        descending = rule.get("dir") == "desc"
        a_value = read_field(a, rule["field"])
        b_value = read_field(b, rule["field"])

        # missing values go last ascending and first descending
        if a_value is None and b_value is None:
            continue
        if a_value is None:
            return -1 if descending else 1
        if b_value is None:
            return 1 if descending else -1

        result = compare_values(a_value, b_value)
        if result != 0:
            return -result if descending else result
    return 0


def sort_items(items: list[Item], sort_rules: Optional[list[SortRule]] = None) -> list[Item]:
    """Stable multi-key sort returning a new list."""
    if not sort_rules:
        return list(items)
    return sorted(items, key=cmp_to_key(lambda a, b: compare_items(a, b, sort_rules)))
