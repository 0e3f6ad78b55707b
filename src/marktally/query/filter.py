# SPDX-License-Identifier: MIT

import logging
import re
from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Optional, Union

from marktally.model.item import Item
from marktally.model.rule import FilterRule
from marktally.parse.text import to_text
from marktally.query.field import coerce_for_compare, read_field
from marktally.query.filter_type import FilterLogic, FilterOp
from marktally.time import as_date, date_from_iso_str

logger = logging.getLogger(__name__)

_CLOSED_CATEGORY_RE = re.compile(r"/(done|cancelled)\b")


def generate_predicate(rule: FilterRule) -> "Predicate":
    match rule.get("op"):
        case FilterOp.EQUALS:
            return Equals(rule)
        case FilterOp.NOT_EQUALS:
            return NotEquals(rule)
        case FilterOp.INCLUDES:
            return Includes(rule)
        case FilterOp.REGEX:
            return Regex(rule)
        case FilterOp.GREATER:
            return Greater(rule)
        case FilterOp.LESS:
            return Less(rule)
    logger.warning("Unsupported filter operator %r on field %r", rule.get("op"), rule.get("field"))
    return Never(rule)


class Predicate(ABC):
    def __init__(self, rule: FilterRule) -> None:
        self.rule = rule
        self.value = to_text(rule.get("value"))

    def field_value(self, item: Item) -> Any:
        return read_field(item, self.rule.get("field", ""))

    @abstractmethod
    def matches(self, item: Item) -> bool: ...


class Never(Predicate):
    def matches(self, item: Item) -> bool:
        return False


class Equals(Predicate):
    def matches(self, item: Item) -> bool:
        return to_text(self.field_value(item)) == self.value


class NotEquals(Predicate):
    def matches(self, item: Item) -> bool:
        return to_text(self.field_value(item)) != self.value


class Includes(Predicate):
    def matches(self, item: Item) -> bool:
        field_value = self.field_value(item)
        if field_value is None:
            return False
        if isinstance(field_value, (list, tuple, set)):
            return any(self.value in to_text(element) for element in field_value)
        return self.value in to_text(field_value)


class Regex(Predicate):
    def __init__(self, rule: FilterRule) -> None:
        super().__init__(rule)
        self.pattern: Optional[re.Pattern[str]] = None
        try:
            self.pattern = re.compile(self.value)
        except re.error as e:
            logger.warning("Invalid regex %r on field %r: %s", self.value, rule.get("field"), e)

    def matches(self, item: Item) -> bool:
        field_value = self.field_value(item)
        if self.pattern is None or field_value is None:
            return False
        return self.pattern.search(to_text(field_value)) is not None


class NumericComparison(Predicate):
    def __init__(self, rule: FilterRule) -> None:
        super().__init__(rule)
        self.target = coerce_for_compare(self.value)

    def operands(self, item: Item) -> Optional[tuple[float, float]]:
        left = coerce_for_compare(self.field_value(item))
        if isinstance(left, float) and isinstance(self.target, float):
            return left, self.target
        return None


class Greater(NumericComparison):
    def matches(self, item: Item) -> bool:
        operands = self.operands(item)
        return operands is not None and operands[0] > operands[1]


class Less(NumericComparison):
    def matches(self, item: Item) -> bool:
        operands = self.operands(item)
        return operands is not None and operands[0] < operands[1]


def filter_by_rules(items: list[Item], rules: Optional[list[FilterRule]] = None) -> list[Item]:
    """
    Keep the items accepted by a chain of rules folded left to right.

    The `logic` of rule i ("and" when absent) joins the running result with
    the result of rule i + 1. Every rule is evaluated for every item.
    """
    if not rules:
        return list(items)

    predicates = [generate_predicate(rule) for rule in rules]
    return [item for item in items if _matches_chain(item, rules, predicates)]


def _matches_chain(item: Item, rules: list[FilterRule], predicates: list[Predicate]) -> bool:
    result = predicates[0].matches(item)
    for index in range(1, len(predicates)):
        current = predicates[index].matches(item)
        logic = str(rules[index - 1].get("logic") or FilterLogic.AND).lower()
        if logic == FilterLogic.OR:
            result = result or current
        else:
            result = result and current
    return result


def is_closed(item: Item) -> bool:
    return _CLOSED_CATEGORY_RE.search((item.get("category_key") or "").lower()) is not None


def filter_by_date_range(
    items: list[Item],
    start: Union[str, date, None] = None,
    end: Union[str, date, None] = None,
) -> list[Item]:
    """
    Keep items whose `date` lies within [start, end]; either bound may be None.

    Items without a usable date stay unless they are closed (done or cancelled).
    """
    if start is None and end is None:
        return list(items)
    start_date = as_date(start)
    end_date = as_date(end)

    kept = []
    for item in items:
        item_date = date_from_iso_str(item.get("date"))
        if item_date is None:
            if not is_closed(item):
                kept.append(item)
            continue
        if start_date is not None and item_date < start_date:
            continue
        if end_date is not None and item_date > end_date:
            continue
        kept.append(item)
    return kept


def filter_by_period(items: list[Item], period_label: str) -> list[Item]:
    return [item for item in items if item.get("period") == period_label]


def filter_by_keyword(items: list[Item], keyword: str) -> list[Item]:
    """Case-insensitive substring search over title, content and tags."""
    needle = keyword.strip().lower()
    if not needle:
        return list(items)

    kept = []
    for item in items:
        haystack = " ".join(
            [item.get("title") or "", item.get("content") or "", *(item.get("tags") or [])]
        ).lower()
        if needle in haystack:
            kept.append(item)
    return kept
