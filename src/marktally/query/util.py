# SPDX-License-Identifier: MIT

from typing import cast

from marktally.model.rule import FilterRule, Logic, SortDirection, SortRule
from marktally.query.filter_type import FilterOp


def split_instruction(instruction: str) -> tuple[str, str]:
    instruction_value = instruction.strip()
    instruction_value_list = instruction_value.split(" ")
    head = instruction_value_list[0].strip()
    value = instruction_value[len(head) :].strip()

    return head, value


def parse_filter_instruction(instruction: str, logic: Logic = "and") -> FilterRule:
    """
    Parse "field op value" into a FilterRule, e.g. "priority = high" or
    "extra.mood regex ^good".

    Raises ValueError for a missing field or an unknown operator.
    """
    field, rest = split_instruction(instruction)
    op, value = split_instruction(rest)
    if not field or not op:
        raise ValueError(f"Expected 'field op value', got {instruction!r}")
    if op not in [member.value for member in FilterOp]:
        raise ValueError(f"Unknown filter operator {op!r}")
    return FilterRule(field=field, op=op, value=value, logic=logic)


def parse_sort_instruction(instruction: str) -> SortRule:
    """Parse "field", "asc field" or "desc field" into a SortRule."""
    head, rest = split_instruction(instruction)
    if head in ("asc", "desc") and rest:
        return SortRule(field=rest, dir=cast(SortDirection, head))
    return SortRule(field=instruction.strip(), dir="asc")
