# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
import typer

from marktally.model.rule import FilterRule, Logic, SortRule
from marktally.query.util import parse_filter_instruction, parse_sort_instruction
from marktally.time import as_date, today


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    """
    Accept YYYY-MM-DD (or / and . separators), "today"/"t", or a day offset
    such as "-1" or "7".
    """
    if date_param is None:
        return None

    value = date_param.strip()
    if value in ("today", "t"):
        return today()
    if value.lstrip("-").isdigit() and len(value.lstrip("-")) <= 3:
        return today().add(days=int(value))

    parsed = as_date(value)
    if parsed is None:
        raise typer.BadParameter(f"Invalid date: {date_param!r}")
    return parsed


def parse_filters(instructions: Optional[list[str]], logic: Logic = "and") -> list[FilterRule]:
    rules = []
    for instruction in instructions or []:
        try:
            rules.append(parse_filter_instruction(instruction, logic))
        except ValueError as e:
            raise typer.BadParameter(str(e))
    return rules


def parse_sorts(instructions: Optional[list[str]]) -> list[SortRule]:
    return [parse_sort_instruction(instruction) for instruction in instructions or []]
