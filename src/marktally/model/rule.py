# SPDX-License-Identifier: MIT

from typing import Literal, NotRequired, TypedDict

Logic = Literal["and", "or"]
SortDirection = Literal["asc", "desc"]


class FilterRule(TypedDict):
    field: str
    op: str
    value: str
    logic: NotRequired[Logic]


class SortRule(TypedDict):
    field: str
    dir: SortDirection
