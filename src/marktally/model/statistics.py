# SPDX-License-Identifier: MIT

from typing import NotRequired, TypedDict

from marktally.model.item import Item


class CategoryConfig(TypedDict):
    name: str
    color: NotRequired[str]
    alias: NotRequired[str]


class PeriodData(TypedDict):
    counts: dict[str, int]
    items: list[Item]
