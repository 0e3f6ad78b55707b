# SPDX-License-Identifier: MIT

from typing import TypedDict

from marktally.model.item import Item

ThemeDataMap = dict[str, dict[str, list[Item]]]


class SkippedByReason(TypedDict):
    no_date: int
    theme_not_tracked: int


class ThemeFilterResult(TypedDict):
    kept: list[Item]
    skipped_count: int
    skipped_by_reason: SkippedByReason


class ThemeDataMapWithStats(TypedDict):
    theme_map: ThemeDataMap
    filter_result: ThemeFilterResult
