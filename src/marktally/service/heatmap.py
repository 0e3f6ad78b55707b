# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from marktally.model.heatmap import (
    SkippedByReason,
    ThemeDataMap,
    ThemeDataMapWithStats,
    ThemeFilterResult,
)
from marktally.model.item import Item

logger = logging.getLogger(__name__)

DEFAULT_THEME = "__default__"


def is_default_mode(themes_to_track: Optional[list[str]]) -> bool:
    """No themes, or only the `__default__` sentinel, means every theme counts."""
    return not themes_to_track or list(themes_to_track) == [DEFAULT_THEME]


def filter_items_by_themes(
    items: list[Item], themes_to_track: Optional[list[str]]
) -> ThemeFilterResult:
    """
    Split items into those a heatmap can place and those it must skip.

    Undated items are counted under `no_date` before any theme check; in
    tracked mode dated items whose theme is missing or untracked are counted
    under `theme_not_tracked`.

    Returns:
        {
            "kept": list[Item],
            "skipped_count": int,
            "skipped_by_reason": {"no_date": int, "theme_not_tracked": int},
        }
    """
    default_mode = is_default_mode(themes_to_track)
    tracked = set(themes_to_track or [])

    kept: list[Item] = []
    skipped_by_reason = SkippedByReason(no_date=0, theme_not_tracked=0)

    for item in items:
        if not item.get("date"):
            skipped_by_reason["no_date"] += 1
            continue
        if not default_mode and item.get("theme") not in tracked:
            skipped_by_reason["theme_not_tracked"] += 1
            continue
        kept.append(item)

    skipped_count = skipped_by_reason["no_date"] + skipped_by_reason["theme_not_tracked"]
    if skipped_count:
        logger.debug(
            "Heatmap skipped %d items (no date: %d, theme not tracked: %d)",
            skipped_count,
            skipped_by_reason["no_date"],
            skipped_by_reason["theme_not_tracked"],
        )

    return ThemeFilterResult(
        kept=kept,
        skipped_count=skipped_count,
        skipped_by_reason=skipped_by_reason,
    )


def aggregate_theme_data(items: list[Item], themes_to_track: Optional[list[str]]) -> ThemeDataMap:
    """
    Group items into theme -> date -> flat list of items.

    In default mode everything lands under `__default__`. Tracked themes
    always get an entry, even when empty. Undated or untracked items are
    left out.
    """
    default_mode = is_default_mode(themes_to_track)
    themes = [DEFAULT_THEME] if default_mode else list(dict.fromkeys(themes_to_track or []))
    theme_map: ThemeDataMap = {theme: {} for theme in themes}

    for item in items:
        date = item.get("date")
        if not date:
            continue
        theme = DEFAULT_THEME if default_mode else item.get("theme")
        if theme is None or theme not in theme_map:
            continue
        theme_map[theme].setdefault(date, []).append(item)

    return theme_map


def build_theme_data_map(items: list[Item], themes_to_track: Optional[list[str]]) -> ThemeDataMap:
    return build_theme_data_map_with_stats(items, themes_to_track)["theme_map"]


def build_theme_data_map_with_stats(
    items: list[Item], themes_to_track: Optional[list[str]]
) -> ThemeDataMapWithStats:
    filter_result = filter_items_by_themes(items, themes_to_track)
    theme_map = aggregate_theme_data(filter_result["kept"], themes_to_track)
    return ThemeDataMapWithStats(theme_map=theme_map, filter_result=filter_result)


def get_theme_items(theme_map: ThemeDataMap, theme: str) -> list[Item]:
    items: list[Item] = []
    for items_on_date in theme_map.get(theme, {}).values():
        items.extend(items_on_date)
    return items
