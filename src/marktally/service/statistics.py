# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Union

import pendulum

from marktally.model.item import Item
from marktally.model.statistics import CategoryConfig, PeriodData
from marktally.query.field import read_field
from marktally.service.grouping import get_base_category
from marktally.time import (
    PERIOD_LABELS,
    UnitType,
    as_date,
    date_from_iso_str,
    get_date_range,
    is_in_range,
)

logger = logging.getLogger(__name__)

AnchorType = Union[str, datetime.date]


def create_period_data(categories: list[CategoryConfig]) -> PeriodData:
    return PeriodData(counts={category["name"]: 0 for category in categories}, items=[])


def _aggregate(
    items: list[Item],
    categories: list[CategoryConfig],
    anchor: AnchorType,
    unit: UnitType,
    use_period: bool = False,
) -> PeriodData:
    """
    Count items dated inside the `unit` holding `anchor`, per base category.

    With `use_period` an item must also carry the unit's period label, so an
    item recorded for a week is not counted again in its month.
    """
    data = create_period_data(categories)
    if as_date(anchor) is None:
        logger.debug("Ignoring aggregation for invalid anchor %r", anchor)
        return data

    start, end = get_date_range(anchor, unit)
    for item in items:
        item_date = date_from_iso_str(item.get("date"))
        if item_date is None or not is_in_range(item_date, start, end):
            continue

        base_category = get_base_category(item.get("category_key"))
        if base_category not in data["counts"]:
            continue

        if use_period and (read_field(item, "period") or "") not in PERIOD_LABELS[unit]:
            continue

        data["counts"][base_category] += 1
        data["items"].append(item)

    return data


def aggregate_by_day(
    items: list[Item], categories: list[CategoryConfig], anchor: AnchorType
) -> PeriodData:
    return _aggregate(items, categories, anchor, "day")


def aggregate_by_week(
    items: list[Item], categories: list[CategoryConfig], anchor: AnchorType
) -> PeriodData:
    return _aggregate(items, categories, anchor, "week")


def aggregate_by_month(
    items: list[Item],
    categories: list[CategoryConfig],
    anchor: AnchorType,
    use_period: bool = False,
) -> PeriodData:
    return _aggregate(items, categories, anchor, "month", use_period)


def aggregate_by_quarter(
    items: list[Item],
    categories: list[CategoryConfig],
    anchor: AnchorType,
    use_period: bool = False,
) -> PeriodData:
    return _aggregate(items, categories, anchor, "quarter", use_period)


def aggregate_by_year(
    items: list[Item],
    categories: list[CategoryConfig],
    anchor: AnchorType,
    use_period: bool = False,
) -> PeriodData:
    return _aggregate(items, categories, anchor, "year", use_period)


def aggregate_by_unit(
    items: list[Item],
    categories: list[CategoryConfig],
    anchor: AnchorType,
    unit: UnitType,
    use_period: bool = False,
) -> PeriodData:
    if unit == "day":
        return aggregate_by_day(items, categories, anchor)
    if unit == "week":
        return aggregate_by_week(items, categories, anchor)
    return _aggregate(items, categories, anchor, unit, use_period)


def month_week_starts(target_month: AnchorType) -> list[pendulum.Date]:
    """Mondays of every ISO week that overlaps the month of `target_month`."""
    month_start, month_end = get_date_range(target_month, "month")
    week_start = month_start.start_of("week")
    starts = []
    while week_start <= month_end:
        starts.append(week_start)
        week_start = week_start.add(weeks=1)
    return starts


def get_month_weeks_data(
    items: list[Item],
    categories: list[CategoryConfig],
    target_month: AnchorType,
    use_period: bool = False,
) -> list[PeriodData]:
    """
    Week-by-week aggregation across a month, one PeriodData per ISO week.

    Boundary weeks run into the neighbouring months. Weekly buckets do not
    gate on `use_period`.
    """
    if as_date(target_month) is None:
        return []
    return [
        aggregate_by_week(items, categories, start)
        for start in month_week_starts(target_month)
    ]
