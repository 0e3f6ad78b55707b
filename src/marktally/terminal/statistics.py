# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from marktally.model.statistics import CategoryConfig
from marktally.service.grouping import collect_base_categories
from marktally.service.statistics import (
    aggregate_by_unit,
    get_month_weeks_data,
    month_week_starts,
)
from marktally.state import get_configuration
from marktally.terminal.parse import parse_date
from marktally.terminal.source import load_items
from marktally.time import UnitType, get_date_range, today
from marktally.view.statistics import month_weeks_view, statistics_view

UNITS: tuple[UnitType, ...] = ("day", "week", "month", "quarter", "year")


def stats(
    paths: Annotated[list[Path], typer.Argument(help="Markdown files or directories to scan")],
    unit: Annotated[
        str, typer.Option("--unit", "-u", help="day, week, month, quarter or year")
    ] = "week",
    anchor: Annotated[
        Optional[str], typer.Option("--anchor", "-a", help="Any date inside the period")
    ] = None,
    use_period: Annotated[
        bool,
        typer.Option("--use-period", help="Only count items recorded for this period length"),
    ] = False,
    weeks: Annotated[
        bool, typer.Option("--weeks", "-w", help="Break the anchor's month down by week")
    ] = False,
    categories: Annotated[
        Optional[list[str]],
        typer.Option("--category", help="Base category to count, repeatable"),
    ] = None,
) -> None:
    """Count items per base category for a day, week, month, quarter or year."""
    if unit not in UNITS:
        raise typer.BadParameter(f"Unit must be one of {', '.join(UNITS)}, got {unit!r}")
    anchor_date = parse_date(anchor) or today()

    config = get_configuration()
    items = load_items(paths, config)

    category_configs: list[CategoryConfig]
    if categories:
        category_configs = [CategoryConfig(name=name) for name in categories]
    elif config["categories"]:
        category_configs = config["categories"]
    else:
        category_configs = [CategoryConfig(name=name) for name in collect_base_categories(items)]

    if weeks:
        week_starts = month_week_starts(anchor_date)
        month_weeks_view(
            anchor_date.format("YYYY-MM"),
            category_configs,
            [start.format("MM-DD") for start in week_starts],
            get_month_weeks_data(items, category_configs, anchor_date, use_period),
        )
        return

    start, end = get_date_range(anchor_date, unit)  # type: ignore[arg-type]
    statistics_view(
        f"stats by {unit}",
        category_configs,
        aggregate_by_unit(
            items, category_configs, anchor_date, unit, use_period  # type: ignore[arg-type]
        ),
        f"{start.to_date_string()} .. {end.to_date_string()}",
    )
