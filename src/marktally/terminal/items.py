# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from marktally.configuration import Configuration
from marktally.model.item import Item
from marktally.model.rule import FilterRule, SortRule
from marktally.query.filter import (
    filter_by_date_range,
    filter_by_keyword,
    filter_by_period,
    filter_by_rules,
)
from marktally.query.sort import sort_items
from marktally.service.grouping import build_group_tree
from marktally.state import get_configuration
from marktally.terminal.parse import parse_date, parse_filters, parse_sorts
from marktally.terminal.source import load_items
from marktally.view.group import group_view
from marktally.view.item import DEFAULT_COLUMNS, items_view

PathsArgument = Annotated[
    list[Path], typer.Argument(help="Markdown files or directories to scan")
]
FilterOption = Annotated[
    Optional[list[str]],
    typer.Option("--filter", "-f", help='Filter rule "field op value", repeatable'),
]
OrOption = Annotated[
    bool, typer.Option("--or", help="Join filter rules with OR instead of AND")
]
SortOption = Annotated[
    Optional[list[str]],
    typer.Option("--sort", "-s", help='Sort rule "[asc|desc] field", repeatable'),
]
KeywordOption = Annotated[
    Optional[str], typer.Option("--keyword", "-k", help="Search title, content and tags")
]
PeriodOption = Annotated[
    Optional[str], typer.Option("--period", "-p", help="Only items with this period label")
]
FromOption = Annotated[Optional[str], typer.Option("--from", help="Earliest date, inclusive")]
ToOption = Annotated[Optional[str], typer.Option("--to", help="Latest date, inclusive")]
ViewOption = Annotated[
    Optional[str], typer.Option("--view", "-v", help="Named view from the configuration")
]


def _view_rules(
    config: Configuration, view: Optional[str]
) -> tuple[list[FilterRule], list[SortRule], list[str]]:
    if view is None:
        return [], [], []
    view_config = config["views"].get(view)
    if view_config is None:
        raise typer.BadParameter(f"Unknown view {view!r}")
    return (
        list(view_config.get("filters") or []),
        list(view_config.get("sort") or []),
        list(view_config.get("group_by") or []),
    )


def select_items(
    paths: list[Path],
    filters: Optional[list[str]],
    use_or: bool,
    sorts: Optional[list[str]],
    keyword: Optional[str],
    period: Optional[str],
    date_from: Optional[str],
    date_to: Optional[str],
    view: Optional[str],
) -> tuple[list[Item], list[str]]:
    config = get_configuration()
    view_filters, view_sorts, view_group_by = _view_rules(config, view)

    rules = view_filters + parse_filters(filters, "or" if use_or else "and")
    sort_rules = parse_sorts(sorts) or view_sorts

    items = load_items(paths, config)
    items = filter_by_rules(items, rules)
    if keyword is not None:
        items = filter_by_keyword(items, keyword)
    if period is not None:
        items = filter_by_period(items, period)
    items = filter_by_date_range(items, parse_date(date_from), parse_date(date_to))
    return sort_items(items, sort_rules), view_group_by


def items(
    paths: PathsArgument,
    filters: FilterOption = None,
    use_or: OrOption = False,
    sorts: SortOption = None,
    keyword: KeywordOption = None,
    period: PeriodOption = None,
    date_from: FromOption = None,
    date_to: ToOption = None,
    view: ViewOption = None,
    columns: Annotated[
        Optional[str],
        typer.Option("--columns", "-c", help="Comma-separated columns to show"),
    ] = None,
    no_wrap: Annotated[
        bool, typer.Option("--no-wrap", help="Truncate long columns instead of wrapping")
    ] = False,
) -> None:
    """List the tasks and blocks found in markdown files."""
    selected, _ = select_items(
        paths, filters, use_or, sorts, keyword, period, date_from, date_to, view
    )
    column_list = (
        [column.strip() for column in columns.split(",") if column.strip()]
        if columns is not None
        else DEFAULT_COLUMNS
    )
    items_view(view or "items", selected, column_list, no_wrap=no_wrap)


def group(
    paths: PathsArgument,
    group_by: Annotated[
        Optional[list[str]],
        typer.Option("--by", "-b", help="Field to group by, repeatable for nesting"),
    ] = None,
    filters: FilterOption = None,
    use_or: OrOption = False,
    sorts: SortOption = None,
    keyword: KeywordOption = None,
    period: PeriodOption = None,
    date_from: FromOption = None,
    date_to: ToOption = None,
    view: ViewOption = None,
) -> None:
    """Show items as a tree grouped by one or more fields."""
    selected, view_group_by = select_items(
        paths, filters, use_or, sorts, keyword, period, date_from, date_to, view
    )
    group_fields = list(group_by or view_group_by)
    group_view(view or "group", build_group_tree(selected, group_fields), group_fields)
