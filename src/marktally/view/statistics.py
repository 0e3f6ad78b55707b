# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from marktally.model.statistics import CategoryConfig, PeriodData
from marktally.view.header import header


def _category_label(category: CategoryConfig) -> str:
    label = category.get("alias") or category["name"]
    color = category.get("color")
    return f"[{color}]{label}[/{color}]" if color else label


def statistics_view(
    report_name: str,
    categories: list[CategoryConfig],
    data: PeriodData,
    sub_header: Optional[str] = None,
) -> None:
    header(report_name, sub_header)

    statistics_table = Table(box=box.SIMPLE)
    statistics_table.add_column("category")
    statistics_table.add_column("count", justify="right")

    for category in categories:
        statistics_table.add_row(_category_label(category), str(data["counts"][category["name"]]))
    statistics_table.add_row("[bold]total[/bold]", f"[bold]{len(data['items'])}[/bold]")

    console = Console()
    console.print(statistics_table)


def month_weeks_view(
    report_name: str,
    categories: list[CategoryConfig],
    week_labels: list[str],
    weeks: list[PeriodData],
) -> None:
    header(report_name, "by week")

    weeks_table = Table(box=box.SIMPLE)
    weeks_table.add_column("category")
    for label in week_labels:
        weeks_table.add_column(label, justify="right")

    for category in categories:
        weeks_table.add_row(
            _category_label(category),
            *[str(week["counts"][category["name"]]) for week in weeks],
        )

    console = Console()
    console.print(weeks_table)
