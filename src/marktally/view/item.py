# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from marktally.model.item import Item
from marktally.view.header import header
from marktally.view.util import format_column

DEFAULT_COLUMNS = ["state", "date", "category_key", "title", "tags", "priority"]


def items_view(
    report_name: str,
    items: list[Item],
    columns: list[str] = DEFAULT_COLUMNS,
    no_wrap: bool = False,
) -> None:
    header(report_name, f"{len(items)} items")

    items_table = Table(box=box.SIMPLE)
    for column in columns:
        if no_wrap and column != "state":
            items_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            items_table.add_column(column)

    for item in items:
        items_table.add_row(*[format_column(item, column) for column in columns])

    console = Console()
    console.print(items_table)

