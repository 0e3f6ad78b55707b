# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from marktally.model.heatmap import ThemeDataMapWithStats
from marktally.view.header import header


def get_heatmap_symbol(count: int) -> tuple[str, str]:
    """Symbol and style for the number of items recorded on one day."""
    if count <= 0:
        return (" ", "")
    elif count == 1:
        return (".", "green")
    elif count == 2:
        return ("o", "green")
    return ("O", "bold green")


def heatmap_view(report_name: str, dates: list[str], data: ThemeDataMapWithStats) -> None:
    header(report_name, f"{dates[0]} .. {dates[-1]}" if dates else None)

    heatmap_table = Table(box=box.SIMPLE, show_header=True, padding=(0, 0))
    heatmap_table.add_column("theme", style="plum1", no_wrap=True)
    for date in dates:
        heatmap_table.add_column(date[-2:], justify="center", width=2)
    heatmap_table.add_column("total", justify="right")

    for theme, by_date in data["theme_map"].items():
        row: list[Text | str] = [theme]
        for date in dates:
            symbol, style = get_heatmap_symbol(len(by_date.get(date, [])))
            row.append(Text(symbol, style=style))
        row.append(str(sum(len(items) for items in by_date.values())))
        heatmap_table.add_row(*row)

    console = Console()
    console.print(heatmap_table)

    skipped = data["filter_result"]["skipped_by_reason"]
    if data["filter_result"]["skipped_count"]:
        console.print(
            f" [dim]skipped {data['filter_result']['skipped_count']}: "
            f"no date {skipped['no_date']}, theme not tracked {skipped['theme_not_tracked']}[/dim]"
        )
