# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from marktally.service.heatmap import build_theme_data_map_with_stats
from marktally.state import get_configuration
from marktally.terminal.parse import parse_date
from marktally.terminal.source import load_items
from marktally.time import today
from marktally.view.heatmap import heatmap_view


def heatmap(
    paths: Annotated[list[Path], typer.Argument(help="Markdown files or directories to scan")],
    themes: Annotated[
        Optional[list[str]],
        typer.Option("--theme", "-t", help="Theme to track, repeatable"),
    ] = None,
    end: Annotated[
        Optional[str], typer.Option("--end", "-e", help="Last day shown, default today")
    ] = None,
    days: Annotated[int, typer.Option("--days", "-d", help="Number of days shown")] = 28,
) -> None:
    """Show how many items each theme recorded per day."""
    if days < 1:
        raise typer.BadParameter(f"Days must be positive, got {days}")
    end_date = parse_date(end) or today()

    config = get_configuration()
    items = load_items(paths, config)
    data = build_theme_data_map_with_stats(items, themes or config["themes"])

    dates = [end_date.subtract(days=offset).to_date_string() for offset in reversed(range(days))]
    heatmap_view("heatmap", dates, data)
