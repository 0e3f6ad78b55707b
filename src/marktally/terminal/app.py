# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from marktally import state as app_state
from marktally.terminal.configuration import config
from marktally.terminal.custom_typer import AliasedTyperGroup
from marktally.terminal.heatmap import heatmap
from marktally.terminal.items import group, items
from marktally.terminal.statistics import stats
from marktally.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="marktally - Query and tally tasks and blocks in markdown notes",
    no_args_is_help=True,
)
app.command(name="items, i")(items)
app.command(name="group, g")(group)
app.command(name="stats, s")(stats)
app.command(name="heatmap, h")(heatmap)
app.command(name="config, c")(config)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Log parsing and filtering details"),
    ] = False,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", help="Configuration file to use instead of the default"),
    ] = None,
) -> None:
    """
    marktally - Query and tally tasks and blocks in markdown notes

    Global options that apply to all commands.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )
    view_state.set_show_header(not no_header)
    app_state.set_config_path(config_path)


def run() -> None:
    app()
