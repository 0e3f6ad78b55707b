# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.table import Table
from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from marktally import configuration
from marktally.state import get_config_path, get_configuration


def config() -> None:
    """Display the configuration file path and the effective settings."""
    config_path = get_config_path() or configuration.APP_CONFIG_PATH
    config = get_configuration()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("path", f"{config_path}{'' if config_path.is_file() else ' (missing)'}")
    table.add_row("block_start_marker", config["block_start_marker"])
    table.add_row("block_end_marker", config["block_end_marker"])
    table.add_row("block_title_max_length", str(config["block_title_max_length"]))
    table.add_row(
        "categories",
        ", ".join(category["name"] for category in config["categories"]) or "None",
    )
    table.add_row("themes", ", ".join(config["themes"]) if config["themes"] else "None")
    table.add_row(
        "views",
        dump(config["views"], Dumper=Dumper, allow_unicode=True).strip()
        if config["views"]
        else "None",
    )

    console.print(table)
