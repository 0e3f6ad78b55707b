# SPDX-License-Identifier: MIT

from typing import Optional

import click
import typer.core

COMMAND_ORDER = ("items", "group", "stats", "heatmap", "config")


def _primary_name(registered: str) -> str:
    return registered.split(",")[0].strip()


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose commands are registered as "name, alias" and answer to either part"""

    def _aliases(self) -> dict[str, str]:
        aliases: dict[str, str] = {}
        for registered in self.commands:
            for part in registered.split(","):
                aliases.setdefault(part.strip(), registered)
        return aliases

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self._aliases().get(cmd_name, cmd_name))

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Report commands in workflow order; unknown ones keep registration order"""

        def position(registered: str) -> int:
            primary = _primary_name(registered)
            if primary in COMMAND_ORDER:
                return COMMAND_ORDER.index(primary)
            return len(COMMAND_ORDER)

        return sorted(self.commands, key=position)
