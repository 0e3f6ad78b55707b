# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.tree import Tree

from marktally.model.group import GroupNode
from marktally.service.grouping import ALL_KEY, count_leaf_items
from marktally.view.header import header
from marktally.view.util import format_column


def _add_nodes(parent: Tree, nodes: list[GroupNode]) -> None:
    for node in nodes:
        count = count_leaf_items([node])
        label = "all" if node["key"] == ALL_KEY else node["key"]
        branch = parent.add(
            f"[cyan]{node['field']}[/cyan] [bold]{label}[/bold] [dim]({count})[/dim]"
        )
        if node["children"] is not None:
            _add_nodes(branch, node["children"])
        for item in node["items"] or []:
            branch.add(f"{format_column(item, 'state')} {format_column(item, 'title')}")


def group_view(report_name: str, nodes: list[GroupNode], group_fields: list[str]) -> None:
    header(report_name, " > ".join(group_fields) if group_fields else None)

    tree = Tree(f"[dark_orange]{count_leaf_items(nodes)} items[/dark_orange]")
    _add_nodes(tree, nodes)

    console = Console()
    console.print(tree)
