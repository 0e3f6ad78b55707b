# SPDX-License-Identifier: MIT

from typing import Optional

from marktally.model.item import Item
from marktally.parse.markers import PRIORITY_GLYPHS
from marktally.parse.text import to_text
from marktally.query.field import read_field

_PRIORITY_STYLES = {
    "highest": "bold red",
    "high": "red",
    "medium": "yellow",
    "low": "green",
    "lowest": "dim",
}


def format_tags(tags: Optional[list[str]]) -> str:
    """Format a list of tags as a comma-separated string without brackets or quotes."""
    if tags is None or len(tags) == 0:
        return ""
    return ", ".join(f"#{tag}" for tag in tags)


def item_state(item: Item) -> str:
    category_key = item.get("category_key") or ""
    if category_key.endswith("/done"):
        return "X"
    elif category_key.endswith("/cancelled"):
        return "/"
    elif item.get("type") == "block":
        return "▪"
    return " "


def format_priority(priority: Optional[str]) -> str:
    if priority is None:
        return ""
    glyph = next((glyph for glyph, name in PRIORITY_GLYPHS if name == priority), "")
    style = _PRIORITY_STYLES.get(priority, "")
    return f"[{style}]{glyph} {priority}[/{style}]" if style else priority


def format_column(item: Item, column: str) -> str:
    if column == "state":
        return item_state(item)
    if column == "tags":
        return format_tags(item.get("tags"))
    if column == "priority":
        return format_priority(item.get("priority"))
    if column == "title":
        icon = item.get("icon")
        return f"{icon} {item.get('title') or ''}" if icon else item.get("title") or ""
    return to_text(read_field(item, column))
