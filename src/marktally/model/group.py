# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from marktally.model.item import Item


class GroupNode(TypedDict):
    field: str
    key: str
    children: Optional[list["GroupNode"]]
    items: Optional[list[Item]]


class TableMatrix(TypedDict):
    matrix: dict[str, dict[str, list[Item]]]
    sorted_rows: list[str]
    sorted_cols: list[str]
