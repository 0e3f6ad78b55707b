# SPDX-License-Identifier: MIT

import re
from typing import Any, Optional, Union

from marktally.model.item import FIELD_ALIASES, ITEM_FIELDS, Item
from marktally.time import iso_str_to_ms

EXTRA_PREFIX = "extra."

_DATE_LIKE_RE = re.compile(r"^\d{4}[-/]\d{1,2}[-/]\d{1,2}")
_NUMERIC_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def read_field(item: Item, field: str) -> Any:
    """
    Read a field by name: first-class keys, their camelCase spellings and
    `extra.<key>` lookups. Names the item lacks read as None.
    """
    if field.startswith(EXTRA_PREFIX):
        return (item.get("extra") or {}).get(field[len(EXTRA_PREFIX) :])
    return item.get(FIELD_ALIASES.get(field, field))


def collect_fields(items: list[Item]) -> list[str]:
    fields = set(ITEM_FIELDS)
    fields.discard("extra")
    for item in items:
        fields.update(f"{EXTRA_PREFIX}{key}" for key in item.get("extra") or {})
    return sorted(fields)


def coerce_for_compare(value: Any) -> Optional[Union[float, str]]:
    """
    Numbers stay numbers, ISO-like dates become epoch milliseconds, numeric
    strings become floats and anything else stays a string.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return float(value)

    text = str(value).strip()
    if _DATE_LIKE_RE.match(text):
        milliseconds = iso_str_to_ms(text)
        if milliseconds is not None:
            return float(milliseconds)
    if _NUMERIC_RE.match(text):
        return float(text)
    return text
