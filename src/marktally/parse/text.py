# SPDX-License-Identifier: MIT

import math
import re
from typing import Iterable, Iterator, Optional, Union

from marktally.model.item import ExtraValue
from marktally.parse.markers import (
    DATE_MARKERS,
    PRIORITY_GLYPHS,
    RE_INLINE_FIELD,
    RE_LEADING_ICON,
    RE_LEADING_ICONS,
    RE_RECURRENCE,
    RE_TAG,
)
from marktally.time import DATE_TOKEN

_TAG_SEPARATOR_RE = re.compile(r"[,，]")
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_DATED_MARKER_RE = re.compile(
    "(?:" + "|".join(re.escape(marker) for marker in DATE_MARKERS) + ")"
    + f"\\s*(?:{DATE_TOKEN})?"
)
_PRIORITY_RE = re.compile("|".join(re.escape(glyph) for glyph, _ in PRIORITY_GLYPHS))
_WHITESPACE_RE = re.compile(r"\s+")


def parse_number(value: str) -> Optional[Union[int, float]]:
    text = value.strip()
    if not _NUMBER_RE.match(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    if number.is_integer() and "." not in text and "e" not in text.lower():
        return int(text)
    return number


def coerce_value(value: str) -> ExtraValue:
    """
    Coerce a raw inline value: a number when it parses as one, a boolean for
    exactly true/false (any case), otherwise the stripped string.
    """
    text = value.strip()
    number = parse_number(text)
    if number is not None:
        return number
    if text.lower() in ("true", "false"):
        return text.lower() == "true"
    return text


def scan_inline_fields(line: str) -> Iterator[tuple[str, str]]:
    """Yield every (key, value) pair written as `(key:: value)` in `line`."""
    for match in RE_INLINE_FIELD.finditer(line):
        yield match.group(1).strip(), match.group(2).strip()


def split_tag_values(value: str) -> list[str]:
    """Split a comma (half or full width) list of tags, dropping '#' and blanks."""
    tags = []
    for part in _TAG_SEPARATOR_RE.split(value):
        tag = part.strip()
        if tag.startswith("#"):
            tag = tag[1:]
        if tag:
            tags.append(tag)
    return tags


def find_hashtags(line: str) -> list[str]:
    return RE_TAG.findall(line)


def dedupe(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


def leading_icon(text: str) -> Optional[str]:
    match = RE_LEADING_ICON.match(text)
    if match is None:
        return None
    return match.group(1)


def strip_leading_icons(text: str) -> str:
    return RE_LEADING_ICONS.sub("", text, count=1)


def clean_task_text(text: str) -> str:
    """
    Remove the markers a task line carries besides its title: inline fields,
    hashtags, recurrence text, date markers with their dates and priority glyphs.
    """
    cleaned = RE_INLINE_FIELD.sub(" ", text)
    cleaned = RE_RECURRENCE.sub(" ", cleaned)
    cleaned = _DATED_MARKER_RE.sub(" ", cleaned)
    cleaned = RE_TAG.sub(" ", cleaned)
    cleaned = _PRIORITY_RE.sub(" ", cleaned)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def to_text(value: object) -> str:
    """Stringify a field value the way saved rules compare against it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple, set)):
        return ",".join(to_text(element) for element in value)
    return str(value)
