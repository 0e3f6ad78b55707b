# SPDX-License-Identifier: MIT

import re

from marktally.model.item import Priority


class DateMarker:
    CREATED = "➕"
    SCHEDULED = "⏳"
    START = "🛫"
    DUE = "📅"
    DONE = "✅"
    CANCELLED = "❌"


DATE_MARKERS: tuple[str, ...] = (
    DateMarker.CREATED,
    DateMarker.SCHEDULED,
    DateMarker.START,
    DateMarker.DUE,
    DateMarker.DONE,
    DateMarker.CANCELLED,
)

RECURRENCE_MARKER = "🔁"

# Test order is the tie-break: the first glyph in this list found anywhere wins.
PRIORITY_GLYPHS: tuple[tuple[str, Priority], ...] = (
    ("🔺", "highest"),
    ("⏫", "high"),
    ("🔼", "medium"),
    ("⏽", "low"),
    ("⏬", "lowest"),
    ("🔽", "low"),
)

TASK_CATEGORY = "任务"


class TaskStatus:
    OPEN = "open"
    DONE = "done"
    CANCELLED = "cancelled"


DONE_MARKS = ("x", "X")
CANCELLED_MARKS = ("-",)

VARIATION_SELECTOR = "\ufe0f"

# Character class body approximating Unicode Extended_Pictographic,
# which the stdlib re module has no property escape for.
PICTOGRAPHIC = (
    "\u00a9\u00ae\u203c\u2049\u2122\u2139"
    "\u2194-\u2199\u21a9\u21aa"
    "\u231a\u231b\u2328\u23cf\u23e9-\u23f3\u23f8-\u23fa"
    "\u24c2\u25aa\u25ab\u25b6\u25c0\u25fb-\u25fe"
    "\u2600-\u27bf\u2934\u2935\u2b05-\u2b07\u2b1b\u2b1c\u2b50\u2b55"
    "\u3030\u303d\u3297\u3299"
    "\U0001f000-\U0001faff"
)

# glyphs with a meaning of their own, never taken as a task icon
TASK_GLYPHS = frozenset(
    (*DATE_MARKERS, *(glyph for glyph, _ in PRIORITY_GLYPHS), RECURRENCE_MARKER)
)

_RECURRENCE_STOP = (
    "".join(DATE_MARKERS) + "".join(glyph for glyph, _ in PRIORITY_GLYPHS) + "(（#"
)

RE_TASK_PREFIX = re.compile(r"^\s*[-*+]\s*\[(.)\]\s*")
RE_TAG = re.compile(r"(?<!\S)#([\w/\-]+)")
RE_INLINE_FIELD = re.compile(r"[(（]([^()（）:：]+?)::\s*([^()（）]*?)\s*[)）]")
RE_RECURRENCE = re.compile(
    re.escape(RECURRENCE_MARKER) + r"\s*([^\n" + re.escape(_RECURRENCE_STOP) + r"]*)"
)
RE_BLOCK_FIELD = re.compile(r"^([^:：]{1,20})[:：]{1,2}\s*(.*)$")
RE_LEADING_ICON = re.compile(f"^([{PICTOGRAPHIC}]{VARIATION_SELECTOR}?)")
RE_LEADING_ICONS = re.compile(f"^(?:[{PICTOGRAPHIC}]{VARIATION_SELECTOR}?\\s*)+")
RE_HEADING = re.compile(r"^(#{1,6})\s+(.*?)(?:\s+#+)?\s*$")
