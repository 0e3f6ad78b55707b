# SPDX-License-Identifier: MIT

import logging
from typing import Optional, cast

from marktally.model.item import Item, Priority, new_item
from marktally.model.item_type import ItemType
from marktally.parse.markers import (
    CANCELLED_MARKS,
    DONE_MARKS,
    PRIORITY_GLYPHS,
    RE_RECURRENCE,
    RE_TASK_PREFIX,
    TASK_CATEGORY,
    TASK_GLYPHS,
    VARIATION_SELECTOR,
    DateMarker,
    TaskStatus,
)
from marktally.parse.text import (
    clean_task_text,
    coerce_value,
    dedupe,
    find_hashtags,
    leading_icon,
    parse_number,
    scan_inline_fields,
    split_tag_values,
    strip_leading_icons,
)
from marktally.time import extract_date, get_period_count, iso_str_to_ms, normalize_date_str

logger = logging.getLogger(__name__)

TAG_KEYS = ("主题", "标签", "tag", "tags", "theme")
START_TIME_KEYS = ("时间", "time", "start")
END_TIME_KEYS = ("结束", "end")
DURATION_KEYS = ("时长", "duration")
RATING_KEYS = ("评分", "rating")
PERIOD_KEYS = ("周期", "period")
PINTU_KEYS = ("评图", "pintu")
DATE_KEYS = ("日期", "date")
ICON_KEYS = ("图标", "icon")
PRIORITY_KEYS = ("优先级", "priority")

PRIORITY_LEVELS = frozenset(priority for _, priority in PRIORITY_GLYPHS)


def task_status(mark: str) -> str:
    if mark in DONE_MARKS:
        return TaskStatus.DONE
    if mark in CANCELLED_MARKS:
        return TaskStatus.CANCELLED
    return TaskStatus.OPEN


def pick_priority(line: str) -> Optional[Priority]:
    for glyph, priority in PRIORITY_GLYPHS:
        if glyph in line:
            return priority
    return None


def parse_task_line(
    source_path: str, raw_line: str, line_number: int, parent_folder: str
) -> Optional[Item]:
    """
    Parse one markdown checkbox line into a task Item.

    Returns None when the line is not a checkbox line.
    """
    prefix_match = RE_TASK_PREFIX.match(raw_line)
    if prefix_match is None:
        return None

    item = new_item(f"{source_path}#{line_number}", ItemType.TASK, parent_folder)
    item["content"] = raw_line.strip()

    status = task_status(prefix_match.group(1))
    item["category_key"] = f"{TASK_CATEGORY}/{status}"

    tags = find_hashtags(raw_line)

    recurrence_match = RE_RECURRENCE.search(raw_line)
    if recurrence_match and recurrence_match.group(1).strip():
        item["recurrence"] = recurrence_match.group(1).strip()

    inline_date: Optional[str] = None
    inline_icon: Optional[str] = None
    inline_priority: Optional[Priority] = None
    for key, value in scan_inline_fields(raw_line):
        lower_key = key.lower()
        if lower_key in TAG_KEYS:
            tags.extend(split_tag_values(value))
        elif lower_key in START_TIME_KEYS:
            item["start_time"] = value
        elif lower_key in END_TIME_KEYS:
            item["end_time"] = value
        elif lower_key in DURATION_KEYS:
            item["duration"] = parse_number(value) or None
        elif lower_key in RATING_KEYS:
            item["rating"] = parse_number(value)
        elif lower_key in PERIOD_KEYS:
            item["period"] = value
        elif lower_key in PINTU_KEYS:
            item["pintu"] = value
        elif lower_key in DATE_KEYS:
            inline_date = normalize_date_str(value) if value else None
        elif lower_key in ICON_KEYS:
            inline_icon = value or None
        elif lower_key in PRIORITY_KEYS:
            if value.lower() in PRIORITY_LEVELS:
                inline_priority = cast(Priority, value.lower())
            else:
                logger.warning("Ignoring unknown priority %r on %s", value, item["id"])
        else:
            item["extra"][key] = coerce_value(value)
    item["tags"] = dedupe(tags)

    after_prefix = raw_line[prefix_match.end() :].strip()
    title_source = after_prefix
    icon = leading_icon(after_prefix)
    if icon is not None and icon.rstrip(VARIATION_SELECTOR) not in TASK_GLYPHS:
        item["icon"] = icon
        title_source = strip_leading_icons(after_prefix)
    if inline_icon is not None:
        item["icon"] = inline_icon
    item["title"] = clean_task_text(title_source)
    item["priority"] = inline_priority or pick_priority(raw_line)

    created_date = extract_date(raw_line, DateMarker.CREATED)
    scheduled_date = extract_date(raw_line, DateMarker.SCHEDULED)
    start_date = extract_date(raw_line, DateMarker.START)
    due_date = extract_date(raw_line, DateMarker.DUE)
    done_date = extract_date(raw_line, DateMarker.DONE)
    cancelled_date = extract_date(raw_line, DateMarker.CANCELLED)

    item["created_date"] = created_date
    item["scheduled_date"] = scheduled_date
    item["start_date"] = start_date
    item["due_date"] = due_date
    item["done_date"] = done_date
    item["cancelled_date"] = cancelled_date

    item["start_iso"] = start_date or scheduled_date or due_date or created_date
    item["end_iso"] = done_date or cancelled_date or due_date
    if item["start_iso"] is None and status == TaskStatus.OPEN:
        item["start_iso"] = item["date"] = (
            due_date or scheduled_date or start_date or created_date
        )
    if item["end_iso"] is None:
        item["end_iso"] = item["start_iso"]

    # an explicit inline date names the primary date
    if inline_date is not None:
        item["date"] = inline_date
        item["date_source"] = "inline"
        if item["start_iso"] is None:
            item["start_iso"] = item["end_iso"] = inline_date

    item["start_ms"] = iso_str_to_ms(item["start_iso"])
    item["end_ms"] = iso_str_to_ms(item["end_iso"])

    normalize_task_date(item)
    if item["period"] and item["date"]:
        item["period_count"] = get_period_count(item["period"], item["date"])

    return item


def normalize_task_date(item: Item) -> None:
    """Fill the primary `date` of a freshly built task from its date roles."""
    if item["date"] is not None:
        item["date_ms"] = iso_str_to_ms(item["date"])
        return

    candidates = (
        ("done", item["done_date"]),
        ("due", item["due_date"]),
        ("scheduled", item["scheduled_date"]),
        ("start", item["start_date"] or item["start_iso"]),
        ("created", item["created_date"]),
        ("end", item["end_iso"]),
    )
    for source, iso in candidates:
        if iso:
            item["date"] = iso
            item["date_source"] = source
            item["date_ms"] = iso_str_to_ms(iso)
            return
