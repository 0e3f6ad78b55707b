# SPDX-License-Identifier: MIT

from typing import Optional, Union

from marktally.model.item import ExtraValue, Item, new_item
from marktally.model.item_type import ItemType
from marktally.parse.markers import RE_BLOCK_FIELD
from marktally.parse.text import (
    coerce_value,
    dedupe,
    parse_number,
    split_tag_values,
    strip_leading_icons,
)
from marktally.time import get_period_count, iso_str_to_ms, normalize_date_str

BLOCK_TITLE_MAX_LENGTH = 20

CATEGORY_KEYS = ("分类", "类别", "category")
THEME_KEYS = ("主题", "theme")
TAG_KEYS = ("标签", "tag", "tags")
DATE_KEYS = ("日期", "date")
PERIOD_KEYS = ("周期", "period")
RATING_KEYS = ("评分", "rating")
ICON_KEYS = ("图标", "icon")
PINTU_KEYS = ("评图", "pintu")
CONTENT_KEYS = ("内容", "content")


def parse_block_content(
    source_path: str,
    lines: list[str],
    start_index: int,
    end_index: int,
    parent_folder: str,
    title_max_length: int = BLOCK_TITLE_MAX_LENGTH,
) -> Optional[Item]:
    """
    Parse the lines strictly between two block delimiters into a block Item.

    Leading `key:: value` lines (single or double, half or full width colon)
    form the header. The first line that is not a header field, or a
    `content::` field, starts the free text content; every later line is
    kept verbatim. An empty region yields None.
    """
    category_key: Optional[str] = None
    theme: Optional[str] = None
    date: Optional[str] = None
    period: Optional[str] = None
    rating: Optional[Union[int, float]] = None
    icon: Optional[str] = None
    pintu: Optional[str] = None
    tags: list[str] = []
    extra: dict[str, ExtraValue] = {}
    seen_field = False

    content_lines: list[str] = []
    content_started = False

    for raw_line in lines[start_index + 1 : end_index]:
        if content_started:
            content_lines.append(raw_line)
            continue

        line = raw_line.strip()
        if line == "":
            continue

        field_match = RE_BLOCK_FIELD.match(line)
        if field_match is None:
            content_started = True
            content_lines.append(raw_line)
            continue

        seen_field = True
        key = field_match.group(1).strip()
        value = field_match.group(2).strip()
        lower_key = key.lower()

        if lower_key in CATEGORY_KEYS:
            category_key = value
        elif lower_key in THEME_KEYS:
            theme = value or None
        elif lower_key in TAG_KEYS:
            tags.extend(split_tag_values(value))
        elif lower_key in DATE_KEYS:
            date = normalize_date_str(value) if value else None
        elif lower_key in PERIOD_KEYS:
            period = value or None
        elif lower_key in RATING_KEYS:
            rating = parse_number(value) or None
        elif lower_key in ICON_KEYS:
            icon = value or None
        elif lower_key in PINTU_KEYS:
            pintu = value or None
        elif lower_key in CONTENT_KEYS:
            content_started = True
            content_lines.append(field_match.group(2))
        else:
            extra[key] = coerce_value(value)

    content = "\n".join(content_lines).strip()
    if not seen_field and content == "":
        return None

    if content:
        title = content.splitlines()[0]
    elif tags:
        title = ", ".join(tags)
    else:
        title = theme or ""
    title = strip_leading_icons(title.strip()).strip()[:title_max_length]

    item = new_item(f"{source_path}#{start_index + 1}", ItemType.BLOCK, parent_folder)
    item["title"] = title
    item["content"] = content
    item["tags"] = dedupe(tags)
    item["category_key"] = category_key or parent_folder or ""
    item["theme"] = theme
    item["icon"] = icon
    item["period"] = period
    item["rating"] = rating
    item["pintu"] = pintu
    item["extra"] = extra

    item["date"] = date
    item["start_iso"] = date
    item["end_iso"] = date
    item["start_ms"] = iso_str_to_ms(date)
    item["end_ms"] = item["start_ms"]
    if date is not None:
        item["date_source"] = "block"
        item["date_ms"] = item["start_ms"]

    if period and date:
        item["period_count"] = get_period_count(period, date)

    return item
