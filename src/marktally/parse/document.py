# SPDX-License-Identifier: MIT

import logging
from pathlib import PurePath
from typing import Optional

from marktally.model.item import Item
from marktally.parse.block import BLOCK_TITLE_MAX_LENGTH, parse_block_content
from marktally.parse.markers import RE_HEADING
from marktally.parse.task import parse_task_line
from marktally.parse.text import dedupe, find_hashtags

logger = logging.getLogger(__name__)

BLOCK_START_MARKER = "<!-- start -->"
BLOCK_END_MARKER = "<!-- end -->"


def find_block_end(lines: list[str], start_index: int, end_marker: str) -> Optional[int]:
    for index in range(start_index + 1, len(lines)):
        if lines[index].strip() == end_marker:
            return index
    return None


def scan_document(
    source_path: str,
    text: str,
    parent_folder: str,
    block_start: str = BLOCK_START_MARKER,
    block_end: str = BLOCK_END_MARKER,
    block_title_max_length: int = BLOCK_TITLE_MAX_LENGTH,
) -> list[Item]:
    """
    Extract every task and block item from the text of one document.

    Items inherit the hashtags of the heading they sit under and record that
    heading (without its hashtags) as `header`.
    """
    lines = text.splitlines()
    filename = PurePath(source_path).stem
    items: list[Item] = []

    current_header: Optional[str] = None
    section_tags: list[str] = []

    index = 0
    while index < len(lines):
        line = lines[index]

        heading_match = RE_HEADING.match(line)
        if heading_match:
            heading_text = heading_match.group(2)
            section_tags = find_hashtags(heading_text)
            for tag in section_tags:
                heading_text = heading_text.replace(f"#{tag}", "")
            current_header = " ".join(heading_text.split()) or None
            index += 1
            continue

        if line.strip() == block_start:
            end_index = find_block_end(lines, index, block_end)
            if end_index is not None:
                block = parse_block_content(
                    source_path,
                    lines,
                    index,
                    end_index,
                    parent_folder,
                    title_max_length=block_title_max_length,
                )
                if block is not None:
                    items.append(_with_section(block, section_tags, current_header, filename))
                index = end_index + 1
                continue
            logger.debug("Unclosed block at %s:%d", source_path, index + 1)

        task = parse_task_line(source_path, line, index + 1, parent_folder)
        if task is not None:
            items.append(_with_section(task, section_tags, current_header, filename))
        index += 1

    logger.debug("Scanned %d items from %s", len(items), source_path)
    return items


def _with_section(
    item: Item, section_tags: list[str], header: Optional[str], filename: str
) -> Item:
    section_item = item.copy()
    section_item["tags"] = dedupe([*section_tags, *item["tags"]])
    section_item["header"] = header
    section_item["filename"] = filename
    return section_item
