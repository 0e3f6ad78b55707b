# SPDX-License-Identifier: MIT

import logging
from pathlib import Path

from marktally.configuration import Configuration
from marktally.model.item import Item
from marktally.parse.document import scan_document

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def find_markdown_files(paths: list[Path]) -> list[Path]:
    """Expand directories into their markdown files, recursively and in name order."""
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(p for p in path.rglob(f"*{MARKDOWN_SUFFIX}") if p.is_file()))
        elif path.is_file():
            files.append(path)
        else:
            logger.warning("Skipping missing path %s", path)
    return files


def load_items(paths: list[Path], config: Configuration) -> list[Item]:
    """
    Scan every markdown file under `paths` into items.

    A file that cannot be read is logged and skipped.
    """
    items: list[Item] = []
    for file in find_markdown_files(paths):
        try:
            text = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Could not read %s: %s", file, e)
            continue

        items.extend(
            scan_document(
                file.as_posix(),
                text,
                file.parent.name,
                block_start=config["block_start_marker"],
                block_end=config["block_end_marker"],
                block_title_max_length=config["block_title_max_length"],
            )
        )
    logger.info("Loaded %d items from %d paths", len(items), len(paths))
    return items
