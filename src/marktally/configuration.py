# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from marktally.model.rule import FilterRule, SortRule
from marktally.model.statistics import CategoryConfig
from marktally.parse.block import BLOCK_TITLE_MAX_LENGTH
from marktally.parse.document import BLOCK_END_MARKER, BLOCK_START_MARKER

logger = logging.getLogger(__name__)

APP_NAME = "marktally"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class ViewConfig(TypedDict):
    filters: list[FilterRule]
    sort: list[SortRule]
    group_by: NotRequired[list[str]]


class Configuration(TypedDict):
    block_start_marker: str
    block_end_marker: str
    block_title_max_length: int
    categories: list[CategoryConfig]
    themes: Optional[list[str]]
    views: dict[str, ViewConfig]


DEFAULT_CONFIGURATION: Configuration = {
    "block_start_marker": BLOCK_START_MARKER,
    "block_end_marker": BLOCK_END_MARKER,
    "block_title_max_length": BLOCK_TITLE_MAX_LENGTH,
    "categories": [],
    "themes": None,
    "views": {},
}


def load_configuration(path: Optional[Path] = None) -> Configuration:
    """
    Read the YAML configuration and fill in defaults for missing keys.

    A missing file yields the defaults; an unreadable or malformed file is an
    error for the caller to report.
    """
    config_path = path if path is not None else APP_CONFIG_PATH
    config = deepcopy(DEFAULT_CONFIGURATION)

    if not config_path.is_file():
        logger.debug("No configuration at %s, using defaults", config_path)
        return config

    loaded = load(config_path.read_text(encoding="utf-8"), Loader=Loader)
    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ValueError(f"Configuration at {config_path} must be a mapping")

    for key, value in loaded.items():
        if key in DEFAULT_CONFIGURATION:
            config[key] = value  # type: ignore[literal-required]
        else:
            logger.warning("Ignoring unknown configuration key %r", key)

    return config
