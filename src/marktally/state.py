# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from pathlib import Path
from typing import Optional

import typer
import yaml

from marktally.configuration import Configuration, load_configuration

_config_path: ContextVar[Optional[Path]] = ContextVar("config_path", default=None)


def set_config_path(value: Optional[Path]) -> None:
    _config_path.set(value)


def get_config_path() -> Optional[Path]:
    return _config_path.get()


def get_configuration() -> Configuration:
    try:
        return load_configuration(get_config_path())
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise typer.BadParameter(f"Could not load configuration: {e}", param_hint="--config")
