"""
common.config_location

Resolve the folder holding the CLI config for a given search mode.

Workspace configs live in a `.0L` folder under the working directory (or one
of its parents). A global config at `~/.0L/global_config.yaml` can switch every
lookup to the home folder instead.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from common.errors import CliError, ConfigEncodingError
from common.settings import ConfigSearchMode, ConfigType, GlobalConfig, from_yaml
from common.utils import read_from_file

logger = logging.getLogger(__name__)

CONFIG_FOLDER = ".0L"
GLOBAL_CONFIG_FILE = "global_config.yaml"

Locator = Callable[[ConfigSearchMode], Path]


def global_folder(home: Optional[Path] = None) -> Path:
    if home is None:
        try:
            home = Path.home()
        except RuntimeError as e:
            raise CliError("Unable to retrieve home directory") from e
    return Path(home) / CONFIG_FOLDER


def load_global_config(home: Optional[Path] = None) -> GlobalConfig:
    path = global_folder(home) / GLOBAL_CONFIG_FILE
    if not path.exists():
        return GlobalConfig()
    try:
        text = read_from_file(path).decode("utf-8")
    except UnicodeDecodeError as e:
        raise ConfigEncodingError(f"{path} is not valid UTF-8") from e
    return from_yaml(text, GlobalConfig, source=str(path))


def find_workspace_config(start: Path, mode: ConfigSearchMode) -> Path:
    start = Path(start)
    if mode == ConfigSearchMode.CURRENT_DIR:
        return start / CONFIG_FOLDER
    for folder in (start, *start.parents):
        candidate = folder / CONFIG_FOLDER
        if candidate.is_dir():
            return candidate
    return start / CONFIG_FOLDER


def get_config_location(
    global_config: GlobalConfig,
    mode: ConfigSearchMode,
    cwd: Optional[Path] = None,
    home: Optional[Path] = None,
) -> Path:
    if global_config.resolved_config_type() == ConfigType.GLOBAL:
        return global_folder(home)
    if cwd is None:
        try:
            cwd = Path.cwd()
        except OSError as e:
            raise CliError(f"Unable to get current directory: {e}") from e
    return find_workspace_config(cwd, mode)


def make_locator(cwd: Optional[Path] = None, home: Optional[Path] = None) -> Locator:
    """Build a locator pinned to the given working and home directories."""
    def locate(mode: ConfigSearchMode) -> Path:
        folder = get_config_location(load_global_config(home), mode, cwd=cwd, home=home)
        logger.debug("config folder for %s: %s", mode.value, folder)
        return folder
    return locate


def default_locator(mode: ConfigSearchMode) -> Path:
    return make_locator()(mode)
