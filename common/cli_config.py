"""
common.cli_config

Load, query and save the CLI profile config (`.0L/config.yaml`).

The older `config.yml` name is still read, and is removed the next time the
config is saved.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml

from common.config_location import Locator, default_locator
from common.errors import (
    CliError,
    ConfigEncodingError,
    ConfigNotFoundError,
    ProfileLoadError,
    ProfileNotFoundError,
    UnexpectedError,
)
from common.settings import (
    DEFAULT_PROFILE,
    CliConfig,
    ConfigSearchMode,
    ProfileConfig,
    from_yaml,
    to_yaml,
)
from common.utils import create_dir_if_not_exist, read_from_file, write_to_user_only_file

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.yaml"
LEGACY_CONFIG_FILE = "config.yml"


def _folder(mode: ConfigSearchMode, locator: Optional[Locator]) -> Path:
    return (locator or default_locator)(mode)


def _read_config(path: Path) -> CliConfig:
    logger.debug("loading config from %s", path)
    try:
        text = read_from_file(path).decode("utf-8")
    except UnicodeDecodeError as e:
        raise ConfigEncodingError(f"{path} is not valid UTF-8") from e
    return from_yaml(text, CliConfig, source=str(path))


def config_exists(mode: ConfigSearchMode, locator: Optional[Locator] = None) -> bool:
    try:
        folder = _folder(mode, locator)
    except CliError:
        return False
    return (folder / CONFIG_FILE).exists() or (folder / LEGACY_CONFIG_FILE).exists()


def load(mode: ConfigSearchMode, locator: Optional[Locator] = None) -> CliConfig:
    """Load the config from the folder `mode` resolves to."""
    folder = _folder(mode, locator)

    config_file = folder / CONFIG_FILE
    legacy_config_file = folder / LEGACY_CONFIG_FILE
    if config_file.exists():
        return _read_config(config_file)
    if legacy_config_file.exists():
        return _read_config(legacy_config_file)
    raise ConfigNotFoundError(str(config_file))


def load_profile(
    profile: Optional[str],
    mode: ConfigSearchMode,
    locator: Optional[Locator] = None,
) -> Optional[ProfileConfig]:
    """
    Return the named profile, or the `default` one when no name is given.

    A missing named profile is an error; a missing default profile is None.
    """
    try:
        config = load(mode, locator)
    except ConfigNotFoundError as e:
        raise ProfileLoadError(
            f"Unable to find config {e.path}, have you run `libra-config init`?"
        ) from e

    if profile is None:
        return config.remove_profile(DEFAULT_PROFILE)

    account_profile = config.remove_profile(profile)
    if account_profile is None:
        raise ProfileNotFoundError(profile)
    return account_profile


def save(config: CliConfig, locator: Optional[Locator] = None) -> None:
    """Save the config to ./.0L/config.yaml, readable by its owner only."""
    folder = _folder(ConfigSearchMode.CURRENT_DIR, locator)
    create_dir_if_not_exist(folder)

    try:
        config_text = to_yaml(config)
    except (yaml.YAMLError, ValueError, TypeError) as e:
        raise UnexpectedError(f"Failed to serialize config {e}") from e
    write_to_user_only_file(folder / CONFIG_FILE, CONFIG_FILE, config_text.encode("utf-8"))

    legacy_config_file = folder / LEGACY_CONFIG_FILE
    if legacy_config_file.exists():
        logger.warning("Removing legacy config file %s", LEGACY_CONFIG_FILE)
        try:
            legacy_config_file.unlink()
        except OSError:
            pass
