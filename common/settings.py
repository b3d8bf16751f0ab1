"""
common.settings

Data model of the CLI config files and the YAML codec shared by them.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from common.errors import ConfigParseError

DEFAULT_PROFILE = "default"


class ConfigSearchMode(str, Enum):
    CURRENT_DIR = "CurrentDir"
    CURRENT_DIR_AND_PARENTS = "CurrentDirAndParents"


class ConfigType(str, Enum):
    WORKSPACE = "Workspace"
    GLOBAL = "Global"


class Network(str, Enum):
    MAINNET = "Mainnet"
    TESTNET = "Testnet"
    DEVNET = "Devnet"
    LOCAL = "Local"
    CUSTOM = "Custom"


class ProfileConfig(BaseModel):
    # keys this model does not know about are kept so a save never drops them
    model_config = ConfigDict(extra="allow")

    network: Optional[Network] = None
    private_key: Optional[str] = None
    public_key: Optional[str] = None
    account: Optional[str] = None
    rest_url: Optional[str] = None
    faucet_url: Optional[str] = None


class CliConfig(BaseModel):
    profiles: Optional[Dict[str, ProfileConfig]] = None

    def remove_profile(self, profile: str) -> Optional[ProfileConfig]:
        if not self.profiles:
            return None
        return self.profiles.pop(profile, None)


class GlobalConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    config_type: Optional[ConfigType] = None
    default_prompt_response: Optional[str] = None

    def resolved_config_type(self) -> ConfigType:
        return self.config_type or ConfigType.WORKSPACE


M = TypeVar("M", bound=BaseModel)


def from_yaml(text: str, model: Type[M], source: str = "<string>") -> M:
    """
    Parse a YAML document into `model`. An empty document gives the model's defaults.
    """
    try:
        data: Any = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Unable to parse {source}: {e}") from e
    if data is None:
        data = {}
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(f"Configuration error in {source}: {e}") from e


def to_yaml(model: BaseModel) -> str:
    return yaml.safe_dump(
        model.model_dump(mode="json", exclude_none=True),
        sort_keys=False,
        default_flow_style=False,
    )
