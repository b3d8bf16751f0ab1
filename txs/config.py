"""
txs.config

Pick the upstream node URL.

`NODE_URL` wins when set. Otherwise one of the `upstream_nodes` listed under
`[profile]` in `0L.toml` is chosen at random. Problems reading that file are
never raised: the local default URL is used instead.
"""
from __future__ import annotations

import logging
import os
import random
import tomllib
from pathlib import Path
from typing import List, Mapping, Optional, Protocol, Sequence

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

NODE_URL_ENV = "NODE_URL"
DEFAULT_TOML_PATH = "~/.0L/0L.toml"
DEFAULT_NODE_URL = "http://0.0.0.0:8080/"


class Chooser(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...


class TomlProfile(BaseModel):
    upstream_nodes: Optional[List[str]] = None


class NodeToml(BaseModel):
    profile: Optional[TomlProfile] = None

    def get_node_url(self, rng: Chooser) -> str:
        # TODO: probe the chosen node and skip it when it does not answer
        if self.profile is None or not self.profile.upstream_nodes:
            # an empty url here is unusable; kept as is until the intended fallback is settled
            return ""
        return rng.choice(self.profile.upstream_nodes)


def read_toml_file(path: str | Path) -> NodeToml:
    p = Path(path).expanduser()
    try:
        text = p.read_bytes().decode("utf-8")
    except (OSError, ValueError) as e:
        raise RuntimeError(f"Failed to read 0L.toml file at {p}") from e
    try:
        return NodeToml.model_validate(tomllib.loads(text))
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise RuntimeError(f"Unexpected content of 0L.toml at {p}") from e


class NodeConfig:
    def __init__(self, node_url: str):
        self.node_url = node_url

    def __repr__(self) -> str:
        return f"NodeConfig(node_url={self.node_url!r})"

    @classmethod
    def from_toml(
        cls,
        toml_path: str | Path,
        environ: Optional[Mapping[str, str]] = None,
        rng: Optional[Chooser] = None,
    ) -> "NodeConfig":
        env = os.environ if environ is None else environ
        node_url = env.get(NODE_URL_ENV)
        if node_url:
            logger.debug("node url taken from $%s", NODE_URL_ENV)
            return cls(node_url)

        try:
            toml = read_toml_file(toml_path)
        except RuntimeError as e:
            logger.debug("falling back to %s: %s", DEFAULT_NODE_URL, e)
            return cls(DEFAULT_NODE_URL)
        return cls(toml.get_node_url(rng or random))

    @classmethod
    def default(cls) -> "NodeConfig":
        return cls.from_toml(DEFAULT_TOML_PATH)
