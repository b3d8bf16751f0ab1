"""
common.errors

Error types raised by the CLI config layer.
"""
from __future__ import annotations


class CliError(Exception):
    pass


class ConfigNotFoundError(CliError):
    def __init__(self, path: str):
        super().__init__(f"Unable to find config {path}")
        self.path = path


class ConfigEncodingError(CliError):
    pass


class ConfigParseError(CliError):
    pass


class UnexpectedError(CliError):
    pass


class CliIOError(CliError):
    pass


class ProfileLoadError(CliError):
    pass


class ProfileNotFoundError(CliError):
    def __init__(self, profile: str):
        super().__init__(f"Profile {profile} not found")
        self.profile = profile
