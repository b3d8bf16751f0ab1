"""
common.utils

File helpers for the CLI config layer.
"""
from __future__ import annotations

import contextlib
import os
import stat
import tempfile
from pathlib import Path

from common.errors import CliIOError

USER_ONLY_MODE = stat.S_IRUSR | stat.S_IWUSR  # 0o600


def read_from_file(path: Path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise CliIOError(f"Unable to read file {path}: {e}") from e


def create_dir_if_not_exist(path: Path) -> None:
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CliIOError(f"Unable to create directory {path}: {e}") from e


def write_to_user_only_file(path: Path, name: str, data: bytes) -> None:
    """
    Write `data` to `path` so that only the owner can read or write it.

    The bytes go to a sibling temp file (created 0o600 by mkstemp) which then
    replaces the target, so a failed write never leaves a partial file behind.
    """
    path = Path(path)
    tmp = None
    try:
        fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
        tmp = None
    except OSError as e:
        raise CliIOError(f"Failed to write {name} to {path}: {e}") from e
    finally:
        if tmp is not None:
            with contextlib.suppress(OSError):
                os.unlink(tmp)
    _restrict_to_owner(path)


def _restrict_to_owner(path: Path) -> None:
    # the bytes are already in place; outside POSIX only the read-only flag maps onto chmod
    with contextlib.suppress(OSError):
        os.chmod(path, USER_ONLY_MODE)
