"""Configuration: .env parsing and the default directory permission mode."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from .constants import DEFAULT_PERMISSIONS, ENV_PERMISSIONS_KEY, RESOURCE_FORK_DIR
from .logger import logger

MAX_MODE = 0o7777


def _split_env_line(line: str) -> tuple[str, str] | None:
    trimmed = line.strip()
    if not trimmed or trimmed.startswith("#") or "=" not in trimmed:
        return None
    key, _, value = trimmed.partition("=")
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return key.strip(), value


def read_env_file(keys: list[str], env_file: Path | None = None) -> dict[str, str]:
    """Return the non-empty values of ``keys`` from a .env file.

    Defaults to ``.env`` in the working directory. Nothing is exported to
    os.environ. A missing or unreadable file yields an empty dict.
    """
    env_file = env_file or Path.cwd() / ".env"
    try:
        content = env_file.read_text()
    except OSError:
        return {}

    wanted = set(keys)
    pairs = (_split_env_line(line) for line in content.splitlines())
    return {key: value for key, value in filter(None, pairs) if key in wanted and value}


def parse_permissions(value: str) -> int:
    """Parse an octal mode string such as ``0764``, ``0o764`` or ``764``.

    Raises ValueError for anything that is not an octal mode in range.
    """
    text = value.strip().lower()
    if text.startswith("0o"):
        text = text[2:]
    mode = int(text, 8)
    if not 0 <= mode <= MAX_MODE:
        raise ValueError(f"permission mode out of range: {value!r}")
    return mode


def resolve_default_permissions() -> int:
    """Resolve the default mode: environment first, then .env, then the built-in constant."""
    raw = os.environ.get(ENV_PERMISSIONS_KEY) or read_env_file([ENV_PERMISSIONS_KEY]).get(ENV_PERMISSIONS_KEY)
    if not raw:
        return DEFAULT_PERMISSIONS
    try:
        return parse_permissions(raw)
    except ValueError:
        logger.warning("Invalid default permissions, using built-in mode", value=raw, mode=oct(DEFAULT_PERMISSIONS))
        return DEFAULT_PERMISSIONS


# Resolved once per process; later changes to the environment are ignored.
DEFAULT_MODE: int = resolve_default_permissions()


class FileOpsConfig(BaseModel):
    """Settings threaded through the directory-creating operations."""

    model_config = ConfigDict(frozen=True)

    permissions: int = DEFAULT_MODE
    resource_fork_dir: str = RESOURCE_FORK_DIR

    @field_validator("permissions")
    @classmethod
    def _check_mode(cls, value: int) -> int:
        if not 0 <= value <= MAX_MODE:
            raise ValueError(f"permission mode out of range: {oct(value)}")
        return value

    @classmethod
    def from_env(cls) -> FileOpsConfig:
        return cls(permissions=resolve_default_permissions())
