"""Recursive file manager: zip, unzip, delete, copy and directory creation."""

from __future__ import annotations

from .archive import archive_supported, unzip, zip_path
from .config import DEFAULT_MODE, FileOpsConfig, parse_permissions, read_env_file
from .constants import DEFAULT_PERMISSIONS, ENV_PERMISSIONS_KEY, RESOURCE_FORK_DIR
from .file_ops import FileOps
from .logger import setup_logging
from .tree import copy, delete, make_directory
from .types import FailureKind, FileOpError, FileOpResult

__all__ = [
    # archive
    "archive_supported",
    "unzip",
    "zip_path",
    # config
    "DEFAULT_MODE",
    "FileOpsConfig",
    "parse_permissions",
    "read_env_file",
    # constants
    "DEFAULT_PERMISSIONS",
    "ENV_PERMISSIONS_KEY",
    "RESOURCE_FORK_DIR",
    # file_ops
    "FileOps",
    # logger
    "setup_logging",
    # tree
    "copy",
    "delete",
    "make_directory",
    # types
    "FailureKind",
    "FileOpError",
    "FileOpResult",
]
