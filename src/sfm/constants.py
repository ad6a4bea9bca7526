"""File manager constants."""

from __future__ import annotations

# Less permissive than the usual 0o777 default for new directories.
DEFAULT_PERMISSIONS = 0o764
ENV_PERMISSIONS_KEY = "SFM_DEFAULT_PERMISSIONS"
RESOURCE_FORK_DIR = "__MACOSX"
