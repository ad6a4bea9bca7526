"""FileOps: the five file manager operations bound to one configuration."""

from __future__ import annotations

from collections.abc import Iterable

from .archive import unzip, zip_path
from .config import FileOpsConfig
from .tree import StrPath, copy, delete, make_directory
from .types import FileOpResult


class FileOps:
    """Archive, extract, delete, copy and create paths.

    Every call returns a FileOpResult that is truthy on success. The
    configured permission mode is used for any directory the operations
    create on their own.
    """

    def __init__(self, config: FileOpsConfig | None = None) -> None:
        self.config = config or FileOpsConfig()

    def zip(self, source: StrPath, destination: StrPath) -> FileOpResult:
        return zip_path(source, destination)

    def unzip(self, source: StrPath, destination: StrPath, overwrite: bool = False) -> FileOpResult:
        return unzip(
            source,
            destination,
            overwrite=overwrite,
            permissions=self.config.permissions,
            resource_fork_dir=self.config.resource_fork_dir,
        )

    def delete(self, source: StrPath) -> FileOpResult:
        return delete(source)

    def copy(self, source: StrPath, destination: StrPath, excludes: Iterable[str] = ()) -> FileOpResult:
        return copy(source, destination, excludes, permissions=self.config.permissions)

    def make_directory(self, path: StrPath, permissions: int | None = None) -> FileOpResult:
        """Create ``path``; ``permissions`` overrides the configured mode for this call."""
        mode = self.config.permissions if permissions is None else permissions
        return make_directory(path, mode)
