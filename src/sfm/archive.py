"""Zip archiving and extraction."""

from __future__ import annotations

import importlib.util
import os
import zipfile

from .constants import RESOURCE_FORK_DIR
from .logger import logger
from .tree import StrPath, delete, make_directory
from .types import FileOpResult
from .walk import walk_pre_order

ARCHIVE_ERRORS = (OSError, zipfile.BadZipFile, zipfile.LargeZipFile)


def archive_supported() -> bool:
    """Whether deflate compression (zlib) is available to the zip codec."""
    return importlib.util.find_spec("zlib") is not None


def _error_result(operation: str, path: str, exc: Exception) -> FileOpResult:
    if isinstance(exc, OSError):
        return FileOpResult.from_os_error(operation, path, exc)
    return FileOpResult.fail(operation, path, "io-error", str(exc))


def _add_tree(zf: zipfile.ZipFile, root: str, archive_file: str) -> None:
    """Add everything below ``root`` with names relative to ``root``.

    ``archive_file`` is the resolved path of the archive being written; it is
    skipped when it lies inside ``root``.
    """

    def on_error(path: str, exc: OSError) -> None:
        raise exc

    for entry in walk_pre_order(root, on_error):
        if os.path.realpath(entry.path) == archive_file:
            continue
        arcname = os.path.relpath(entry.path, root).replace(os.sep, "/")
        if entry.is_dir():
            zf.writestr(zipfile.ZipInfo(arcname + "/"), b"")
        elif entry.is_file():
            zf.write(entry.path, arcname)


def zip_path(source: StrPath, destination: StrPath) -> FileOpResult:
    """Archive a file or the contents of a directory into ``destination``.

    A directory's entries are stored relative to the directory itself, so the
    archive has no enclosing folder. A single file is stored under its base
    name. An existing ``destination`` is overwritten. A failure partway
    through leaves a partial archive behind.
    """
    source = os.fspath(source)
    destination = os.fspath(destination)

    if not archive_supported():
        logger.warning("Zip support unavailable", path=source)
        return FileOpResult.fail("zip", source, "missing-capability", "zlib is not available")
    if not os.path.exists(source):
        logger.warning("Zip source missing", path=source)
        return FileOpResult.fail("zip", source, "not-found", "source does not exist")

    root = os.path.realpath(source)
    try:
        with zipfile.ZipFile(destination, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            if os.path.isdir(root):
                _add_tree(zf, root, os.path.realpath(destination))
            elif os.path.isfile(root):
                zf.write(root, os.path.basename(root))
    except ARCHIVE_ERRORS as exc:
        logger.warning("Zip failed", path=source, destination=destination, error=str(exc))
        return _error_result("zip", source, exc)

    logger.info("Archive created", path=source, destination=destination)
    return FileOpResult.ok("zip", source)


def unzip(
    source: StrPath,
    destination: StrPath,
    overwrite: bool = False,
    permissions: int | None = None,
    resource_fork_dir: str = RESOURCE_FORK_DIR,
) -> FileOpResult:
    """Extract ``source`` into ``destination``.

    A missing destination is created. With ``overwrite`` an existing
    destination is deleted and recreated first; otherwise the archive is
    merged into it, replacing files with the same relative path. A top-level
    resource fork directory left by macOS archivers is removed afterwards.
    """
    source = os.fspath(source)
    destination = os.fspath(destination)

    if not archive_supported():
        logger.warning("Zip support unavailable", path=source)
        return FileOpResult.fail("unzip", source, "missing-capability", "zlib is not available")
    if not os.path.exists(source):
        logger.warning("Archive missing", path=source)
        return FileOpResult.fail("unzip", source, "not-found", "archive does not exist")

    try:
        with zipfile.ZipFile(source) as zf:
            if os.path.isdir(destination) and overwrite:
                cleared = delete(destination)
                if not cleared:
                    return FileOpResult.from_errors("unzip", source, cleared.errors)

            created = make_directory(destination, permissions)
            if not created:
                return FileOpResult.from_errors("unzip", source, created.errors)

            zf.extractall(destination)
    except ARCHIVE_ERRORS as exc:
        logger.warning("Unzip failed", path=source, destination=destination, error=str(exc))
        return _error_result("unzip", source, exc)

    resource_fork = os.path.join(destination, resource_fork_dir)
    if os.path.lexists(resource_fork):
        cleaned = delete(resource_fork)
        if not cleaned:
            logger.warning("Resource fork cleanup failed", path=resource_fork, kind=cleaned.kind)

    logger.info("Archive extracted", path=source, destination=destination)
    return FileOpResult.ok("unzip", source)
