"""Recursive delete, copy and directory creation."""

from __future__ import annotations

import os
import shutil
import stat
from collections.abc import Iterable

from .config import DEFAULT_MODE
from .logger import logger
from .types import FileOpError, FileOpResult, os_error
from .walk import walk_post_order, walk_pre_order

StrPath = str | os.PathLike[str]


def _strip_trailing_sep(path: str) -> str:
    """Drop trailing separators so "link/" names the link, not its target."""
    seps = os.sep + (os.altsep or "")
    stripped = path.rstrip(seps)
    if not stripped or stripped.endswith(":"):
        return path
    return stripped


def make_directory(path: StrPath, permissions: int | None = None) -> FileOpResult:
    """Create ``path`` and any missing parents.

    An existing path counts as success, whatever its type. The mode is
    subject to the process umask.
    """
    path = os.fspath(path)
    if os.path.lexists(path):
        return FileOpResult.ok("make_directory", path)

    mode = DEFAULT_MODE if permissions is None else permissions
    # Every created level gets the mode, not just the leaf.
    missing: list[str] = []
    head = os.path.abspath(path)
    while not os.path.lexists(head):
        missing.append(head)
        parent = os.path.dirname(head)
        if parent == head:
            break
        head = parent
    try:
        for directory in reversed(missing):
            os.mkdir(directory, mode)
    except OSError as exc:
        logger.warning("Directory creation failed", path=path, error=str(exc))
        return FileOpResult.from_os_error("make_directory", path, exc)

    logger.debug("Directory created", path=path, mode=oct(mode))
    return FileOpResult.ok("make_directory", path)


def delete(source: StrPath) -> FileOpResult:
    """Delete a file, a symlink, or a directory and everything below it.

    A missing path is already deleted. Directory contents are removed
    children first; a failing entry is recorded and the walk continues.
    """
    source = _strip_trailing_sep(os.fspath(source))
    if not os.path.lexists(source):
        return FileOpResult.ok("delete", source)

    if os.path.islink(source) or not os.path.isdir(source):
        try:
            os.unlink(source)
        except OSError as exc:
            logger.warning("Delete failed", path=source, error=str(exc))
            return FileOpResult.from_os_error("delete", source, exc)
        logger.debug("Deleted", path=source)
        return FileOpResult.ok("delete", source)

    errors: list[FileOpError] = []

    def on_error(path: str, exc: OSError) -> None:
        errors.append(os_error(path, exc))

    for entry in walk_post_order(source, on_error):
        try:
            if entry.is_dir(follow_symlinks=False):
                os.rmdir(entry.path)
            else:
                os.unlink(entry.path)
        except OSError as exc:
            errors.append(os_error(entry.path, exc))

    try:
        os.rmdir(source)
    except OSError as exc:
        errors.append(os_error(source, exc))

    result = FileOpResult.from_errors("delete", source, errors)
    if result:
        logger.debug("Deleted tree", path=source)
    else:
        logger.warning("Delete incomplete", path=source, failures=len(errors), kind=result.kind)
    return result


def _copy_entry(src: str, dest: str) -> None:
    """Copy one entry without recursing; directories only get created."""
    if os.path.islink(src):
        os.symlink(os.readlink(src), dest)
    elif not os.path.isdir(src):
        shutil.copyfile(src, dest)
        shutil.copystat(src, dest)
    elif not os.path.isdir(dest):
        os.makedirs(dest, mode=stat.S_IMODE(os.stat(src).st_mode))


def copy(
    source: StrPath,
    destination: StrPath,
    excludes: Iterable[str] = (),
    permissions: int | None = None,
) -> FileOpResult:
    """Copy a file, a symlink, or a directory tree.

    Entries whose base name is in ``excludes`` are skipped at every depth.
    Excluding ``source`` itself copies nothing and fails with kind
    ``excluded``. Symlinks are recreated, not followed. New directories take
    the mode of the directory they copy; ``permissions`` only applies to
    missing parents of ``destination``.
    """
    source = _strip_trailing_sep(os.fspath(source))
    destination = os.fspath(destination)
    excluded = frozenset(excludes)

    if os.path.basename(os.path.normpath(source)) in excluded:
        logger.debug("Copy skipped, source excluded", path=source)
        return FileOpResult.fail("copy", source, "excluded", "source name is excluded")

    if not os.path.lexists(source):
        logger.warning("Copy source missing", path=source)
        return FileOpResult.fail("copy", source, "not-found", "source does not exist")

    parent = os.path.dirname(os.path.abspath(destination))
    parent_result = make_directory(parent, permissions)
    if not parent_result:
        return FileOpResult.from_errors("copy", source, parent_result.errors)

    try:
        _copy_entry(source, destination)
    except OSError as exc:
        logger.warning("Copy failed", path=source, destination=destination, error=str(exc))
        return FileOpResult.from_os_error("copy", source, exc)

    if os.path.islink(source) or not os.path.isdir(source):
        logger.debug("Copied", path=source, destination=destination)
        return FileOpResult.ok("copy", source)

    errors: list[FileOpError] = []

    def on_error(path: str, exc: OSError) -> None:
        errors.append(os_error(path, exc))

    # Subtrees below an excluded or failed directory are pruned by prefix.
    pruned: list[str] = []
    for entry in walk_pre_order(source, on_error):
        if any(entry.path.startswith(prefix) for prefix in pruned):
            continue
        if entry.name in excluded:
            pruned.append(entry.path + os.sep)
            continue
        rel = os.path.relpath(entry.path, source)
        target = os.path.join(destination, rel)
        try:
            _copy_entry(entry.path, target)
        except OSError as exc:
            errors.append(os_error(entry.path, exc))
            pruned.append(entry.path + os.sep)

    result = FileOpResult.from_errors("copy", source, errors)
    if result:
        logger.debug("Copied tree", path=source, destination=destination)
    else:
        logger.warning("Copy incomplete", path=source, failures=len(errors), kind=result.kind)
    return result
