"""Iterative depth-first directory traversals.

Symlinked directories are yielded but never descended into. Siblings are
visited in name order so archive layouts and copy order are reproducible.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator

OnError = Callable[[str, OSError], None]


def _children(path: str, on_error: OnError | None) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(path) as it:
            return sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        if on_error is not None:
            on_error(path, exc)
        return []


def _descend(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def walk_pre_order(root: str, on_error: OnError | None = None) -> Iterator[os.DirEntry[str]]:
    """Yield every entry below ``root``, each directory before its contents."""
    stack = list(reversed(_children(root, on_error)))
    while stack:
        entry = stack.pop()
        yield entry
        if _descend(entry):
            stack.extend(reversed(_children(entry.path, on_error)))


def walk_post_order(root: str, on_error: OnError | None = None) -> Iterator[os.DirEntry[str]]:
    """Yield every entry below ``root``, each directory after its contents."""
    # (entry, expanded) pairs; a directory is yielded on its second visit.
    stack: list[tuple[os.DirEntry[str], bool]] = [(e, False) for e in reversed(_children(root, on_error))]
    while stack:
        entry, expanded = stack.pop()
        if expanded or not _descend(entry):
            yield entry
            continue
        stack.append((entry, True))
        stack.extend((e, False) for e in reversed(_children(entry.path, on_error)))
