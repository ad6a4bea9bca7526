"""Shared fixtures for file manager tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

requires_symlinks = pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="symlinks unavailable")


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create ``files`` (relative path -> content) below ``root``."""
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")
    return root


def read_tree(root: Path) -> dict[str, str]:
    """Map every regular file below ``root`` to its content."""
    return {
        p.relative_to(root).as_posix(): p.read_text(encoding="utf-8")
        for p in sorted(root.rglob("*"))
        if p.is_file() and not p.is_symlink()
    }


@pytest.fixture()
def sample_tree(tmp_path: Path) -> Path:
    """A small plugin-like directory with nested folders and an empty one."""
    root = write_tree(
        tmp_path / "plugin",
        {
            "plugin.php": "<?php // main",
            "readme.txt": "Read me",
            "assets/style.css": "body {}",
            "assets/img/logo.svg": "<svg/>",
            "node_modules/dep/index.js": "module.exports = 1",
        },
    )
    (root / "empty").mkdir()
    return root


@pytest.fixture()
def no_umask() -> Iterator[None]:
    """Clear the process umask so created modes can be asserted exactly."""
    old = os.umask(0)
    try:
        yield
    finally:
        os.umask(old)
