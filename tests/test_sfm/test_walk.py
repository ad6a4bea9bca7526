"""Tests for the depth-first traversals."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sfm.walk import walk_post_order, walk_pre_order

from .conftest import requires_symlinks

if TYPE_CHECKING:
    from pathlib import Path


def _rel(root: Path, paths: list[str]) -> list[str]:
    return [p[len(str(root)) + 1 :].replace("\\", "/") for p in paths]


class TestWalk:
    def test_pre_order_visits_parent_before_children(self, sample_tree: Path) -> None:
        order = _rel(sample_tree, [e.path for e in walk_pre_order(str(sample_tree))])
        assert order == [
            "assets",
            "assets/img",
            "assets/img/logo.svg",
            "assets/style.css",
            "empty",
            "node_modules",
            "node_modules/dep",
            "node_modules/dep/index.js",
            "plugin.php",
            "readme.txt",
        ]

    def test_post_order_visits_children_before_parent(self, sample_tree: Path) -> None:
        order = _rel(sample_tree, [e.path for e in walk_post_order(str(sample_tree))])
        assert order == [
            "assets/img/logo.svg",
            "assets/img",
            "assets/style.css",
            "assets",
            "empty",
            "node_modules/dep/index.js",
            "node_modules/dep",
            "node_modules",
            "plugin.php",
            "readme.txt",
        ]

    def test_unreadable_root_reported(self, tmp_path: Path) -> None:
        seen: list[str] = []
        entries = list(walk_pre_order(str(tmp_path / "missing"), lambda path, exc: seen.append(path)))
        assert entries == []
        assert seen == [str(tmp_path / "missing")]

    @requires_symlinks
    def test_symlinked_directory_not_descended(self, sample_tree: Path, tmp_path: Path) -> None:
        (sample_tree / "empty" / "loop").symlink_to(sample_tree, target_is_directory=True)
        paths = [e.path for e in walk_pre_order(str(sample_tree))]
        assert str(sample_tree / "empty" / "loop") in paths
        assert not any("loop/" in p.replace("\\", "/") for p in paths)
