"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json
import sys
from pathlib import Path

import pytest


@pytest.hookimpl(hookwrapper=True, tryfirst=True)
def pytest_sessionfinish():
    """Let pytest's recursive tmp-dir cleanup remove very deep test trees."""
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(max(limit, 10000))
    try:
        yield
    finally:
        sys.setrecursionlimit(limit)


@pytest.fixture
def walk_tree(tmp_path: Path) -> Path:
    """Directory tree for walk tests.

    Layout (8 entries with default options)::

        tree/
            a/
                b/
                    c.txt
                symlinks/
                    README.md -> <tmp>/outside/README.md
            minions.jpg
            package.json
    """
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "README.md").write_text("# readme\n")

    root = tmp_path / "tree"
    (root / "a" / "b").mkdir(parents=True)
    (root / "a" / "b" / "c.txt").write_text("c")
    (root / "a" / "symlinks").mkdir()
    (root / "a" / "symlinks" / "README.md").symlink_to(outside / "README.md")
    (root / "minions.jpg").write_bytes(b"\xff\xd8\xff")
    (root / "package.json").write_text(json.dumps({"name": "fixture"}))
    return root


@pytest.fixture
def linked_dir_tree(tmp_path: Path) -> Path:
    """Directory tree containing a symlink to a directory outside it.

    Layout::

        linked/
            local.txt
            shortcut -> <tmp>/target/
                            inner.txt
    """
    target = tmp_path / "target"
    target.mkdir()
    (target / "inner.txt").write_text("inner")

    root = tmp_path / "linked"
    root.mkdir()
    (root / "local.txt").write_text("local")
    (root / "shortcut").symlink_to(target, target_is_directory=True)
    return root


@pytest.fixture
def find_tree(tmp_path: Path) -> Path:
    """Directory tree for ancestor search tests.

    Layout::

        fixture/
            minions.jpg
            package.json        ({"name": "fixture", "version": "1.0.0"})
            a/
                package.json    ({"name": "nested"}, no version)
                b/
    """
    root = tmp_path / "fixture"
    (root / "a" / "b").mkdir(parents=True)
    (root / "minions.jpg").write_bytes(b"\xff\xd8\xff")
    (root / "package.json").write_text(json.dumps({"name": "fixture", "version": "1.0.0"}))
    (root / "a" / "package.json").write_text(json.dumps({"name": "nested"}))
    return root


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home / "pathscout"
