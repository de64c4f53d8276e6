"""Unit tests for the filesystem access layer."""

import os
from pathlib import Path

import pytest
from pathscout.core.filesystem import (
    DirectoryEntry,
    EntryInfo,
    join_path,
    list_directory,
    list_directory_async,
    lstat_entry,
    lstat_entry_async,
    normalize_path,
    resolve_path,
    resolve_symlink,
    resolve_symlink_async,
    split_path,
    stat_entry,
    stat_entry_async,
)


class TestPathHelpers:
    """Tests for the pure path helpers."""

    def test_normalize_path(self) -> None:
        """Redundant separators and up-level references are collapsed."""
        assert normalize_path("/a//b/../c/.") == os.path.normpath("/a/c")

    def test_resolve_path_relative(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Relative paths are resolved against the working directory."""
        monkeypatch.chdir(tmp_path)
        assert resolve_path("x/../y") == str(tmp_path / "y")

    def test_resolve_path_keeps_symlinks(self, walk_tree: Path) -> None:
        """resolve_path is lexical and does not follow links."""
        link = walk_tree / "a" / "symlinks" / "README.md"
        assert resolve_path(link) == str(link)

    def test_join_path(self) -> None:
        """Segments are joined with the platform separator."""
        assert join_path("/srv", "data", Path("x.txt")) == os.path.join("/srv", "data", "x.txt")

    def test_split_path(self) -> None:
        """split_path reports the parent and the filesystem root."""
        parts = split_path("/srv/data")

        assert parts.parent == "/srv"
        assert parts.root == os.sep

    def test_split_path_at_root(self) -> None:
        """The parent of the root is the root itself."""
        parts = split_path(os.sep)
        assert parts.parent == parts.root == os.sep


class TestStat:
    """Tests for stat_entry and lstat_entry."""

    def test_stat_file(self, walk_tree: Path) -> None:
        """Regular files report is_file."""
        assert stat_entry(str(walk_tree / "package.json")) == EntryInfo(True, False, False)

    def test_stat_directory(self, walk_tree: Path) -> None:
        """Directories report is_directory."""
        assert stat_entry(str(walk_tree)) == EntryInfo(False, True, False)

    def test_stat_follows_links(self, walk_tree: Path) -> None:
        """stat reports the target type of a link."""
        link = walk_tree / "a" / "symlinks" / "README.md"
        assert stat_entry(str(link)).is_file is True

    def test_lstat_does_not_follow(self, walk_tree: Path) -> None:
        """lstat reports the link itself."""
        link = walk_tree / "a" / "symlinks" / "README.md"
        assert lstat_entry(str(link)) == EntryInfo(False, False, True)

    def test_stat_missing(self, tmp_path: Path) -> None:
        """Missing paths raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            stat_entry(str(tmp_path / "missing"))


class TestListDirectory:
    """Tests for list_directory."""

    def test_lists_children(self, walk_tree: Path) -> None:
        """Immediate children are reported with listing types."""
        entries = {entry.name: entry for entry in list_directory(str(walk_tree))}

        assert set(entries) == {"a", "minions.jpg", "package.json"}
        assert entries["a"] == DirectoryEntry("a", False, True, False)
        assert entries["package.json"] == DirectoryEntry("package.json", True, False, False)

    def test_links_not_followed(self, linked_dir_tree: Path) -> None:
        """A link to a directory is reported as a link only."""
        entries = {entry.name: entry for entry in list_directory(str(linked_dir_tree))}
        assert entries["shortcut"] == DirectoryEntry("shortcut", False, False, True)

    def test_not_a_directory(self, walk_tree: Path) -> None:
        """Listing a file raises NotADirectoryError."""
        with pytest.raises(NotADirectoryError):
            list_directory(str(walk_tree / "package.json"))

    def test_entry_info(self) -> None:
        """DirectoryEntry.info drops the name."""
        entry = DirectoryEntry("x", True, False, False)
        assert entry.info == EntryInfo(True, False, False)


class TestResolveSymlink:
    """Tests for resolve_symlink."""

    def test_resolves_to_target(self, walk_tree: Path, tmp_path: Path) -> None:
        """The real path of the link target is returned."""
        link = walk_tree / "a" / "symlinks" / "README.md"
        assert resolve_symlink(str(link)) == os.path.realpath(tmp_path / "outside" / "README.md")


class TestAsyncVariants:
    """Tests for the suspending filesystem calls."""

    @pytest.mark.asyncio
    async def test_stat_entry_async(self, walk_tree: Path) -> None:
        """stat_entry_async matches stat_entry."""
        path = str(walk_tree / "a" / "symlinks" / "README.md")
        assert await stat_entry_async(path) == stat_entry(path)

    @pytest.mark.asyncio
    async def test_lstat_entry_async(self, walk_tree: Path) -> None:
        """lstat_entry_async matches lstat_entry."""
        path = str(walk_tree / "a" / "symlinks" / "README.md")
        assert await lstat_entry_async(path) == lstat_entry(path)

    @pytest.mark.asyncio
    async def test_list_directory_async(self, walk_tree: Path) -> None:
        """list_directory_async matches list_directory."""
        assert await list_directory_async(str(walk_tree)) == list_directory(str(walk_tree))

    @pytest.mark.asyncio
    async def test_resolve_symlink_async(self, linked_dir_tree: Path) -> None:
        """resolve_symlink_async matches resolve_symlink."""
        path = str(linked_dir_tree / "shortcut")
        assert await resolve_symlink_async(path) == resolve_symlink(path)

    @pytest.mark.asyncio
    async def test_stat_entry_async_missing(self, tmp_path: Path) -> None:
        """Errors surface unchanged from the executor."""
        with pytest.raises(FileNotFoundError):
            await stat_entry_async(str(tmp_path / "missing"))
