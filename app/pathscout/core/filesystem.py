"""Filesystem access used by the ancestor search and the tree walker.

Every operation exists as a blocking function and, where the call
touches the disk, as a suspending twin that runs the blocking call on
the event loop's default executor via aiofiles.

Path helpers (split, join, normalize, resolve) are pure string
operations and have no suspending variant.
"""

import logging
import os
import stat
from dataclasses import dataclass

import aiofiles.os
from aiofiles.ospath import wrap

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EntryInfo:
    """Type flags observed by a stat call.

    Attributes:
        is_file: Entry is a regular file.
        is_directory: Entry is a directory.
        is_symlink: Entry is a symbolic link (only possible for lstat).
    """

    is_file: bool
    is_directory: bool
    is_symlink: bool

    @classmethod
    def from_stat(cls, result: os.stat_result) -> "EntryInfo":
        """Build type flags from a stat result's mode bits."""
        mode = result.st_mode
        return cls(
            is_file=stat.S_ISREG(mode),
            is_directory=stat.S_ISDIR(mode),
            is_symlink=stat.S_ISLNK(mode),
        )


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """A child reported by a directory listing.

    Type flags come from the listing itself and never follow symlinks,
    so a link is reported with is_symlink=True and both other flags False.

    Attributes:
        name: Basename of the child.
        is_file: Child is a regular file.
        is_directory: Child is a directory.
        is_symlink: Child is a symbolic link.
    """

    name: str
    is_file: bool
    is_directory: bool
    is_symlink: bool

    @classmethod
    def from_dir_entry(cls, entry: os.DirEntry[str]) -> "DirectoryEntry":
        """Build a listing entry from os.scandir output without following links."""
        is_symlink = entry.is_symlink()
        return cls(
            name=entry.name,
            is_file=not is_symlink and entry.is_file(follow_symlinks=False),
            is_directory=not is_symlink and entry.is_dir(follow_symlinks=False),
            is_symlink=is_symlink,
        )

    @property
    def info(self) -> EntryInfo:
        """Type flags from the listing, without the name."""
        return EntryInfo(
            is_file=self.is_file,
            is_directory=self.is_directory,
            is_symlink=self.is_symlink,
        )


@dataclass(frozen=True, slots=True)
class PathParts:
    """Result of splitting a path.

    Attributes:
        parent: Parent directory of the path (the path itself at the root).
        root: Filesystem root (anchor) the path lives under.
    """

    parent: str
    root: str


# =============================================================================
# Path helpers
# =============================================================================


def current_directory() -> str:
    """Return the process working directory."""
    return os.getcwd()


def normalize_path(path: str | os.PathLike[str]) -> str:
    """Collapse redundant separators and up-level references."""
    return os.path.normpath(os.fspath(path))


def resolve_path(path: str | os.PathLike[str]) -> str:
    """Return the absolute, normalized form of a path.

    Symlinks are left in place; only the lexical form is resolved.
    """
    return os.path.abspath(os.fspath(path))


def join_path(base: str | os.PathLike[str], *segments: str | os.PathLike[str]) -> str:
    """Join path segments onto a base path."""
    return os.path.join(os.fspath(base), *(os.fspath(s) for s in segments))


def split_path(path: str | os.PathLike[str]) -> PathParts:
    """Split an absolute path into its parent directory and filesystem root.

    Args:
        path: Absolute path to split.

    Returns:
        PathParts with the parent (equal to the path when already at the
        root) and the root anchor (``/`` on POSIX, ``C:\\`` on Windows).
    """
    path = os.fspath(path)
    drive, _ = os.path.splitdrive(path)
    return PathParts(parent=os.path.dirname(path), root=drive + os.sep)


# =============================================================================
# Blocking filesystem calls
# =============================================================================


def stat_entry(path: str) -> EntryInfo:
    """Stat a path, following symlinks.

    Raises:
        FileNotFoundError: If the path does not exist.
        OSError: For any other stat failure.
    """
    return EntryInfo.from_stat(os.stat(path))


def lstat_entry(path: str) -> EntryInfo:
    """Stat a path without following a final symlink."""
    return EntryInfo.from_stat(os.lstat(path))


def list_directory(path: str) -> list[DirectoryEntry]:
    """List the immediate children of a directory in listing order.

    The scandir handle is closed before returning.

    Raises:
        NotADirectoryError: If the path is not a directory.
        OSError: If the directory cannot be read.
    """
    with os.scandir(path) as it:
        entries = [DirectoryEntry.from_dir_entry(entry) for entry in it]
    logger.debug("Listed %d entries in %s", len(entries), path)
    return entries


def resolve_symlink(path: str) -> str:
    """Resolve every symlink in a path and return the real absolute path."""
    return os.path.realpath(path)


# =============================================================================
# Suspending filesystem calls
# =============================================================================

_lstat_async = wrap(os.lstat)
_list_directory_async = wrap(list_directory)
_realpath_async = wrap(os.path.realpath)


async def stat_entry_async(path: str) -> EntryInfo:
    """Suspending variant of stat_entry."""
    return EntryInfo.from_stat(await aiofiles.os.stat(path))


async def lstat_entry_async(path: str) -> EntryInfo:
    """Suspending variant of lstat_entry."""
    return EntryInfo.from_stat(await _lstat_async(path))


async def list_directory_async(path: str) -> list[DirectoryEntry]:
    """Suspending variant of list_directory."""
    return await _list_directory_async(path)


async def resolve_symlink_async(path: str) -> str:
    """Suspending variant of resolve_symlink."""
    return await _realpath_async(path)
