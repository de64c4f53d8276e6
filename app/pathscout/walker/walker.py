"""Tree walker: lazily enumerate a directory tree.

Entries are produced in pre-order: a directory's entry comes before
its descendants, and siblings keep the order the directory listing
returned them in. Traversal keeps an explicit stack of open directory
listings rather than recursing, and a directory is listed only once the
consumer asks for the entry after its own.

Example:
    >>> from pathscout import walk_sync
    >>> for entry in walk_sync("src", max_depth=1, include_dirs=False):
    ...     print(entry.path)
"""

import dataclasses
import logging
import os
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from typing import Any

from pathscout.core.filesystem import (
    DirectoryEntry,
    EntryInfo,
    join_path,
    list_directory,
    list_directory_async,
    lstat_entry,
    lstat_entry_async,
    normalize_path,
    resolve_symlink,
    resolve_symlink_async,
    stat_entry,
    stat_entry_async,
)
from pathscout.errors import DirectoryListingError, InvalidOptionError
from pathscout.walker.exclude import is_excluded
from pathscout.walker.models import WalkEntry, WalkOptions

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Frame:
    """A directory whose children are being produced."""

    path: str
    depth: int | None
    children: Iterator[DirectoryEntry]


def walk(
    root: str | os.PathLike[str],
    options: WalkOptions | None = None,
    **overrides: Any,
) -> AsyncIterator[WalkEntry]:
    """Walk a directory tree, producing entries on demand.

    Options are validated when walk is called; the filesystem is not
    touched until the first entry is requested.

    Args:
        root: Directory to start from. Reported paths are built on it
            as given.
        options: Prebuilt WalkOptions (default: WalkOptions()).
        **overrides: WalkOptions fields replacing those in options,
            e.g. ``max_depth=2`` or ``exclude=["*/.git"]``.

    Returns:
        Async iterator of WalkEntry.

    Raises:
        InvalidOptionError: If an option is unknown or invalid.
        DirectoryListingError: While iterating, if a directory cannot
            be listed.
        OSError: While iterating, if a stat or symlink resolution fails.
    """
    return _walk_async(os.fspath(root), _resolve_options(options, overrides))


def walk_sync(
    root: str | os.PathLike[str],
    options: WalkOptions | None = None,
    **overrides: Any,
) -> Iterator[WalkEntry]:
    """Blocking variant of walk.

    Returns:
        Iterator of WalkEntry.
    """
    return _walk_sync(os.fspath(root), _resolve_options(options, overrides))


def _walk_sync(root: str, options: WalkOptions) -> Iterator[WalkEntry]:
    if _exhausted(options.max_depth):
        return

    stack: list[_Frame] = []
    emit, descend = _plan_directory(root, options.max_depth, options)
    if emit:
        yield WalkEntry.from_info(root, stat_entry(root))
    if descend:
        stack.append(_Frame(root, options.max_depth, _list_sync(root)))

    while stack:
        frame = stack[-1]
        child = next(frame.children, None)
        if child is None:
            stack.pop()
            continue

        path = join_path(frame.path, child.name)
        if child.is_symlink and not options.follow_symlinks:
            if options.include_symlinks and not is_excluded(path, options.exclude):
                yield WalkEntry.unresolved_symlink(child.name, path)
            continue

        info = _resolve_sync(path) if child.is_symlink else child.info
        if info.is_directory or info.is_symlink:
            depth = _decrement(frame.depth)
            emit, descend = _plan_directory(path, depth, options)
            if emit:
                yield WalkEntry.from_info(path, stat_entry(path), name=child.name)
            if descend:
                stack.append(_Frame(path, depth, _list_sync(path)))
        elif options.include_files and not is_excluded(path, options.exclude):
            yield WalkEntry.from_info(path, info, name=child.name)


async def _walk_async(root: str, options: WalkOptions) -> AsyncIterator[WalkEntry]:
    if _exhausted(options.max_depth):
        return

    stack: list[_Frame] = []
    emit, descend = _plan_directory(root, options.max_depth, options)
    if emit:
        yield WalkEntry.from_info(root, await stat_entry_async(root))
    if descend:
        stack.append(_Frame(root, options.max_depth, await _list_async(root)))

    while stack:
        frame = stack[-1]
        child = next(frame.children, None)
        if child is None:
            stack.pop()
            continue

        path = join_path(frame.path, child.name)
        if child.is_symlink and not options.follow_symlinks:
            if options.include_symlinks and not is_excluded(path, options.exclude):
                yield WalkEntry.unresolved_symlink(child.name, path)
            continue

        info = await _resolve_async(path) if child.is_symlink else child.info
        if info.is_directory or info.is_symlink:
            depth = _decrement(frame.depth)
            emit, descend = _plan_directory(path, depth, options)
            if emit:
                yield WalkEntry.from_info(path, await stat_entry_async(path), name=child.name)
            if descend:
                stack.append(_Frame(path, depth, await _list_async(path)))
        elif options.include_files and not is_excluded(path, options.exclude):
            yield WalkEntry.from_info(path, info, name=child.name)


def _resolve_options(options: WalkOptions | None, overrides: dict[str, Any]) -> WalkOptions:
    base = options or WalkOptions()
    if not overrides:
        return base
    try:
        return dataclasses.replace(base, **overrides)
    except TypeError as e:
        msg = f"Unknown walk option: {e}"
        raise InvalidOptionError(msg) from e


def _plan_directory(path: str, depth: int | None, options: WalkOptions) -> tuple[bool, bool]:
    """Decide whether to yield a directory's entry and whether to descend into it.

    Returns:
        Tuple of (emit entry, list children).
    """
    if is_excluded(path, options.exclude):
        logger.debug("Excluded %s", path)
        return False, False
    return options.include_dirs, depth is None or depth >= 1


def _exhausted(depth: int | None) -> bool:
    return depth is not None and depth < 0


def _decrement(depth: int | None) -> int | None:
    return None if depth is None else depth - 1


def _resolve_sync(path: str) -> EntryInfo:
    # The real path is re-checked with lstat: the entity may have been
    # replaced between the listing and the resolution.
    real = resolve_symlink(path)
    logger.debug("Resolved symlink %s -> %s", path, real)
    return lstat_entry(real)


async def _resolve_async(path: str) -> EntryInfo:
    real = await resolve_symlink_async(path)
    logger.debug("Resolved symlink %s -> %s", path, real)
    return await lstat_entry_async(real)


def _list_sync(path: str) -> Iterator[DirectoryEntry]:
    try:
        return iter(list_directory(path))
    except OSError as e:
        raise DirectoryListingError(normalize_path(path), e) from e


async def _list_async(path: str) -> Iterator[DirectoryEntry]:
    try:
        return iter(await list_directory_async(path))
    except OSError as e:
        raise DirectoryListingError(normalize_path(path), e) from e
