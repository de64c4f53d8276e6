"""Ancestor search: find a file in a directory or any of its parents.

Starting at ``cwd``, each candidate name is probed in order; the first
existing file that passes the optional predicate wins. The search then
moves to the parent directory and stops before testing ``stop`` (an
exclusive boundary) or after the filesystem root has been left behind.

Example:
    >>> from pathscout import find_sync
    >>> find_sync(["pyproject.toml", "setup.cfg"], cwd="src/pkg")
    '/home/me/project/pyproject.toml'
"""

import logging
from collections.abc import Iterator, Sequence

from pathscout.core.filesystem import (
    join_path,
    resolve_path,
    split_path,
    stat_entry,
    stat_entry_async,
)
from pathscout.errors import InvalidOptionError, SyncPredicateMisuseError
from pathscout.search.models import FindOptions, NameLike, SearchRequest
from pathscout.search.predicates import AsyncPredicate, Predicate, PredicateLike

logger = logging.getLogger(__name__)


async def find(
    names: NameLike | Sequence[NameLike],
    *,
    cwd: NameLike | None = None,
    stop: NameLike | None = None,
    test: PredicateLike | None = None,
    options: FindOptions | None = None,
) -> str | None:
    """Find a file in a directory and its parents.

    Args:
        names: File name, or names tried in order at each level.
        cwd: Directory to start from (default: process working directory).
        stop: Exclusive upper boundary (default: filesystem root of cwd).
        test: Optional predicate, synchronous or asynchronous.
        options: Prebuilt FindOptions, instead of cwd/stop/test.

    Returns:
        Absolute path of the first match, or None if nothing matched.

    Raises:
        InvalidOptionError: If the names or options are invalid.
        OSError: If probing a candidate fails for a reason other than
            the file not existing.
    """
    request = SearchRequest.build(names, _merge_options(options, cwd, stop, test))

    for directory in _ancestors(request):
        for name in request.names:
            file = resolve_path(join_path(directory, name))
            try:
                await stat_entry_async(file)
            except FileNotFoundError:
                continue
            if await _accepts(request.predicate, file):
                logger.debug("Found %s", file)
                return file

    return None


def find_sync(
    names: NameLike | Sequence[NameLike],
    *,
    cwd: NameLike | None = None,
    stop: NameLike | None = None,
    test: PredicateLike | None = None,
    options: FindOptions | None = None,
) -> str | None:
    """Blocking variant of find.

    Raises:
        SyncPredicateMisuseError: If test is asynchronous. Raised before
            any candidate is probed.
        InvalidOptionError: If the names or options are invalid.
        OSError: If probing a candidate fails for a reason other than
            the file not existing.
    """
    request = SearchRequest.build(names, _merge_options(options, cwd, stop, test))
    predicate = request.predicate
    if isinstance(predicate, AsyncPredicate):
        raise SyncPredicateMisuseError

    for directory in _ancestors(request):
        for name in request.names:
            file = resolve_path(join_path(directory, name))
            try:
                stat_entry(file)
            except FileNotFoundError:
                continue
            if predicate is None or predicate(file):
                logger.debug("Found %s", file)
                return file

    return None


def _ancestors(request: SearchRequest) -> Iterator[str]:
    """Yield the start directory and its parents, stopping before the boundary.

    The filesystem root also ends the walk, so a boundary that is not an
    ancestor of the start directory cannot cause an endless loop.
    """
    directory = request.start
    root = split_path(directory).root
    while directory not in (request.stop, root):
        yield directory
        parent = split_path(directory).parent
        logger.debug("Ascending from %s to %s", directory, parent)
        directory = parent


async def _accepts(predicate: Predicate | None, file: str) -> bool:
    if predicate is None:
        return True
    if isinstance(predicate, AsyncPredicate):
        return await predicate(file)
    return predicate(file)


def _merge_options(
    options: FindOptions | None,
    cwd: NameLike | None,
    stop: NameLike | None,
    test: PredicateLike | None,
) -> FindOptions:
    if options is None:
        return FindOptions(cwd=cwd, stop=stop, test=test)
    if cwd is not None or stop is not None or test is not None:
        msg = "Pass either options or cwd/stop/test keyword arguments, not both"
        raise InvalidOptionError(msg)
    return options
