"""Value objects for the ancestor search.

FindOptions holds the optional caller settings; SearchRequest is the
fully resolved, immutable request a single search runs against.
"""

import os
from collections.abc import Sequence
from dataclasses import dataclass

from pathscout.core.filesystem import current_directory, resolve_path, split_path
from pathscout.errors import InvalidOptionError
from pathscout.search.predicates import Predicate, PredicateLike, as_predicate

NameLike = str | os.PathLike[str]


@dataclass(frozen=True, slots=True)
class FindOptions:
    """Optional settings for find and find_sync.

    Attributes:
        cwd: Directory to start searching from (default: process working directory).
        stop: Exclusive upper boundary (default: filesystem root of cwd).
        test: Predicate gating a match (default: every existing file matches).
    """

    cwd: NameLike | None = None
    stop: NameLike | None = None
    test: PredicateLike | None = None


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """A resolved ancestor search.

    Attributes:
        names: Candidate file names, tried in order at each level.
        start: Absolute, normalized directory the search starts from.
        stop: Absolute, normalized exclusive boundary.
        predicate: Tagged predicate, or None to accept any existing file.
    """

    names: tuple[str, ...]
    start: str
    stop: str
    predicate: Predicate | None

    @classmethod
    def build(cls, names: NameLike | Sequence[NameLike], options: FindOptions) -> "SearchRequest":
        """Resolve names and options into a search request.

        The working directory default is read once here.

        Raises:
            InvalidOptionError: If no candidate names are given or the
                test is not callable.
        """
        start = resolve_path(options.cwd or current_directory())
        stop = resolve_path(options.stop) if options.stop else split_path(start).root
        return cls(
            names=_normalize_names(names),
            start=start,
            stop=stop,
            predicate=as_predicate(options.test),
        )


def _normalize_names(names: NameLike | Sequence[NameLike]) -> tuple[str, ...]:
    """Turn a single name or a sequence of names into a tuple of strings."""
    if isinstance(names, (str, os.PathLike)):
        result = (os.fspath(names),)
    else:
        result = tuple(os.fspath(name) for name in names)
    if not result:
        msg = "At least one file name is required"
        raise InvalidOptionError(msg)
    if not all(result):
        msg = "File names cannot be empty"
        raise InvalidOptionError(msg)
    return result
