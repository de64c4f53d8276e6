"""Exclusion patterns for the tree walker.

A pattern is either a compiled regular expression, searched anywhere in
the full path, or a shell-style glob string matched against the full
path with fnmatch (so ``*/node_modules`` excludes every node_modules
directory, and with it the whole subtree).
"""

import fnmatch
import re
from collections.abc import Iterable

from pathscout.errors import InvalidOptionError

ExcludePattern = str | re.Pattern[str]


def is_excluded(path: str, patterns: Iterable[ExcludePattern]) -> bool:
    """Check whether a full path matches any exclusion pattern.

    Args:
        path: Full path of the candidate entry.
        patterns: Glob strings and/or compiled regular expressions.

    Returns:
        True if at least one pattern matches.
    """
    for pattern in patterns:
        if isinstance(pattern, re.Pattern):
            if pattern.search(path):
                return True
        elif fnmatch.fnmatch(path, pattern):
            return True

    return False


def build_patterns(
    globs: Iterable[str] = (),
    regexes: Iterable[str] = (),
) -> tuple[ExcludePattern, ...]:
    """Combine glob strings and regular expression sources into patterns.

    Args:
        globs: Shell-style glob patterns, kept as strings.
        regexes: Regular expression sources, compiled here.

    Returns:
        Tuple of patterns ready for WalkOptions.exclude.

    Raises:
        InvalidOptionError: If a regular expression does not compile.
    """
    patterns: list[ExcludePattern] = list(globs)
    for source in regexes:
        try:
            patterns.append(re.compile(source))
        except re.error as e:
            msg = f"Invalid exclude regex {source!r}: {e}"
            raise InvalidOptionError(msg) from e
    return tuple(patterns)


def validate_patterns(patterns: object) -> tuple[ExcludePattern, ...]:
    """Normalize an exclude option into a tuple of patterns.

    A single pattern is accepted as shorthand for a one-element tuple.

    Raises:
        InvalidOptionError: If the option or any element is not a
            string or compiled pattern.
    """
    if isinstance(patterns, (str, re.Pattern)):
        return (patterns,)
    if not isinstance(patterns, Iterable):
        msg = f"exclude must be a pattern or an iterable of patterns, got {type(patterns).__name__}"
        raise InvalidOptionError(msg)

    result = tuple(patterns)
    for pattern in result:
        if not isinstance(pattern, (str, re.Pattern)):
            msg = f"Exclude patterns must be str or re.Pattern, got {type(pattern).__name__}"
            raise InvalidOptionError(msg)
    return result
