"""Tree walker.

This module provides walk and walk_sync, which lazily enumerate a
directory tree with depth limiting, filtering and symlink handling.
"""

from pathscout.walker.exclude import ExcludePattern, build_patterns, is_excluded
from pathscout.walker.models import WalkEntry, WalkOptions
from pathscout.walker.walker import walk, walk_sync

__all__ = [
    "ExcludePattern",
    "WalkEntry",
    "WalkOptions",
    "build_patterns",
    "is_excluded",
    "walk",
    "walk_sync",
]
