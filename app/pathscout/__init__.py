"""pathscout - find files upward and walk directory trees downward.

Both operations come in a suspending (asyncio) and a blocking form:

- find / find_sync: search a directory and its parents for a file.
- walk / walk_sync: lazily enumerate a directory tree.
"""

from pathscout.errors import (
    DirectoryListingError,
    InvalidOptionError,
    PathscoutError,
    SyncPredicateMisuseError,
)
from pathscout.search import (
    AsyncPredicate,
    FindOptions,
    SyncPredicate,
    async_predicate,
    find,
    find_sync,
    sync_predicate,
)
from pathscout.walker import WalkEntry, WalkOptions, walk, walk_sync

__version__ = "0.1.0"

__all__ = [
    "AsyncPredicate",
    "DirectoryListingError",
    "FindOptions",
    "InvalidOptionError",
    "PathscoutError",
    "SyncPredicate",
    "SyncPredicateMisuseError",
    "WalkEntry",
    "WalkOptions",
    "__version__",
    "async_predicate",
    "find",
    "find_sync",
    "sync_predicate",
    "walk",
    "walk_sync",
]
