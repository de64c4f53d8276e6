"""Ancestor search.

This module provides find and find_sync, which look for a named file in
a directory and its parents, plus the predicate tagging helpers.
"""

from pathscout.search.finder import find, find_sync
from pathscout.search.models import FindOptions, SearchRequest
from pathscout.search.predicates import (
    AsyncPredicate,
    Predicate,
    SyncPredicate,
    as_predicate,
    async_predicate,
    sync_predicate,
)

__all__ = [
    "AsyncPredicate",
    "FindOptions",
    "Predicate",
    "SearchRequest",
    "SyncPredicate",
    "as_predicate",
    "async_predicate",
    "find",
    "find_sync",
    "sync_predicate",
]
