"""Tagged predicates for the ancestor search.

A predicate decides whether an existing candidate file counts as a
match. Predicates carry their execution mode as a type tag so that
find_sync can refuse an asynchronous predicate before touching the
filesystem, without calling it and inspecting what comes back.

Plain callables are tagged once from their declared mode: ``async def``
functions (and objects whose ``__call__`` is ``async def``) become
AsyncPredicate, everything else SyncPredicate.
"""

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from pathscout.errors import InvalidOptionError, SyncPredicateMisuseError


@dataclass(frozen=True, slots=True)
class SyncPredicate:
    """Predicate that runs to completion on the calling thread.

    Attributes:
        func: Callable receiving the candidate path. Its result is
            interpreted by truthiness.
    """

    func: Callable[[str], object]

    def __post_init__(self) -> None:
        """Refuse coroutine functions, whose result would always be truthy."""
        if is_async_callable(self.func):
            raise SyncPredicateMisuseError

    def __call__(self, path: str) -> bool:
        return bool(self.func(path))


@dataclass(frozen=True, slots=True)
class AsyncPredicate:
    """Predicate that suspends; only usable with the suspending find.

    Attributes:
        func: Coroutine function receiving the candidate path. The
            awaited result is interpreted by truthiness.
    """

    func: Callable[[str], Awaitable[object]]

    async def __call__(self, path: str) -> bool:
        return bool(await self.func(path))


Predicate = SyncPredicate | AsyncPredicate
PredicateLike = Predicate | Callable[[str], object]


def sync_predicate(func: Callable[[str], object]) -> SyncPredicate:
    """Tag a callable as a synchronous predicate (usable as a decorator).

    Raises:
        SyncPredicateMisuseError: If func is a coroutine function.
    """
    return SyncPredicate(func)


def async_predicate(func: Callable[[str], Awaitable[object]]) -> AsyncPredicate:
    """Tag a coroutine function as an asynchronous predicate (usable as a decorator)."""
    return AsyncPredicate(func)


def is_async_callable(func: object) -> bool:
    """Check whether a callable is declared as a coroutine function."""
    if inspect.iscoroutinefunction(func):
        return True
    call = getattr(func, "__call__", None)  # noqa: B004
    return call is not None and inspect.iscoroutinefunction(call)


def as_predicate(test: PredicateLike | None) -> Predicate | None:
    """Normalize a user-supplied test into a tagged predicate.

    Args:
        test: A tagged predicate, a plain callable, or None.

    Returns:
        The tagged predicate, or None when no test was supplied.

    Raises:
        InvalidOptionError: If test is neither None nor callable.
    """
    if test is None or isinstance(test, (SyncPredicate, AsyncPredicate)):
        return test
    if not callable(test):
        msg = f"test must be callable, got {type(test).__name__}"
        raise InvalidOptionError(msg)
    if is_async_callable(test):
        return AsyncPredicate(test)  # type: ignore[arg-type]
    return SyncPredicate(test)
