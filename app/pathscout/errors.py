"""Exception hierarchy for pathscout.

All library errors derive from PathscoutError. Filesystem errors raised
by the operating system are propagated unchanged, except where a walk
fails to list a directory, which is wrapped in DirectoryListingError.
"""

SYNC_PREDICATE_MISUSE_MESSAGE = "You are using a async test in sync mode."


class PathscoutError(Exception):
    """Base exception for pathscout errors."""


class InvalidOptionError(PathscoutError, ValueError):
    """Raised when find or walk options fail validation."""


class SyncPredicateMisuseError(PathscoutError, TypeError):
    """Raised when find_sync is given an asynchronous predicate."""

    def __init__(self, message: str = SYNC_PREDICATE_MISUSE_MESSAGE) -> None:
        super().__init__(message)


class DirectoryListingError(PathscoutError):
    """Raised when a walk cannot list a directory.

    Attributes:
        path: Normalized path of the directory that could not be listed.
    """

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        super().__init__(f'Error walking path "{path}": {cause}')
