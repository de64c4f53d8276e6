"""Value objects for the tree walker.

This module defines the entries produced by a walk and the immutable
options a walk runs with.
"""

import os
from dataclasses import dataclass, field

from pathscout.core.filesystem import EntryInfo
from pathscout.errors import InvalidOptionError
from pathscout.walker.exclude import ExcludePattern, validate_patterns


@dataclass(frozen=True, slots=True)
class WalkEntry:
    """A filesystem object observed during a walk.

    Entries own no resources. For a symlink that was not followed,
    is_symlink is True and both type flags are False. A followed symlink
    reports its target's type with is_symlink False.

    Attributes:
        name: Basename of the entry.
        path: Full path of the entry.
        is_file: Entry is a regular file.
        is_directory: Entry is a directory.
        is_symlink: Entry is an unresolved symbolic link.
    """

    name: str
    path: str
    is_file: bool
    is_directory: bool
    is_symlink: bool

    @classmethod
    def from_info(cls, path: str, info: EntryInfo, name: str | None = None) -> "WalkEntry":
        """Build an entry from observed type flags.

        Args:
            path: Full path of the entry.
            info: Type flags from stat or the directory listing.
            name: Basename override (default: derived from path).
        """
        return cls(
            name=name if name is not None else os.path.basename(os.path.normpath(path)),
            path=path,
            is_file=info.is_file,
            is_directory=info.is_directory,
            is_symlink=info.is_symlink,
        )

    @classmethod
    def unresolved_symlink(cls, name: str, path: str) -> "WalkEntry":
        """Build an entry for a symlink whose target type is left unresolved."""
        return cls(name=name, path=path, is_file=False, is_directory=False, is_symlink=True)

    def to_dict(self) -> dict[str, str | bool]:
        """Convert the entry to a JSON-serializable dictionary."""
        return {
            "name": self.name,
            "path": self.path,
            "is_file": self.is_file,
            "is_directory": self.is_directory,
            "is_symlink": self.is_symlink,
        }


@dataclass(frozen=True, slots=True)
class WalkOptions:
    """Options controlling a walk.

    Attributes:
        max_depth: Directory-descent steps permitted below the root.
            None means unbounded; a negative value yields nothing.
        include_files: Yield file entries.
        include_dirs: Yield directory entries (directories are still
            descended into when False).
        include_symlinks: Yield unresolved symlink entries. Only
            meaningful when follow_symlinks is False.
        follow_symlinks: Resolve symlinks, report the target's type and
            descend into linked directories.
        exclude: Patterns tested against full paths; a match suppresses
            the entry and, for directories, its subtree.
    """

    max_depth: int | None = None
    include_files: bool = True
    include_dirs: bool = True
    include_symlinks: bool = True
    follow_symlinks: bool = False
    exclude: tuple[ExcludePattern, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate the depth limit and normalize exclude patterns."""
        depth = self.max_depth
        if depth is not None and (isinstance(depth, bool) or not isinstance(depth, int)):
            msg = f"max_depth must be an integer or None, got {depth!r}"
            raise InvalidOptionError(msg)
        object.__setattr__(self, "exclude", validate_patterns(self.exclude))
